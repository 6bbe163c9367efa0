"""
Unit tests for the document generation service.
"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock

from ai_providers.base import AIConfigurationError, ExternalGenerationError
from ai_providers.minutes_source import MinutesRequest
from docgen.generator import (
    generate_filename,
    generate_mom_documents,
    generate_notice_documents,
    render_mom_documents,
)
from docgen.records import CLOSING_STATEMENT, MomRecord, NoticeRecord
from docgen.rtf_builder import build_mom_rtf
from docgen.text_renderer import mom_text
from docgen.validator import DocumentValidationError


NOW = datetime(2025, 1, 8, 11, 5)


class TestNoticeGeneration:

    def test_pair_generated(self, notice_record):
        docs = generate_notice_documents(notice_record)
        assert docs.rtf.content.startswith("{\\rtf1")
        assert docs.rtf.media_type == "application/rtf"
        assert docs.text.media_type == "text/plain"
        assert docs.text_source == "template"
        assert docs.warnings == []

    def test_filenames(self, notice_record):
        docs = generate_notice_documents(notice_record)
        assert docs.rtf.filename(NOW) == "notice_20250108_1105.rtf"
        assert docs.text.filename(NOW) == "notice_20250108_1105.txt"

    def test_invalid_raises_with_all_errors(self):
        with pytest.raises(DocumentValidationError) as exc_info:
            generate_notice_documents(NoticeRecord(date="08 January 2025"))
        assert len(exc_info.value.errors) == 3

    def test_save(self, notice_record, tmp_path):
        paths = generate_notice_documents(notice_record).save(tmp_path / "out", NOW)
        assert [p.name for p in paths] == ["notice_20250108_1105.rtf", "notice_20250108_1105.txt"]
        assert paths[1].read_text(encoding="utf-8").startswith("\U0001D403")  # bold 'D'


def test_generate_filename():
    assert generate_filename("mom", "txt", NOW) == "mom_20250108_1105.txt"


class TestMomGeneration:

    def test_template_render(self, mom_record):
        docs = render_mom_documents(mom_record)
        assert docs.rtf.content == build_mom_rtf(mom_record)
        assert docs.text.content == mom_text(mom_record)
        assert docs.rtf.filename(NOW) == "mom_20250108_1105.rtf"

    def test_external_text_replaces_only_text(self, mom_record):
        docs = render_mom_documents(mom_record, external_text="AI TEXT")
        assert docs.text.content == "AI TEXT"
        assert docs.rtf.content == build_mom_rtf(mom_record)
        assert docs.text_source == "ai"

    def test_empty_external_text_uses_template(self, mom_record):
        docs = render_mom_documents(mom_record, external_text="")
        assert docs.text.content == mom_text(mom_record)
        assert docs.text_source == "template"

    @pytest.mark.asyncio
    async def test_without_text_source(self, mom_record):
        docs = await generate_mom_documents(mom_record)
        assert docs.text.content == mom_text(mom_record)

    @pytest.mark.asyncio
    async def test_with_text_source(self, mom_record, mock_text_source):
        docs = await generate_mom_documents(mom_record, mock_text_source)
        assert docs.text.content == "AI MINUTES"
        assert docs.text_source == "ai"
        mock_text_source.generate_minutes.assert_awaited_once()
        request = mock_text_source.generate_minutes.await_args.args[0]
        assert isinstance(request, MinutesRequest)
        assert request.agenda_items == ("Faculty workload", "Syllabus revision")
        assert request.closing_statement == CLOSING_STATEMENT

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        ExternalGenerationError("boom"),
        AIConfigurationError("boom"),
    ])
    async def test_failure_falls_back_to_template(self, mom_record, error):
        source = AsyncMock()
        source.generate_minutes = AsyncMock(side_effect=error)
        docs = await generate_mom_documents(mom_record, source)
        assert docs.text.content == mom_text(mom_record)
        assert docs.text_source == "template"
        assert docs.warnings == ["AI generation failed, used template instead: boom"]

    @pytest.mark.asyncio
    async def test_invalid_record_skips_text_source(self, mock_text_source):
        with pytest.raises(DocumentValidationError):
            await generate_mom_documents(MomRecord(date="x"), mock_text_source)
        mock_text_source.generate_minutes.assert_not_awaited()
