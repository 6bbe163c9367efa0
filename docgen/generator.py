#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Document generation service.

Validates a record, then produces the RTF and plain-text documents as a
pair. For the MOM an external text source may replace the plain-text
output; the RTF is always built from the template and the template text is
used whenever the external source fails.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ai_providers.base import AIConfigurationError, ExternalGenerationError
from config.constants import (
    RTF_EXTENSION, RTF_MEDIA_TYPE, TEXT_EXTENSION, TEXT_MEDIA_TYPE,
)
from config.logging_config import get_logger

from .records import MomRecord, NoticeRecord
from .rtf_builder import build_mom_rtf, build_notice_rtf
from .text_renderer import mom_text, notice_text
from .validator import validate_mom, validate_notice

logger = get_logger(__name__)

TEMPLATE_SOURCE = "template"
AI_SOURCE = "ai"

_FORMATS = {
    RTF_EXTENSION: RTF_MEDIA_TYPE,
    TEXT_EXTENSION: TEXT_MEDIA_TYPE,
}


def generate_filename(kind: str, extension: str, now: Optional[datetime] = None) -> str:
    """e.g. notice_20250108_1130.rtf"""
    now = now or datetime.now()
    return f"{kind}_{now:%Y%m%d}_{now:%H%M}.{extension}"


@dataclass(frozen=True)
class RenderedDocument:
    """One generated document and how it should be offered for download."""
    content: str
    kind: str       # notice | mom
    extension: str  # rtf | txt

    @property
    def media_type(self) -> str:
        return _FORMATS[self.extension]

    def filename(self, now: Optional[datetime] = None) -> str:
        return generate_filename(self.kind, self.extension, now)


@dataclass
class GeneratedDocuments:
    """RTF and plain-text pair for one submission."""
    rtf: RenderedDocument
    text: RenderedDocument
    warnings: List[str] = field(default_factory=list)
    text_source: str = TEMPLATE_SOURCE

    def save(self, output_dir: Path, now: Optional[datetime] = None) -> List[Path]:
        """Write both documents to output_dir; returns the written paths."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        now = now or datetime.now()
        paths = []
        for document in (self.rtf, self.text):
            path = output_dir / document.filename(now)
            path.write_text(document.content, encoding='utf-8')
            paths.append(path)
        logger.info(f"Saved {', '.join(p.name for p in paths)} to {output_dir}")
        return paths


def generate_notice_documents(record: NoticeRecord) -> GeneratedDocuments:
    """
    Validate and render a Notice.

    Raises:
        DocumentValidationError: Required fields are missing (all listed)
    """
    result = validate_notice(record)
    if not result.valid:
        logger.warning(f"Notice validation failed: {result.errors}")
    result.raise_for_errors()

    documents = GeneratedDocuments(
        rtf=RenderedDocument(build_notice_rtf(record), "notice", RTF_EXTENSION),
        text=RenderedDocument(notice_text(record), "notice", TEXT_EXTENSION),
    )
    logger.info(f"Notice generated for {record.date} at {record.venue}")
    return documents


def render_mom_documents(record: MomRecord, external_text: Optional[str] = None) -> GeneratedDocuments:
    """
    Validate and render a MOM.

    Args:
        record: MOM data
        external_text: Pre-formatted text from an alternate source; replaces
                       the template plain text, never the RTF

    Raises:
        DocumentValidationError: Required fields are missing (all listed)
    """
    result = validate_mom(record)
    if not result.valid:
        logger.warning(f"MOM validation failed: {result.errors}")
    result.raise_for_errors()

    text = external_text if external_text else mom_text(record)
    documents = GeneratedDocuments(
        rtf=RenderedDocument(build_mom_rtf(record), "mom", RTF_EXTENSION),
        text=RenderedDocument(text, "mom", TEXT_EXTENSION),
        text_source=AI_SOURCE if external_text else TEMPLATE_SOURCE,
    )
    logger.info(
        f"MOM generated for {record.date}: {len(record.agenda_items)} agenda item(s), "
        f"text source={documents.text_source}"
    )
    return documents


async def generate_mom_documents(record: MomRecord, text_source=None) -> GeneratedDocuments:
    """
    Render a MOM, optionally taking the plain text from an external source.

    Args:
        record: MOM data
        text_source: Object with ``async generate_minutes(request) -> str``
                     (e.g. ai_providers.MinutesTextSource); None uses templates

    On AIConfigurationError or ExternalGenerationError the template text is
    used and a warning is attached to the result.
    """
    # Fail on missing fields before spending a provider call
    validate_mom(record).raise_for_errors()

    if text_source is None:
        return render_mom_documents(record)

    from ai_providers.minutes_source import MinutesRequest

    try:
        external_text = await text_source.generate_minutes(MinutesRequest.from_record(record))
    except (AIConfigurationError, ExternalGenerationError) as e:
        logger.warning(f"AI generation failed, falling back to template: {e}")
        documents = render_mom_documents(record)
        documents.warnings.append(f"AI generation failed, used template instead: {e}")
        return documents

    return render_mom_documents(record, external_text=external_text)
