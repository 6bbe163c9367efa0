"""
Unit tests for the plain-text renderer and Mathematical Bold substitution.
"""
import string

import pytest

from docgen.content import COPY_TO_RECIPIENTS, discussion_lines
from docgen.records import CLOSING_STATEMENT, MomRecord, NoticeRecord
from docgen.rtf_builder import build_mom_rtf
from docgen.text_renderer import mom_text, notice_text, to_bold_unicode


class TestToBoldUnicode:

    @pytest.mark.parametrize("char,code", [
        ("A", 0x1D400), ("Z", 0x1D419),
        ("a", 0x1D41A), ("z", 0x1D433),
        ("0", 0x1D7CE), ("9", 0x1D7D7),
    ])
    def test_range_bounds(self, char, code):
        assert to_bold_unicode(char) == chr(code)

    def test_other_characters_pass_through(self):
        assert to_bold_unicode("Date: - é!") == (
            to_bold_unicode("Date") + ": - é!"
        )

    def test_code_point_count_preserved(self):
        text = string.ascii_letters + string.digits + " :-,"
        assert len(to_bold_unicode(text)) == len(text)

    def test_empty(self):
        assert to_bold_unicode("") == ""
        assert to_bold_unicode(None) == ""


class TestNoticeText:

    def test_layout(self, notice_record):
        lines = notice_text(notice_record).split("\n")
        assert lines[0] == to_bold_unicode("Date:") + " - 08 January 2025"
        assert lines[1] == "Department of Computer Science & Engineering"
        assert lines[2] == "NOTICE"
        assert lines[3] == ""
        assert "Wednesday, 08 January 2025" in lines[4]
        assert lines[-5] == "Copy to:"
        assert lines[-4:-1] == [f"• {r}" for r in COPY_TO_RECIPIENTS]
        assert lines[-1] == ""

    def test_extra_blank(self, notice_record):
        extra = NoticeRecord(**{**notice_record.__dict__, "extra_blank": True})
        assert len(notice_text(extra).split("\n")) == len(notice_text(notice_record).split("\n")) + 1


class TestMomText:

    def test_layout(self, mom_record):
        text = mom_text(mom_record)
        lines = text.split("\n")
        assert lines[0] == mom_record.department
        assert lines[2] == to_bold_unicode("Date:") + " - 15 March 2025"
        assert lines[3] == to_bold_unicode("Time:") + " 10:30 AM"
        assert lines[4] == to_bold_unicode("Venue:") + " Conference Room"
        assert to_bold_unicode("Agenda:") in lines
        assert "1. Faculty workload" in lines
        assert lines[-2] == CLOSING_STATEMENT

    def test_same_content_as_rtf(self, mom_record):
        text = mom_text(mom_record)
        rtf = build_mom_rtf(mom_record)
        for line in discussion_lines(mom_record):
            assert line in text
            assert line in rtf

    def test_sections_omitted_when_empty(self):
        text = mom_text(MomRecord(date="d", time="t", venue="v"))
        assert to_bold_unicode("Agenda:") not in text
        assert to_bold_unicode("Minutes of Meeting:") in text
