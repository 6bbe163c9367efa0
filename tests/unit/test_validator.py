"""
Unit tests for required-field validation.
"""
import pytest

from docgen.records import MomRecord, NoticeRecord
from docgen.validator import (
    DocumentValidationError,
    ValidationResult,
    validate_mom,
    validate_notice,
)


class TestValidateNotice:

    def test_valid(self, notice_record):
        result = validate_notice(notice_record)
        assert result.valid
        assert result.errors == []

    def test_all_errors_reported_in_order(self):
        result = validate_notice(NoticeRecord())
        assert result.errors == [
            "Date is required",
            "Time is required",
            "Venue is required",
            "Agenda/Subject is required",
        ]

    def test_whitespace_is_blank(self, notice_record):
        record = NoticeRecord(**{**notice_record.__dict__, "venue": "   "})
        assert validate_notice(record).errors == ["Venue is required"]


class TestValidateMom:

    def test_valid(self, mom_record):
        assert validate_mom(mom_record).valid

    def test_all_errors_reported_in_order(self):
        result = validate_mom(MomRecord())
        assert result.errors == [
            "Date is required",
            "Time is required",
            "Venue is required",
            "At least one agenda item is required",
            "Key Discussion Points are required",
        ]

    def test_blank_discussion(self, mom_record):
        record = MomRecord(**{**mom_record.__dict__, "discussion": "\n  \n"})
        assert validate_mom(record).errors == ["Key Discussion Points are required"]


class TestValidationResult:

    def test_raise_for_errors(self):
        result = ValidationResult(["Date is required", "Time is required"])
        with pytest.raises(DocumentValidationError) as exc_info:
            result.raise_for_errors()
        assert exc_info.value.errors == ["Date is required", "Time is required"]
        assert str(exc_info.value) == "Date is required. Time is required"

    def test_no_raise_when_valid(self):
        ValidationResult().raise_for_errors()

    def test_to_dict(self):
        assert ValidationResult(["x"]).to_dict() == {"valid": False, "errors": ["x"]}
