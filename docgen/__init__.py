"""
Notice and Minutes of Meeting document generation.

Usage:
    from docgen import NoticeRecord, generate_notice_documents

    docs = generate_notice_documents(NoticeRecord(
        date="08 January 2025", time="11:00 AM", venue="Seminar Hall",
        agenda="NBA documentation", include_day=True,
    ))
    print(docs.rtf.content)
    print(docs.text.content)
"""

from .records import (
    CLOSING_STATEMENT,
    FontChoice,
    MomRecord,
    NoticeRecord,
    resolve_closing_statement,
)
from .escaping import escape_rtf, encode_unicode, rtf_text, unescape_rtf
from .dates import weekday_name, format_date_with_day, parse_meeting_date
from .points import parse_points, parse_multiline_input
from .elaboration import ELABORATION_RULES, ElaborationRule, elaborate
from .rtf_builder import build_notice_rtf, build_mom_rtf, group_balance, is_balanced
from .text_renderer import to_bold_unicode, notice_text, mom_text
from .validator import (
    DocumentValidationError,
    ValidationResult,
    validate_mom,
    validate_notice,
)
from .generator import (
    GeneratedDocuments,
    RenderedDocument,
    generate_filename,
    generate_mom_documents,
    generate_notice_documents,
    render_mom_documents,
)

__all__ = [
    # Records
    "CLOSING_STATEMENT",
    "FontChoice",
    "MomRecord",
    "NoticeRecord",
    "resolve_closing_statement",
    # Text helpers
    "escape_rtf",
    "encode_unicode",
    "rtf_text",
    "unescape_rtf",
    "weekday_name",
    "format_date_with_day",
    "parse_meeting_date",
    "parse_points",
    "parse_multiline_input",
    "ELABORATION_RULES",
    "ElaborationRule",
    "elaborate",
    # Renderers
    "build_notice_rtf",
    "build_mom_rtf",
    "group_balance",
    "is_balanced",
    "to_bold_unicode",
    "notice_text",
    "mom_text",
    # Validation
    "DocumentValidationError",
    "ValidationResult",
    "validate_mom",
    "validate_notice",
    # Service
    "GeneratedDocuments",
    "RenderedDocument",
    "generate_filename",
    "generate_mom_documents",
    "generate_notice_documents",
    "render_mom_documents",
]
