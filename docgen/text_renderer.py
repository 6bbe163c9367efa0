"""
Plain-text versions of the Notice and MOM.

Same content as the RTF documents; headings are made bold by substituting
Mathematical Bold code points for letters and digits.
"""

from .content import (
    AGENDA_LABEL, ATTENDANCE_LINE, COPY_TO_LABEL, COPY_TO_RECIPIENTS,
    DATE_LABEL, MINUTES_LABEL, NOTICE_DEPARTMENT, NOTICE_TITLE,
    SIGNATORY_LINE, TIME_LABEL, VENUE_LABEL,
    agenda_lines, closing_line, discussion_lines, mom_date_value,
    notice_body_sentence,
)
from .records import MomRecord, NoticeRecord


def _bold_range(first: str, last: str, bold_first: int) -> dict:
    return {
        chr(code): chr(bold_first + offset)
        for offset, code in enumerate(range(ord(first), ord(last) + 1))
    }


# U+1D400 MATHEMATICAL BOLD CAPITAL A, U+1D41A small a, U+1D7CE bold digit zero
BOLD_MAP = {
    **_bold_range('A', 'Z', 0x1D400),
    **_bold_range('a', 'z', 0x1D41A),
    **_bold_range('0', '9', 0x1D7CE),
}

_BOLD_TABLE = str.maketrans(BOLD_MAP)


def to_bold_unicode(text: str) -> str:
    """Bold A-Z, a-z and 0-9; every other character passes through."""
    return (text or '').translate(_BOLD_TABLE)


def notice_text(record: NoticeRecord) -> str:
    lines = [
        f"{to_bold_unicode(DATE_LABEL)} - {record.date}",
        NOTICE_DEPARTMENT,
        NOTICE_TITLE,
        '',
        notice_body_sentence(record),
        '',
        ATTENDANCE_LINE,
    ]
    if record.extra_blank:
        lines.append('')
    lines.append(SIGNATORY_LINE)
    lines.append(COPY_TO_LABEL)
    lines.extend(f"• {recipient}" for recipient in COPY_TO_RECIPIENTS)
    return '\n'.join(lines) + '\n'


def mom_text(record: MomRecord) -> str:
    lines = [
        record.department,
        '',
        f"{to_bold_unicode(DATE_LABEL)} - {mom_date_value(record)}",
        f"{to_bold_unicode(TIME_LABEL)} {record.time}",
        f"{to_bold_unicode(VENUE_LABEL)} {record.venue}",
        '',
    ]

    if record.agenda_items:
        lines.append(to_bold_unicode(AGENDA_LABEL))
        lines.extend(agenda_lines(record))
        lines.append('')

    lines.append(to_bold_unicode(MINUTES_LABEL))
    if record.discussion:
        lines.extend(discussion_lines(record))
        lines.append('')

    lines.append(closing_line(record))
    return '\n'.join(lines) + '\n'
