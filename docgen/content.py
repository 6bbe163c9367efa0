"""
Document content shared by the RTF builder and the plain-text renderer.

Both renderers take every derived string (date with weekday, body sentence,
numbered agenda and elaborated discussion lines) from here, so the two
outputs cannot drift apart.
"""

from typing import List, Sequence

from config.constants import DEFAULT_DEPARTMENT, HOD_SIGNATORY

from .dates import format_date_with_day
from .elaboration import elaborate
from .points import parse_points
from .records import MomRecord, NoticeRecord, resolve_closing_statement


NOTICE_TITLE = 'NOTICE'
NOTICE_DEPARTMENT = DEFAULT_DEPARTMENT
ATTENDANCE_LINE = 'All faculty members are requested to attend the meeting on time.'
SIGNATORY_LINE = HOD_SIGNATORY
COPY_TO_LABEL = 'Copy to:'
COPY_TO_RECIPIENTS = (
    'All faculty members of CSE',
    'Principal – for kind Information',
    'Chairman (BG) for kind information',
)

DATE_LABEL = 'Date:'
TIME_LABEL = 'Time:'
VENUE_LABEL = 'Venue:'
AGENDA_LABEL = 'Agenda:'
MINUTES_LABEL = 'Minutes of Meeting:'


def notice_body_sentence(record: NoticeRecord) -> str:
    date_text = format_date_with_day(record.date, record.include_day)
    return (
        f"A departmental meeting is scheduled on {date_text} at {record.time} "
        f"in the {record.venue}, regarding the preparation and coordination of "
        f"{record.agenda}."
    )


def mom_date_value(record: MomRecord) -> str:
    return format_date_with_day(record.date, record.include_day)


def numbered(items: Sequence[str]) -> List[str]:
    """1-based "N. item" lines."""
    return [f"{index}. {item}" for index, item in enumerate(items, start=1)]


def agenda_lines(record: MomRecord) -> List[str]:
    return numbered(record.agenda_items)


def discussion_lines(record: MomRecord) -> List[str]:
    """Parsed, elaborated and numbered discussion points."""
    return numbered([elaborate(point) for point in parse_points(record.discussion)])


def closing_line(record: MomRecord) -> str:
    return resolve_closing_statement(record)
