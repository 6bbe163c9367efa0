#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data records for Notice and MOM generation.

Records are immutable value objects built once per form submission by the
caller (form layer, CLI or HTTP API) and passed into the builders by value.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from config.constants import DEFAULT_DEPARTMENT, DEFAULT_FONT_SIZE


CLOSING_STATEMENT = (
    'The meeting concluded at 12:00 PM with positive remarks from the Head of Department'
)


class FontChoice(Enum):
    """Document font family"""
    SERIF = "serif"  # Times New Roman
    SANS = "sans"    # Calibri

    @classmethod
    def parse(cls, value) -> "FontChoice":
        """Accept enum values, 'serif'/'sans' and the legacy 'times'/'calibri'."""
        if isinstance(value, cls):
            return value
        aliases = {
            "serif": cls.SERIF,
            "times": cls.SERIF,
            "sans": cls.SANS,
            "calibri": cls.SANS,
        }
        return aliases.get(str(value or "").strip().lower(), cls.SERIF)


@dataclass(frozen=True)
class NoticeRecord:
    """Departmental meeting notice"""
    date: str = ""
    time: str = ""
    venue: str = ""
    agenda: str = ""
    include_day: bool = False
    font: FontChoice = FontChoice.SERIF
    size: str = DEFAULT_FONT_SIZE
    extra_blank: bool = False

    def __post_init__(self):
        object.__setattr__(self, "font", FontChoice.parse(self.font))
        object.__setattr__(self, "size", str(self.size))


@dataclass(frozen=True)
class MomRecord:
    """Minutes of Meeting"""
    department: str = DEFAULT_DEPARTMENT
    date: str = ""
    time: str = ""
    venue: str = ""
    agenda_items: Tuple[str, ...] = field(default_factory=tuple)
    discussion: str = ""
    # Accepted but not rendered; see resolve_closing_statement()
    closing_statement: str = ""
    include_day: bool = False
    font: FontChoice = FontChoice.SERIF
    size: str = DEFAULT_FONT_SIZE

    def __post_init__(self):
        items = self.agenda_items or ()
        if isinstance(items, str):
            items = (items,)
        object.__setattr__(self, "agenda_items", tuple(items))
        object.__setattr__(self, "font", FontChoice.parse(self.font))
        object.__setattr__(self, "size", str(self.size))
        if not self.department:
            object.__setattr__(self, "department", DEFAULT_DEPARTMENT)


def resolve_closing_statement(record: MomRecord) -> str:
    """
    Closing line rendered at the end of every MOM.

    The caller-supplied ``closing_statement`` is ignored and the fixed
    institutional sentence is always used.
    """
    # TODO: honor record.closing_statement once the product owner confirms the
    # fixed sentence is not a requirement.
    return CLOSING_STATEMENT
