#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Required-field validation for Notice and MOM records.

Every rule is checked independently and all failures are reported, so the
caller can show the complete list at once.

Usage:
    from docgen.validator import validate_notice

    result = validate_notice(record)
    if not result.valid:
        print(". ".join(result.errors))
"""

from dataclasses import dataclass, field
from typing import List

from .records import MomRecord, NoticeRecord


class DocumentValidationError(ValueError):
    """One or more required fields are missing."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__('. '.join(self.errors))


@dataclass
class ValidationResult:
    """Outcome of validating a record."""
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise DocumentValidationError(self.errors)

    def to_dict(self) -> dict:
        return {"valid": self.valid, "errors": list(self.errors)}


def is_blank(value) -> bool:
    return not (value or '').strip()


def validate_notice(record: NoticeRecord) -> ValidationResult:
    errors = []
    if is_blank(record.date):
        errors.append('Date is required')
    if is_blank(record.time):
        errors.append('Time is required')
    if is_blank(record.venue):
        errors.append('Venue is required')
    if is_blank(record.agenda):
        errors.append('Agenda/Subject is required')
    return ValidationResult(errors)


def validate_mom(record: MomRecord) -> ValidationResult:
    errors = []
    if is_blank(record.date):
        errors.append('Date is required')
    if is_blank(record.time):
        errors.append('Time is required')
    if is_blank(record.venue):
        errors.append('Venue is required')
    if not record.agenda_items:
        errors.append('At least one agenda item is required')
    if is_blank(record.discussion):
        errors.append('Key Discussion Points are required')
    return ValidationResult(errors)
