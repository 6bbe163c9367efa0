#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Rule-based elaboration of terse discussion points into formal minutes prose.

Rules are an ordered list, not a mapping: the first rule whose keyword occurs
anywhere in the point (case-insensitive) wins. "review and schedule workload"
therefore uses the 'review' rule because it is declared before 'schedule'
and 'workload'.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from config.constants import ELABORATION_LENGTH_LIMIT


@dataclass(frozen=True)
class ElaborationRule:
    keyword: str
    prefix: str


ELABORATION_RULES: Tuple[ElaborationRule, ...] = (
    ElaborationRule('review', 'The committee conducted a comprehensive review of '),
    ElaborationRule('discuss', 'Extensive deliberations were held regarding '),
    ElaborationRule('approve', 'Following detailed consideration, the committee approved '),
    ElaborationRule('implement', 'It was unanimously decided to implement '),
    ElaborationRule('schedule', 'The committee finalized the schedule for '),
    ElaborationRule('coordinate', 'Coordination measures were discussed and established for '),
    ElaborationRule('evaluate', 'A thorough evaluation was undertaken concerning '),
    ElaborationRule('workload', 'The distribution and allocation of faculty workload was examined, with emphasis on '),
    ElaborationRule('syllabus', 'Curricular aspects were reviewed, particularly focusing on '),
    ElaborationRule('examination', 'Assessment and examination protocols were deliberated upon, specifically addressing '),
)

FORMAL_OPENERS = ('the committee', 'it was', 'following')

KEYWORD_CLOSING = (
    'The matter was thoroughly discussed and appropriate decisions were taken '
    'in accordance with institutional guidelines.'
)

GENERIC_CLOSING = (
    'This matter was deliberated upon at length, and the committee reached a '
    'consensus on the way forward, ensuring alignment with departmental '
    'objectives and academic standards.'
)


def match_rule(point: str) -> Optional[ElaborationRule]:
    """First rule whose keyword is contained in the point, in declaration order."""
    lower_point = point.lower()
    for rule in ELABORATION_RULES:
        if rule.keyword in lower_point:
            return rule
    return None


def elaborate(point: str) -> str:
    """
    Expand a short discussion point into formal prose.

    Points over 100 characters, and keyword points that already open
    formally ("The committee...", "It was...", "Following..."), are
    returned unchanged.
    """
    if not point:
        return ''

    if len(point) > ELABORATION_LENGTH_LIMIT:
        return point

    rule = match_rule(point)
    if rule is None:
        return f"{point}. {GENERIC_CLOSING}"

    lower_point = point.lower()
    if lower_point.startswith(FORMAL_OPENERS):
        return point
    return f"{rule.prefix}{lower_point}. {KEYWORD_CLOSING}"
