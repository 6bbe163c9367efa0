"""
Discussion point and agenda parsing.
"""

import re
from typing import List

BULLET_RE = re.compile(r'^[-•*]\s*')
NUMBERING_RE = re.compile(r'^\d+\.\s*')


def strip_marker(line: str) -> str:
    """Remove one leading bullet glyph, then one leading "N." numbering prefix."""
    line = BULLET_RE.sub('', line.strip(), count=1)
    line = NUMBERING_RE.sub('', line, count=1)
    return line.strip()


def parse_points(text: str) -> List[str]:
    """
    Split free-form discussion text into points, one per non-blank line.

    >>> parse_points("- first\\n2. second\\n• third")
    ['first', 'second', 'third']
    """
    if not text:
        return []
    lines = [line.strip() for line in text.split('\n')]
    points = [strip_marker(line) for line in lines if line]
    return [p for p in points if p]


def parse_multiline_input(text: str) -> List[str]:
    """
    Split agenda-style input into items.

    One item per line; a single line containing commas is split on commas.
    """
    if not text:
        return []
    items = [line.strip() for line in text.split('\n') if line.strip()]
    if len(items) == 1 and ',' in items[0]:
        items = [item.strip() for item in items[0].split(',') if item.strip()]
    return items
