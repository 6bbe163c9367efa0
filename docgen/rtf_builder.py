#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
RTF generation for Notice and MOM documents.

Builds documents that paste into Word with bold, underline, centering, font
and size preserved. Every piece of user text goes through rtf_text()
(escape + unicode encoding); only template literals and control words are
written raw.
"""

from typing import Iterable, Sequence

from .content import (
    AGENDA_LABEL, ATTENDANCE_LINE, COPY_TO_LABEL, COPY_TO_RECIPIENTS,
    DATE_LABEL, MINUTES_LABEL, NOTICE_DEPARTMENT, NOTICE_TITLE,
    SIGNATORY_LINE, TIME_LABEL, VENUE_LABEL,
    agenda_lines, closing_line, discussion_lines, mom_date_value,
    notice_body_sentence,
)
from .escaping import rtf_text
from .records import FontChoice, MomRecord, NoticeRecord


FONT_TABLES = {
    FontChoice.SERIF: '{\\fonttbl{\\f0\\froman\\fcharset0 Times New Roman;}}',
    FontChoice.SANS: '{\\fonttbl{\\f0\\fswiss\\fcharset0 Calibri;}}',
}

# Point size -> RTF half-points
FONT_SIZES = {
    '12': '\\fs24',
    '13': '\\fs26',
    '14': '\\fs28',
}

ALIGNMENTS = {
    'left': '\\pard',
    'center': '\\pard\\qc',
    'right': '\\pard\\qr',
    'justify': '\\pard\\qj',
}

BLANK = '\\par\n'
TAB = '\\tab '

# Paragraph spacing used throughout the MOM: 10pt after, 1.15 line spacing
MOM_SPACING = '\\pard\\sa200\\sl276\\slmult1'


def font_table(font=FontChoice.SERIF) -> str:
    return FONT_TABLES[FontChoice.parse(font)]


def font_size_token(size='12') -> str:
    """RTF size control for '12'/'13'/'14'; unrecognized sizes use 12pt."""
    return FONT_SIZES.get(str(size), FONT_SIZES['12'])


def paragraph(text: str, align: str = 'left', bold: bool = False, underline: bool = False) -> str:
    """
    Single formatted paragraph.

    Args:
        text: Paragraph text (escaped here)
        align: 'left', 'center', 'right' or 'justify'
        bold: Apply bold
        underline: Apply underline
    """
    style_start = ''
    style_end = ''
    if bold:
        style_start += '\\b '
        style_end = '\\b0' + style_end
    if underline:
        style_start += '\\ul '
        style_end = '\\ulnone' + style_end

    align_ctrl = ALIGNMENTS.get(align, ALIGNMENTS['left'])
    return f"{align_ctrl} {style_start}{rtf_text(text)}{style_end}\\par\n"


def bullet(text: str) -> str:
    """Bullet line: \\'95 is the bullet glyph, \\~ a non-breaking space."""
    return f"\\pard \\'95\\~{rtf_text(text)}\\par\n"


def tab_row(cells: Sequence[str]) -> str:
    """Tab-separated row for simple column layouts."""
    row = TAB.join(rtf_text(cell or '') for cell in cells)
    return f"\\pard {row}\\par\n"


def line(text: str) -> str:
    """Unstyled line continuing the current paragraph settings."""
    return f"{rtf_text(text)}\\par\n"


def build_notice_rtf(record: NoticeRecord) -> str:
    """
    Build the Notice RTF document.

    Layout: date line, department (bold, centered), NOTICE (bold, underlined,
    centered), body sentence, attendance request, optional extra blank,
    signatory, "Copy to:" and the distribution list.
    """
    parts = [
        f"{{\\rtf1\\ansi\\deff0{font_table(record.font)}{font_size_token(record.size)}\n",
        paragraph(f"{DATE_LABEL} - {record.date}"),
        paragraph(NOTICE_DEPARTMENT, align='center', bold=True),
        paragraph(NOTICE_TITLE, align='center', bold=True, underline=True),
        BLANK,
        paragraph(notice_body_sentence(record)),
        BLANK,
        paragraph(ATTENDANCE_LINE),
    ]
    if record.extra_blank:
        parts.append(BLANK)
    parts.append(paragraph(SIGNATORY_LINE))
    parts.append(paragraph(COPY_TO_LABEL))
    parts.extend(bullet(recipient) for recipient in COPY_TO_RECIPIENTS)
    parts.append('}')
    return ''.join(parts)


def _section(label: str, lines: Iterable[str]) -> str:
    body = ''.join(line(text) for text in lines)
    return f"\\b {rtf_text(label)}\\b0\\par\n{body}"


def build_mom_rtf(record: MomRecord) -> str:
    """
    Build the Minutes of Meeting RTF document.

    Layout: department (bold, centered), Date/Time/Venue with bold labels,
    numbered agenda, numbered elaborated discussion points, closing line.
    The Agenda and discussion blocks are omitted when empty.
    """
    fsize = font_size_token(record.size)
    parts = [
        f"{{\\rtf1\\ansi\\ansicpg1252\\deff0\\nouicompat{font_table(record.font)}\n",
        "{\\*\\generator Riched20;}\\viewkind4\\uc1\n",
        f"{fsize}\\lang1033\\f0\n",
        f"{MOM_SPACING}\\qc\\b\\f0{fsize} {rtf_text(record.department)}\\b0\\par\n",
        f"{MOM_SPACING}\\par\n",
        f"{MOM_SPACING}\\b {DATE_LABEL}\\b0  - {rtf_text(mom_date_value(record))}\\par\n",
        f"\\b {TIME_LABEL}\\b0  {rtf_text(record.time)}\\par\n",
        f"\\b {VENUE_LABEL}\\b0  {rtf_text(record.venue)}\\par\n",
        BLANK,
    ]

    if record.agenda_items:
        parts.append(_section(AGENDA_LABEL, agenda_lines(record)))
        parts.append(BLANK)

    parts.append(f"\\b {MINUTES_LABEL}\\b0\\par\n")
    if record.discussion:
        parts.extend(line(text) for text in discussion_lines(record))
        parts.append(BLANK)

    parts.append(line(closing_line(record)))
    parts.append('}')
    return ''.join(parts)


def _group_depths(rtf: str):
    """Yield the nesting depth after every unescaped brace."""
    depth = 0
    i = 0
    while i < len(rtf):
        char = rtf[i]
        if char == '\\':
            i += 2
            continue
        if char in '{}':
            depth += 1 if char == '{' else -1
            yield depth
        i += 1


def group_balance(rtf: str) -> int:
    """Unescaped '{' count minus unescaped '}' count."""
    depth = 0
    for depth in _group_depths(rtf):
        pass
    return depth


def is_balanced(rtf: str) -> bool:
    """True if no group closes before it opens and every group is closed."""
    depth = 0
    for depth in _group_depths(rtf):
        if depth < 0:
            return False
    return depth == 0
