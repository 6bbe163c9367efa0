#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Notice & MOM CLI - generate documents from the command line

Usage:
    meeting-docs notice --date "08 January 2025" --time "11:00 AM" \
        --venue "Seminar Hall" --agenda "NBA documentation" --include-day
    meeting-docs mom --date "08 January 2025" --time "11:00 AM" \
        --venue "Seminar Hall" --agenda "Workload, Syllabus" \
        --discussion-file points.txt [--ai]
    meeting-docs key set gemini <API_KEY>
    meeting-docs key clear
    meeting-docs config
"""

import sys
import asyncio
import argparse
from pathlib import Path
from typing import Optional

from ai_providers import (
    JsonFileStore,
    MinutesTextSource,
    ProviderPreferences,
)
from config.constants import SUPPORTED_FONT_SIZES
from config.settings import settings

from .generator import generate_mom_documents, generate_notice_documents
from .points import parse_multiline_input, parse_points
from .records import MomRecord, NoticeRecord
from .validator import DocumentValidationError


def get_preferences() -> ProviderPreferences:
    return ProviderPreferences(JsonFileStore(settings.preferences_file))


def resolve_ai_config(provider: Optional[str] = None):
    """AIConfig from the remembered preference, else from settings; None if no key."""
    saved = get_preferences().load()
    name = provider or (saved[0].value if saved else settings.ai_provider)
    api_key = saved[1] if saved and saved[0].value == name else None
    try:
        return settings.get_ai_config(name, api_key)
    except ValueError as e:
        print(f"⚠️  {e}")
        return None


def _read_text(value: Optional[str], file_path: Optional[str]) -> str:
    if file_path:
        return Path(file_path).read_text(encoding='utf-8').strip()
    return (value or '').strip()


def _report(documents, output_dir: Path) -> int:
    for warning in documents.warnings:
        print(f"⚠️  {warning}")
    for path in documents.save(output_dir):
        print(f"✅ {path}")
    return 0


def cmd_notice(args):
    """Generate a Notice"""
    record = NoticeRecord(
        date=args.date.strip(),
        time=args.time.strip(),
        venue=args.venue.strip(),
        agenda=args.agenda.strip(),
        include_day=args.include_day,
        font=args.font,
        size=args.size,
        extra_blank=args.extra_blank,
    )
    try:
        documents = generate_notice_documents(record)
    except DocumentValidationError as e:
        print(f"❌ {e}")
        return 1
    return _report(documents, Path(args.out))


def cmd_mom(args):
    """Generate Minutes of Meeting"""
    record = MomRecord(
        department=(args.department or settings.department).strip(),
        date=args.date.strip(),
        time=args.time.strip(),
        venue=args.venue.strip(),
        agenda_items=parse_multiline_input(_read_text(args.agenda, args.agenda_file)),
        discussion=_read_text(args.discussion, args.discussion_file),
        include_day=args.include_day,
        font=args.font,
        size=args.size,
    )

    text_source = None
    if args.ai:
        source = MinutesTextSource(resolve_ai_config(args.provider))
        if source.config:
            count = len(parse_points(record.discussion))
            print(f"🤖 {source.provider_name}: estimated cost {source.estimate_cost(count)}")
        text_source = source

    try:
        documents = asyncio.run(generate_mom_documents(record, text_source))
    except DocumentValidationError as e:
        print(f"❌ {e}")
        return 1
    return _report(documents, Path(args.out))


def cmd_key(args):
    """Manage the remembered provider and API key"""
    prefs = get_preferences()
    if args.action == 'set':
        if not args.provider or not args.api_key:
            print("❌ Usage: meeting-docs key set <provider> <api_key>")
            return 1
        prefs.save(args.provider, args.api_key)
        print(f"✅ Saved API key for {args.provider}")
    elif args.action == 'clear':
        prefs.clear()
        print("✅ API key cleared")
    else:
        saved = prefs.load()
        if saved:
            provider, _ = saved
            print(f"Provider: {provider.value}  Key: saved")
        else:
            print("No API key saved")
    return 0


def cmd_config(args):
    """Show current configuration"""
    settings.print_config()
    return 0


def _add_common(sub):
    sub.add_argument('--date', required=True, help='Meeting date, e.g. "08 January 2025"')
    sub.add_argument('--time', required=True, help='Meeting time')
    sub.add_argument('--venue', required=True, help='Meeting venue')
    sub.add_argument('--include-day', action='store_true', help='Prefix the date with its weekday')
    sub.add_argument('--font', default=settings.default_font, choices=['serif', 'sans', 'times', 'calibri'], help='Document font')
    sub.add_argument('--size', default=settings.default_size, choices=list(SUPPORTED_FONT_SIZES), help='Font size in points')
    sub.add_argument('--out', '-o', default=str(settings.output_dir), help='Output directory')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='meeting-docs',
        description="Generate departmental Notices and Minutes of Meeting (RTF + text)",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Notice command
    notice_parser = subparsers.add_parser('notice', help='Generate a meeting notice')
    _add_common(notice_parser)
    notice_parser.add_argument('--agenda', required=True, help='Agenda / subject')
    notice_parser.add_argument('--extra-blank', action='store_true', help='Extra blank line before the footer')

    # MOM command
    mom_parser = subparsers.add_parser('mom', help='Generate Minutes of Meeting')
    _add_common(mom_parser)
    mom_parser.add_argument('--department', help='Department name')
    mom_parser.add_argument('--agenda', help='Agenda items, one per line or comma separated')
    mom_parser.add_argument('--agenda-file', help='File with agenda items')
    mom_parser.add_argument('--discussion', help='Key discussion points')
    mom_parser.add_argument('--discussion-file', help='File with key discussion points')
    mom_parser.add_argument('--ai', action='store_true', help='Use the AI text source for the plain-text minutes')
    mom_parser.add_argument('--provider', choices=['gemini', 'openai'], help='AI provider (default: saved or configured)')

    # Key command
    key_parser = subparsers.add_parser('key', help='Manage the saved AI API key')
    key_parser.add_argument('action', choices=['set', 'clear', 'show'])
    key_parser.add_argument('provider', nargs='?', choices=['gemini', 'openai'])
    key_parser.add_argument('api_key', nargs='?')

    # Config command
    subparsers.add_parser('config', help='Show current configuration')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        'notice': cmd_notice,
        'mom': cmd_mom,
        'key': cmd_key,
        'config': cmd_config,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
