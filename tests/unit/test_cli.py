"""
Unit tests for the meeting-docs command line.
"""
import pytest

from ai_providers.base import AIProviderType
from ai_providers.preferences import MemoryStore, ProviderPreferences
from docgen import cli


COMMON = ["--date", "08 January 2025", "--time", "11:00 AM", "--venue", "Seminar Hall"]


@pytest.fixture
def prefs(monkeypatch):
    prefs = ProviderPreferences(MemoryStore())
    monkeypatch.setattr(cli, "get_preferences", lambda: prefs)
    return prefs


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_notice(tmp_path):
    code = cli.main(["notice", *COMMON, "--agenda", "NBA documentation", "--include-day", "--out", str(tmp_path)])
    assert code == 0
    rtf_files = list(tmp_path.glob("notice_*.rtf"))
    txt_files = list(tmp_path.glob("notice_*.txt"))
    assert len(rtf_files) == 1 and len(txt_files) == 1
    assert "Wednesday, 08 January 2025" in rtf_files[0].read_text(encoding="utf-8")


def test_notice_validation_error(tmp_path, capsys):
    code = cli.main(["notice", *COMMON[:4], "--venue", "  ", "--agenda", "x", "--out", str(tmp_path)])
    assert code == 1
    assert "Venue is required" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_mom_from_files(tmp_path):
    agenda = tmp_path / "agenda.txt"
    agenda.write_text("Faculty workload\nSyllabus revision\n", encoding="utf-8")
    points = tmp_path / "points.txt"
    points.write_text("- review workload distribution\n- Lab timings\n", encoding="utf-8")
    out = tmp_path / "out"

    code = cli.main([
        "mom", *COMMON, "--agenda-file", str(agenda),
        "--discussion-file", str(points), "--out", str(out),
    ])

    assert code == 0
    text = next(out.glob("mom_*.txt")).read_text(encoding="utf-8")
    assert "2. Syllabus revision" in text
    assert "1. The committee conducted a comprehensive review of" in text


def test_mom_ai_without_key_falls_back(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(cli, "resolve_ai_config", lambda provider=None: None)
    code = cli.main([
        "mom", *COMMON, "--agenda", "Workload, Syllabus",
        "--discussion", "Lab timings", "--ai", "--out", str(tmp_path),
    ])
    assert code == 0
    assert "AI generation failed, used template instead" in capsys.readouterr().out


def test_key_set_show_clear(prefs, capsys):
    assert cli.main(["key", "set", "openai", "sk-12345"]) == 0
    assert prefs.load() == (AIProviderType.OPENAI, "sk-12345")

    cli.main(["key", "show"])
    out = capsys.readouterr().out
    assert "Provider: openai" in out
    assert "sk-1" not in out

    cli.main(["key", "clear"])
    assert prefs.load() is None


def test_key_set_requires_arguments(prefs):
    assert cli.main(["key", "set"]) == 1


def test_resolve_ai_config_uses_saved_key(prefs):
    prefs.save("openai", "sk-saved")
    config = cli.resolve_ai_config()
    assert config.provider == AIProviderType.OPENAI
    assert config.api_key == "sk-saved"


def test_config_command(capsys):
    assert cli.main(["config"]) == 0
    assert "CONFIGURATION" in capsys.readouterr().out
