"""Pytest fixtures for Scriv RTF tests."""

import pytest
from pathlib import Path

from scriv_rtf import config


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Give every test a fresh settings instance."""
    monkeypatch.setattr(config, "_settings", None)
    yield
    config._settings = None


@pytest.fixture
def sample_text() -> str:
    """Annotated text using every supported marker."""
    return (
        "**The quick brown fox** *jumps* over **the lazy *old* dog**.\n"
        "She paused—then ran, pages 10–12 of her café notes."
    )


@pytest.fixture
def scrivener_rtf() -> str:
    """RTF as Scrivener writes it, header groups included."""
    return (
        "{\\rtf1\\ansi\\ansicpg1252\\cocoartf2639\n"
        "\\cocoatextscaling0\\cocoaplatform0"
        "{\\fonttbl\\f0\\fnil\\fcharset0 Palatino-Roman;"
        "\\f1\\fnil\\fcharset0 Palatino-Italic;}\n"
        "{\\colortbl;\\red255\\green255\\blue255;}\n"
        "{\\*\\expandedcolortbl;;}\n"
        "{\\info{\\title Chapter One}{\\author Someone}}\n"
        "\\paperw11900\\paperh16840\\margl1134\\margr1134\n"
        "\\pard\\tx360\\pardirnatural\\partightenfactor0\n"
        "\n"
        "\\f0\\fs26 \\cf0 It was a {\\b dark} and {\\i stormy} night\\emdash the rain \n"
        "fell in torrents.\\\n"
        "\\par \\pard\\tx360 He said \\uc0\\u8220 hello\\u8221  to the caf\\'e9 owner.}"
    )


@pytest.fixture
def tmp_text_file(tmp_path: Path, sample_text: str) -> Path:
    """Create a temporary annotated text file."""
    file_path = tmp_path / "chapter.txt"
    file_path.write_text(sample_text, encoding="utf-8")
    return file_path


@pytest.fixture
def tmp_rtf_file(tmp_path: Path, scrivener_rtf: str) -> Path:
    """Create a temporary Scrivener RTF file."""
    file_path = tmp_path / "content.rtf"
    file_path.write_text(scrivener_rtf, encoding="utf-8")
    return file_path
