from pathlib import Path

import pytest

from pushbox.levels.loader import (
    BUNDLED_MAPS,
    DEFAULT_MAPS_DIR,
    MAPS_DIR_ENV,
    DirectoryMapSource,
    FallbackMapSource,
    bundled_map_source,
)
from pushbox.levels.text import parse_level


def test_directory_source_reads_named_map(tmp_path: Path) -> None:
    (tmp_path / "tiny.txt").write_text("XXX\nXPX\nXXX", encoding="utf-8")
    source = DirectoryMapSource(tmp_path)
    assert source.load("tiny") == "XXX\nXPX\nXXX"
    assert source.names() == ["tiny"]


def test_directory_source_missing_map_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        DirectoryMapSource(tmp_path).load("nope")


def test_fallback_used_when_primary_fails(tmp_path: Path) -> None:
    asked: list[str] = []

    def fallback(name: str) -> str:
        asked.append(name)
        return "XPX"

    source = FallbackMapSource(DirectoryMapSource(tmp_path), fallback)
    assert source.load("missing") == "XPX"
    assert asked == ["missing"]


def test_fallback_not_used_when_primary_succeeds(tmp_path: Path) -> None:
    (tmp_path / "ok.txt").write_text("X", encoding="utf-8")

    def fallback(name: str) -> str:
        raise AssertionError("fallback must not be called")

    assert FallbackMapSource(DirectoryMapSource(tmp_path), fallback).load("ok") == "X"


def test_bundled_maps_exist_and_parse() -> None:
    source = bundled_map_source()
    for _, name in BUNDLED_MAPS:
        level = parse_level(source.load(name))
        assert level.width > 0 and level.height > 0
        assert level.box_spawns


def test_bundled_source_honours_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(MAPS_DIR_ENV, str(tmp_path))
    assert bundled_map_source().root == tmp_path
    monkeypatch.delenv(MAPS_DIR_ENV)
    assert bundled_map_source().root == DEFAULT_MAPS_DIR
