"""Map sources.

A map source resolves a map name to raw map text. Sources only do I/O;
parsing happens afterwards, so a board is never built from partial text.

``FallbackMapSource`` mirrors how the game falls back to asking the user
for a file when the bundled map cannot be read.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, List, Protocol, Tuple

logger = logging.getLogger(__name__)

MAPS_DIR_ENV = "PUSHBOX_MAPS_DIR"
"""Environment variable overriding the bundled maps directory."""

DEFAULT_MAPS_DIR = Path(__file__).resolve().parent.parent / "maps"

MAP_SUFFIX = ".txt"

BUNDLED_MAPS: List[Tuple[str, str]] = [
    ("Map 1", "1"),
    ("Map 2", "2"),
    ("Map 3", "3"),
    ("Map 4", "4"),
]
"""Bundled maps as ``(title, name)`` pairs, in menu order."""


class MapSource(Protocol):
    """Anything that can resolve a map name to map text."""

    def load(self, name: str) -> str: ...


class DirectoryMapSource:
    """Load ``<root>/<name>.txt`` map files."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}{MAP_SUFFIX}"

    def load(self, name: str) -> str:
        path = self.path_for(name)
        if not path.is_file():
            raise FileNotFoundError(path)
        logger.info("Loading map %r from %s", name, path)
        return path.read_text(encoding="utf-8")

    def names(self) -> List[str]:
        """Names of all map files in the directory, sorted."""
        if not self.root.is_dir():
            return []
        return sorted(p.stem for p in self.root.glob(f"*{MAP_SUFFIX}"))


class FallbackMapSource:
    """Try ``primary`` first and hand over to ``fallback`` on I/O errors.

    ``fallback`` receives the map name and returns map text; in the app it
    asks the user to upload a file.
    """

    def __init__(self, primary: MapSource, fallback: Callable[[str], str]):
        self.primary = primary
        self.fallback = fallback

    def load(self, name: str) -> str:
        try:
            return self.primary.load(name)
        except OSError as exc:
            logger.warning("Map %r unavailable (%s); using fallback source", name, exc)
            return self.fallback(name)


def bundled_map_source() -> DirectoryMapSource:
    """Directory source over the bundled maps, honouring ``PUSHBOX_MAPS_DIR``."""
    root = os.environ.get(MAPS_DIR_ENV)
    return DirectoryMapSource(Path(root) if root else DEFAULT_MAPS_DIR)
