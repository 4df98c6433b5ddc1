"""Document loading and line splitting.

The document is read once as raw bytes and split on ``\\n`` without newline
translation, so a trailing terminator yields one final empty line.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import FileReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """Immutable ordered sequence of lines loaded from ``path``."""

    lines: tuple[str, ...]
    path: Path | None = None

    def __post_init__(self) -> None:
        if not self.lines:
            object.__setattr__(self, "lines", ("",))

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def line_length(self, index: int) -> int:
        """Return code-point length of line ``index``."""
        return len(self.lines[index])

    @property
    def display_name(self) -> str:
        return str(self.path) if self.path is not None else "[text]"

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @classmethod
    def from_text(cls, text: str, path: Path | None = None) -> Document:
        return cls(split_lines(text), path)


def split_lines(text: str) -> tuple[str, ...]:
    """Split ``text`` on ``\\n`` exactly; ``""`` becomes one empty line."""
    return tuple(text.split("\n"))


def decode_bytes(data: bytes) -> str:
    """Decode file bytes as UTF-8 (dropping a BOM), falling back to latin-1."""
    encoding = "utf-8-sig" if data.startswith(codecs.BOM_UTF8) else "utf-8"
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        return data.decode("latin-1")


def read_source_bytes(path: Path) -> bytes:
    """Return the raw bytes of ``path``, wrapping ``OSError`` in ``FileReadError``."""
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc


def load_document(path: Path) -> Document:
    """Read ``path`` into a ``Document``.

    Any ``OSError`` (missing file, directory, permission denied) is re-raised
    as ``FileReadError`` carrying the OS reason.
    """
    data = read_source_bytes(path)
    document = Document.from_text(decode_bytes(data), path)
    logger.debug("loaded %s: %d bytes, %d lines", path, len(data), len(document))
    return document
