"""
In-memory TypeScript source file.

The transformer edits one file at a time through this class: it removes the
class declaration, appends the default export and asks for a reformat.
"""

from pathlib import Path

from loguru import logger

from vue_declassify.transformer.constants import INDENT_SIZE
from vue_declassify.transformer.formatter import format_code


class SourceUnit:
    """Text of one TypeScript file plus the edits the transformer needs."""

    def __init__(self, text: str, path: str | None = None):
        self._text = text
        self.path = path

    @classmethod
    def from_file(cls, path: str | Path) -> "SourceUnit":
        return cls(Path(path).read_text(encoding="utf-8"), str(path))

    @property
    def text(self) -> str:
        return self._text

    def get_full_text(self) -> str:
        return self._text

    def replace_text(self, text: str) -> None:
        self._text = text

    def insert_text(self, pos: int, text: str) -> None:
        if not 0 <= pos <= len(self._text):
            raise ValueError(f"Insert position {pos} is outside the source text")
        self._text = self._text[:pos] + text + self._text[pos:]

    def remove(self, start: int, end: int) -> None:
        """Remove ``[start, end)`` together with the rest of its last line.

        Only whitespace may follow ``end`` on that line; anything else stays.
        """
        if not 0 <= start <= end <= len(self._text):
            raise ValueError(f"Span [{start}, {end}) is outside the source text")

        stop = end
        while stop < len(self._text) and self._text[stop] in " \t":
            stop += 1
        if self._text.startswith("\r\n", stop):
            stop += 2
        elif stop < len(self._text) and self._text[stop] == "\n":
            stop += 1
        else:
            stop = end

        logger.debug(f"Removing source span [{start}, {stop})")
        self._text = self._text[:start] + self._text[stop:]

    def add_export_assignment(
        self, expression: str, leading_trivia: str | None = None
    ) -> None:
        """Append ``export default <expression>;`` at the end of the file."""
        statement = f"export default {expression};"
        if leading_trivia:
            statement = f"{leading_trivia.strip()}\n{statement}"

        body = self._text.rstrip()
        separator = "\n\n" if body else ""
        self._text = f"{body}{separator}{statement}\n"

    def format_text(self, indent_size: int = INDENT_SIZE) -> None:
        self._text = format_code(self._text, indent_size)

    def save(self, path: str | Path | None = None) -> None:
        target = path or self.path
        if target is None:
            raise ValueError("Source unit has no path to save to")
        Path(target).write_text(self._text, encoding="utf-8")
        logger.debug(f"Saved {target}")
