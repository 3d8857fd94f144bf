"""TypeScript code formatting utilities."""

from dataclasses import dataclass, field

from vue_declassify.transformer.constants import INDENT_SIZE

_OPENERS = "([{"
_CLOSERS = ")]}"

# A `/` after one of these starts a regex literal rather than a division
_REGEX_PRECEDERS = "(,=:[!&|?{};+-*%<>~^"
_REGEX_KEYWORDS = frozenset(
    {
        "return", "typeof", "case", "in", "of", "delete",
        "void", "throw", "new", "yield", "await", "else",
    }
)


@dataclass
class _ScanState:
    """Lexical state carried from one line to the next.

    Attributes:
        open_brackets: Line number of every bracket still open
        lineno: Number of the line being scanned
    """

    open_brackets: list[int] = field(default_factory=list)
    in_block_comment: bool = False
    in_template: bool = False
    lineno: int = 0


def _level(open_brackets: list[int]) -> int:
    """Indentation level: brackets opened on the same line count once."""
    return len(set(open_brackets))


def _starts_regex(line: str, pos: int) -> bool:
    """Whether the `/` at ``pos`` opens a regex literal."""
    j = pos - 1
    while j >= 0 and line[j] in " \t":
        j -= 1
    if j < 0:
        return True
    if line[j] in _REGEX_PRECEDERS:
        return True
    end = j + 1
    while j >= 0 and (line[j].isalnum() or line[j] in "_$"):
        j -= 1
    return line[j + 1 : end] in _REGEX_KEYWORDS


def _skip_regex(line: str, pos: int) -> int:
    """Index just past the regex literal opened at ``pos``."""
    i = pos + 1
    in_class = False
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "/":
            return i + 1
        i += 1
    return i


class TypeScriptFormatter:
    """Re-indents TypeScript code by bracket nesting.

    String, template and regex literal contents, and comments, never affect
    the nesting. Lines that start inside a template literal are left exactly as
    they are, since their whitespace is part of the string.
    """

    def __init__(self, indent_size: int = INDENT_SIZE):
        self._indent_str = " " * indent_size
        self.state = _ScanState()

    def _scan(self, line: str) -> None:
        """Advance the lexical state over one line."""
        state = self.state
        quote: str | None = None
        i = 0
        while i < len(line):
            char = line[i]
            if state.in_block_comment:
                if line.startswith("*/", i):
                    state.in_block_comment = False
                    i += 2
                    continue
            elif state.in_template:
                if char == "\\":
                    i += 2
                    continue
                if char == "`":
                    state.in_template = False
            elif quote:
                if char == "\\":
                    i += 2
                    continue
                if char == quote:
                    quote = None
            elif line.startswith("//", i):
                break
            elif line.startswith("/*", i):
                state.in_block_comment = True
                i += 2
                continue
            elif char == "/" and _starts_regex(line, i):
                i = _skip_regex(line, i)
                continue
            elif char in "'\"":
                quote = char
            elif char == "`":
                state.in_template = True
            elif char in _OPENERS:
                state.open_brackets.append(state.lineno)
            elif char in _CLOSERS:
                if state.open_brackets:
                    state.open_brackets.pop()
            i += 1

    def format_line(self, line: str) -> str:
        """Format a single line with proper indentation."""
        self.state.lineno += 1

        if self.state.in_template:
            self._scan(line)
            return line

        stripped = line.strip()
        if not stripped:
            return ""

        if self.state.in_block_comment:
            indent = self._indent_str * _level(self.state.open_brackets)
            if stripped.startswith("*"):
                result = f"{indent} {stripped}"
            else:
                result = f"{indent}{stripped}"
            self._scan(line)
            return result

        # Closing brackets at the start of a line belong to the outer level
        leading_closers = 0
        for char in stripped:
            if char not in _CLOSERS:
                break
            leading_closers += 1
        open_brackets = self.state.open_brackets
        if leading_closers:
            open_brackets = open_brackets[:-leading_closers]
        level = _level(open_brackets)

        self._scan(stripped)
        return f"{self._indent_str * level}{stripped}"

    def format_code(self, code: str) -> str:
        """Format a complete TypeScript file."""
        self.state = _ScanState()
        formatted_lines: list[str] = []

        for line in code.split("\n"):
            was_template = self.state.in_template
            formatted = self.format_line(line)
            # Collapse runs of blank lines, except inside template literals
            if (
                not formatted
                and not was_template
                and (not formatted_lines or not formatted_lines[-1])
            ):
                continue
            formatted_lines.append(formatted)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()
        if not formatted_lines:
            return ""
        return "\n".join(formatted_lines) + "\n"


def format_code(code: str, indent_size: int = INDENT_SIZE) -> str:
    """Re-indent TypeScript code and normalize blank lines."""
    return TypeScriptFormatter(indent_size).format_code(code)
