"""Type classification functions for prop translation.

Vue accepts only a handful of runtime type markers for props. These helpers
map a TypeScript annotation onto one of them using cheap syntactic signals.
"""

import re
from enum import Enum

from vue_declassify.transformer.constants import PRIMITIVE_PROP_TYPES
from vue_declassify.transformer.models import TypeNode

_NUMBER_LITERAL = re.compile(
    r"-?(0[xX][0-9a-fA-F_]+|0[bB][01_]+|0[oO][0-7_]+|"
    r"(\d[\d_]*(\.[\d_]*)?|\.\d[\d_]*)([eE][+-]?\d+)?n?)"
)
_OPENERS = "([{<"
_CLOSERS = ")]}>"


class PropTypeBase(Enum):
    """Runtime marker a non-primitive prop degrades to."""

    FUNCTION = "Function"
    ARRAY = "Array"
    OBJECT = "Object"


def primitive_marker(type_text: str) -> str | None:
    """Return ``String``, ``Number`` or ``Boolean`` for primitive types, else None."""
    return PRIMITIVE_PROP_TYPES.get(type_text.strip())


def infer_literal_type(initializer: str | None) -> str | None:
    """Infer a primitive type name from a literal initializer."""
    if initializer is None:
        return None
    text = initializer.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return "string"
    if text in ("true", "false"):
        return "boolean"
    if _NUMBER_LITERAL.fullmatch(text):
        return "number"
    return None


def _top_level_tokens(text: str, depth_at: int = 0) -> list[str]:
    """Split ``text`` into the chunks found at bracket depth ``depth_at``.

    The ``=>`` arrow is reported as its own chunk so its ``>`` never closes an
    angle bracket.
    """
    chunks: list[str] = []
    current: list[str] = []
    depth = 0
    i = 0
    while i < len(text):
        if text.startswith("=>", i):
            if depth == depth_at:
                chunks.append("".join(current))
                chunks.append("=>")
                current = []
            else:
                current.append("=>")
            i += 2
            continue
        char = text[i]
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
        if depth == depth_at and char in ";,\n":
            chunks.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    chunks.append("".join(current))
    return [c for c in chunks if c.strip()]


def _strip_parens(text: str) -> str:
    """Remove parentheses wrapping the whole type."""
    text = text.strip()
    while text.startswith("(") and text.endswith(")"):
        depth = 0
        for i, char in enumerate(text):
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0 and i != len(text) - 1:
                    return text
        text = text[1:-1].strip()
    return text


def has_call_signature(type_node: TypeNode) -> bool:
    """Check whether the annotated type is invokable.

    Uses the extractor's call signature count when it has one. Otherwise
    function types (``(x: T) => R``) and type literals declaring a call
    signature (``{ (x: T): R }``) count as invokable.
    """
    if type_node.call_signatures is not None:
        return type_node.call_signatures > 0

    text = _strip_parens(type_node.text)
    if text.startswith("new ") or text.startswith("abstract new "):
        return False
    if "=>" in _top_level_tokens(text):
        return True
    if text.startswith("{") and text.endswith("}"):
        members = _top_level_tokens(text[1:-1])
        return any(m.strip().startswith(("(", "<")) for m in members)
    return False


def is_array_type(type_text: str) -> bool:
    """Spot array types by their syntax, ``Array<T>`` or ``T[]``."""
    text = type_text.strip()
    return text.startswith("Array<") or text.endswith("[]")


def classify_prop_type(type_node: TypeNode) -> PropTypeBase:
    """Pick the runtime marker for a non-primitive prop type."""
    if has_call_signature(type_node):
        return PropTypeBase.FUNCTION
    if is_array_type(type_node.text):
        return PropTypeBase.ARRAY
    return PropTypeBase.OBJECT
