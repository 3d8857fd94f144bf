"""Import registration for TypeScript source units."""

import re
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from vue_declassify.source import SourceUnit

_IMPORT_FROM = re.compile(
    r"^[ \t]*import\s+(?P<clause>[\w$*{},\s]+?)\s+from\s+"
    r"(?P<quote>['\"])(?P<module>[^'\"]+)(?P=quote)[ \t]*;?",
    re.MULTILINE,
)
_ANY_IMPORT = re.compile(
    r"^[ \t]*import\s+(?:[\w$*{},\s]+?\s+from\s+)?['\"][^'\"]+['\"][ \t]*;?",
    re.MULTILINE,
)
_NAMED = re.compile(r"\{(?P<names>[^}]*)\}")


def _local_names(names: str) -> list[str]:
    """Names bound by a ``{ a, b as c }`` clause, as written."""
    return [n.strip() for n in names.split(",") if n.strip()]


def _bound_name(specifier: str) -> str:
    name = specifier.split(" as ")[-1].strip()
    return name.removeprefix("type ").strip()


def _merge_clause(clause: str, named: list[str]) -> str | None:
    """Add ``named`` to an import clause, or None if it cannot take them."""
    if clause.startswith("type ") or "*" in clause:
        return None

    match = _NAMED.search(clause)
    if match:
        specifiers = _local_names(match.group("names"))
        bound = {_bound_name(s) for s in specifiers}
        specifiers += [n for n in named if n not in bound]
        merged = "{ " + ", ".join(specifiers) + " }"
        return clause[: match.start()] + merged + clause[match.end() :]

    # Default import only, e.g. `import Vue from 'vue'`
    return f"{clause.strip()}, {{ {', '.join(named)} }}"


def ensure(source: "SourceUnit", module: str, named: list[str]) -> None:
    """Make sure ``named`` are imported from ``module``.

    Names already bound by an import of ``module`` are skipped, type-only
    imports included, so calling this repeatedly is harmless. Missing names are
    merged into the first import of ``module`` that can take them; otherwise a
    new import statement goes after the last import of the file.
    """
    text = source.get_full_text()
    wanted = list(dict.fromkeys(named))

    candidates = [m for m in _IMPORT_FROM.finditer(text) if m.group("module") == module]
    for match in candidates:
        named_match = _NAMED.search(match.group("clause"))
        if named_match:
            bound = {_bound_name(s) for s in _local_names(named_match.group("names"))}
            wanted = [n for n in wanted if n not in bound]
    if not wanted:
        return

    for match in candidates:
        merged = _merge_clause(match.group("clause"), wanted)
        if merged is None:
            continue
        start, end = match.span("clause")
        source.replace_text(text[:start] + merged + text[end:])
        logger.debug(f"Added {wanted} to the import of '{module}'")
        return

    statement = f"import {{ {', '.join(wanted)} }} from '{module}';\n"
    existing = list(_ANY_IMPORT.finditer(text))
    if not existing:
        source.insert_text(0, statement)
    else:
        pos = existing[-1].end()
        if text.startswith("\n", pos):
            source.insert_text(pos + 1, statement)
        else:
            source.insert_text(pos, "\n" + statement)
    logger.debug(f"Imported {wanted} from '{module}'")
