"""
Batch conversion of many files.

Every file is an independent unit: a failure is recorded in that file's report
and the remaining files are still processed.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from loguru import logger

from vue_declassify.source import SourceUnit
from vue_declassify.transformer import TransformOptions, class_to_object
from vue_declassify.transformer.diagnostics import Diagnostic
from vue_declassify.transformer.errors import TranslationError
from vue_declassify.transformer.interfaces import Extractor


class UnitStatus(Enum):
    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class UnitReport:
    """What happened to one file.

    Attributes:
        path: File path
        status: Outcome of the conversion
        component: Converted component name, if any
        diagnostics: Follow-ups raised while translating
        error: Failure message for failed units
        output: Converted text, kept when files are not written back
    """

    path: str
    status: UnitStatus
    component: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error: str | None = None
    output: str | None = None


def declassify_file(
    path: str | Path,
    extract: Extractor,
    options: TransformOptions | None = None,
    write: bool = True,
) -> UnitReport:
    """Convert a single file, catching its failure into the report."""
    try:
        source = SourceUnit.from_file(path)
        result = class_to_object(source, extract, options=options)
        if result is not None and write:
            source.save()
    except (TranslationError, OSError, UnicodeDecodeError) as e:
        logger.error(f"{path}: {e}")
        return UnitReport(path=str(path), status=UnitStatus.FAILED, error=str(e))

    if result is None:
        logger.info(f"{path}: no class component, skipped")
        return UnitReport(path=str(path), status=UnitStatus.SKIPPED)

    logger.info(f"{path}: converted {result.component}")
    return UnitReport(
        path=str(path),
        status=UnitStatus.CONVERTED,
        component=result.component,
        diagnostics=result.diagnostics,
        output=None if write else source.get_full_text(),
    )


def declassify_files(
    paths: Iterable[str | Path],
    extract: Extractor,
    options: TransformOptions | None = None,
    write: bool = True,
) -> list[UnitReport]:
    """Convert each file independently and report per file."""
    return [declassify_file(path, extract, options, write) for path in paths]
