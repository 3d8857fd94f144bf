"""vue-declassify - convert class-style Vue components into options objects.

Example:
    >>> from vue_declassify import SourceUnit, class_to_object
    >>> source = SourceUnit.from_file("HelloWorld.ts")
    >>> class_to_object(source, extract)
    >>> source.save()
"""

from vue_declassify.batch import UnitReport, UnitStatus, declassify_files
from vue_declassify.source import SourceUnit
from vue_declassify.transformer import (
    TransformOptions,
    TransformResult,
    TranslationError,
    class_to_object,
)
from vue_declassify.transformer.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    Diagnostics,
)

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "SourceUnit",
    "TransformOptions",
    "TransformResult",
    "TranslationError",
    "UnitReport",
    "UnitStatus",
    "class_to_object",
    "declassify_files",
]
