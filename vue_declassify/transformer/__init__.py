"""
Class-to-object transformation for Vue components.

This module provides the top-level entry point: it takes a source unit holding
a class-style component and rewrites it in place into
``export default Vue.extend({...})``.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from vue_declassify.imports import ensure
from vue_declassify.transformer import ir
from vue_declassify.transformer.computed import class_computed_to_object_computed
from vue_declassify.transformer.config import TransformOptions
from vue_declassify.transformer.context import TranslationContext
from vue_declassify.transformer.data import class_data_to_object_data
from vue_declassify.transformer.diagnostics import Diagnostic, DiagnosticSink
from vue_declassify.transformer.emitter import print_node
from vue_declassify.transformer.errors import TranslationError
from vue_declassify.transformer.interfaces import Extractor, ImportRegistrar
from vue_declassify.transformer.models import JSDoc, VueClass
from vue_declassify.transformer.options import (
    class_name_to_prop_name,
    copy_passthrough_options,
)
from vue_declassify.transformer.props import class_props_to_object_props

if TYPE_CHECKING:
    from vue_declassify.source import SourceUnit

__all__ = [
    "TransformOptions",
    "TransformResult",
    "TranslationError",
    "build_component",
    "class_to_object",
]


@dataclass
class TransformResult:
    """Outcome of converting one source unit.

    Attributes:
        component: Name of the converted component
        diagnostics: Follow-ups raised while translating
    """

    component: str
    diagnostics: list[Diagnostic] = field(default_factory=list)


def build_component(ctx: TranslationContext, vue: VueClass) -> ir.CallExpression:
    """Translate every option of the component and wrap them in the factory call.

    Entries come out as name, decorator options, props, data, computed. Empty
    categories are left out.

    Raises:
        TranslationError: If any part of the component cannot be translated
    """
    properties: list[ir.ObjectElement] = [class_name_to_prop_name(vue)]

    # Note: decorator options are not merged with anything the class declares
    properties.extend(copy_passthrough_options(vue))

    if vue.props:
        properties.append(class_props_to_object_props(ctx, vue))

    if vue.data:
        properties.append(class_data_to_object_data(vue))

    if vue.computed:
        properties.append(class_computed_to_object_computed(ctx, vue))

    return ir.CallExpression(
        callee=ctx.options.factory, args=[ir.ObjectLiteral(properties)]
    )


def _leading_documentation(docs: list[JSDoc]) -> str | None:
    if not docs:
        return None
    doc = docs[0]
    if doc.full_text.strip():
        return doc.full_text.strip()
    if doc.comment:
        lines = "\n".join(f" * {line}".rstrip() for line in doc.comment.split("\n"))
        return f"/**\n{lines}\n */"
    return None


def class_to_object(
    source: "SourceUnit",
    extract: Extractor,
    options: TransformOptions | None = None,
    diagnostics: DiagnosticSink | None = None,
    ensure_import: ImportRegistrar = ensure,
) -> TransformResult | None:
    """Rewrite the class component of a source unit into an options object.

    The unit is only modified once the whole component has been translated;
    a failure leaves it as it was.

    Args:
        source: Source unit to rewrite in place
        extract: Extractor producing the component model
        options: Generated code settings
        diagnostics: Sink receiving diagnostics as they are raised
        ensure_import: Import registration used for ``PropType``

    Returns:
        The conversion outcome, or None if the unit holds no class component

    Raises:
        TranslationError: If the component cannot be translated
    """
    vue = extract(source)
    if vue is None:
        logger.debug(f"No class component found in {source.path or '<memory>'}")
        return None

    raised: list[Diagnostic] = []

    def sink(diagnostic: Diagnostic) -> None:
        raised.append(diagnostic)
        if diagnostics is not None:
            diagnostics(diagnostic)

    ctx = TranslationContext(options=options or TransformOptions(), sink=sink)
    component = build_component(ctx, vue)
    name = vue.declaration.get_name_or_throw()

    # Read everything we need from the declaration before it goes away
    documentation = _leading_documentation(vue.declaration.docs)
    expression = print_node(component, ctx.options.indent_size)

    source.remove(vue.declaration.start, vue.declaration.end)
    source.add_export_assignment(expression, leading_trivia=documentation)
    for module, names in ctx.imports.items():
        ensure_import(source, module, names)
    source.format_text(ctx.options.indent_size)

    logger.debug(f"Converted component {name}")
    return TransformResult(component=name, diagnostics=raised)
