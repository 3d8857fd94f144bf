"""
Translation of ``@Prop`` fields into the ``props`` option.

Each prop becomes ``name: { type: ..., default | required: ... }``. Vue only
knows a few runtime type markers, so anything richer than a primitive keeps its
static type through ``PropType``.
"""

from enum import Enum, auto

from loguru import logger

from vue_declassify.transformer import ir
from vue_declassify.transformer.ast_utils import create_documentation
from vue_declassify.transformer.context import TranslationContext
from vue_declassify.transformer.diagnostics import Diagnostic, DiagnosticKind
from vue_declassify.transformer.errors import TranslationError
from vue_declassify.transformer.models import PropModel, TypeNode, VueClass
from vue_declassify.transformer.type_utils import (
    classify_prop_type,
    infer_literal_type,
    primitive_marker,
)


class PropOption(Enum):
    """Which of ``default``/``required`` a prop ends up with."""

    DEFAULT = auto()
    REQUIRED = auto()
    NOT_REQUIRED = auto()


def _resolve_type(prop: PropModel) -> TypeNode:
    """Get the prop's type, inferring primitives from literal initializers."""
    declaration = prop.declaration
    if declaration.type_node is not None:
        return declaration.type_node

    candidates = [declaration.initializer]
    if prop.default is not None:
        candidates.append(prop.default.initializer)
    for initializer in candidates:
        inferred = infer_literal_type(initializer)
        if inferred:
            logger.debug(f"Inferred type '{inferred}' for prop {declaration.name}")
            return TypeNode(text=inferred)

    raise TranslationError(
        f"Prop '{declaration.name}' needs an explicit type annotation", declaration
    )


def class_prop_type_to_object_prop_type(
    ctx: TranslationContext, prop: PropModel
) -> ir.PropertyAssignment:
    """Build the ``type`` entry of a prop."""
    type_node = _resolve_type(prop)
    marker = primitive_marker(type_node.text)

    if marker:
        initializer: ir.Expr = ir.Identifier(marker)
    else:
        options = ctx.options
        ctx.require_import(options.prop_type_module, options.prop_type_name)
        base = classify_prop_type(type_node)
        logger.debug(
            f"Prop {prop.declaration.name}: '{type_node.text}' maps to {base.value}"
        )
        initializer = ir.AsExpression(
            expression=ir.Identifier(base.value),
            type=f"{options.prop_type_name}<{type_node.text.strip()}>",
        )

    return ir.PropertyAssignment(name="type", initializer=initializer)


def choose_prop_option(ctx: TranslationContext, prop: PropModel) -> PropOption:
    """Decide between ``default`` and ``required``.

    A default value implies the prop is not required, so the two are never
    emitted together. ``default`` wins when the decorator names both.
    """
    if prop.default is not None:
        if prop.required is not None:
            name = prop.declaration.name
            ctx.diagnose(
                Diagnostic(
                    kind=DiagnosticKind.REQUIRED_DROPPED,
                    subject=name,
                    message=(
                        f"Prop 「{name}」 declares both `default` and `required`; "
                        f"`required` was dropped."
                    ),
                )
            )
        return PropOption.DEFAULT
    if prop.required is not None:
        return PropOption.REQUIRED
    return PropOption.NOT_REQUIRED


def class_prop_options_to_object_prop_options(
    ctx: TranslationContext, prop: PropModel
) -> ir.ObjectElement:
    """Build the single ``default`` or ``required`` entry of a prop."""
    match choose_prop_option(ctx, prop), prop.default, prop.required:
        case PropOption.DEFAULT, default, _ if default is not None:
            return ir.PropertyAssignment(
                name="default",
                initializer=ir.Identifier(default.get_initializer_or_throw()),
            )
        case PropOption.REQUIRED, _, required if required is not None:
            return ir.RawElement(text=required.text)
        case _:
            return ir.PropertyAssignment(
                name="required", initializer=ir.BooleanLiteral(False)
            )


def class_prop_to_object_prop(
    ctx: TranslationContext, prop: PropModel
) -> ir.PropertyAssignment:
    """Translate one prop, keeping its documentation."""
    return create_documentation(
        ir.PropertyAssignment(
            name=prop.declaration.name,
            initializer=ir.ObjectLiteral(
                [
                    class_prop_type_to_object_prop_type(ctx, prop),
                    class_prop_options_to_object_prop_options(ctx, prop),
                ]
            ),
        ),
        prop.declaration.docs,
    )


def class_props_to_object_props(
    ctx: TranslationContext, vue: VueClass
) -> ir.PropertyAssignment:
    """Build the ``props`` option."""
    return ir.PropertyAssignment(
        name="props",
        initializer=ir.ObjectLiteral(
            [class_prop_to_object_prop(ctx, prop) for prop in vue.props]
        ),
    )
