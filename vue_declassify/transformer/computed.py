"""
Translation of ``get``/``set`` accessors into the ``computed`` option.

A lone getter becomes a method. A getter with a setter becomes an object with
``get`` and ``set`` methods. Vue wants the getter's return type spelled out and
equal to the setter's parameter type; where it cannot be determined, ``any`` is
used and a diagnostic asks for a manual annotation.
"""

from loguru import logger

from vue_declassify.transformer import ir
from vue_declassify.transformer.ast_utils import transform_block
from vue_declassify.transformer.context import TranslationContext
from vue_declassify.transformer.diagnostics import Diagnostic, DiagnosticKind
from vue_declassify.transformer.errors import TranslationError
from vue_declassify.transformer.models import GetAccessor, SetAccessor, VueClass


def _fallback_return_type(ctx: TranslationContext, name: str, message: str) -> str:
    ctx.diagnose(
        Diagnostic(
            kind=DiagnosticKind.MANUAL_RETURN_TYPE, subject=name, message=message
        )
    )
    return ctx.options.fallback_return_type


def class_computed_getter_to_object_computed_getter(
    ctx: TranslationContext, name: str, getter: GetAccessor
) -> ir.MethodDeclaration:
    """Translate a getter without a setter into ``name(): T { ... }``."""
    if getter.return_type is not None:
        return_type = getter.return_type.text
    else:
        return_type = _fallback_return_type(
            ctx, name, f"Computed getter 「{name}」 will require a manual return type."
        )

    return ir.MethodDeclaration(
        name=name,
        parameters=[],
        return_type=return_type,
        body=transform_block(getter.body),
    )


def class_computed_property_to_object_computed_property(
    ctx: TranslationContext, name: str, getter: GetAccessor, setter: SetAccessor
) -> ir.PropertyAssignment:
    """Translate a getter/setter pair into ``name: { get() {...}, set(v) {...} }``.

    Raises:
        TranslationError: If the setter has no parameter
    """
    if not setter.parameters:
        raise TranslationError(
            f"Computed setter 「{name}」 doesn't seem to have a parameter.", setter
        )
    set_parameter = setter.parameters[0]

    setter_declaration = ir.MethodDeclaration(
        name="set",
        parameters=[set_parameter.text],
        return_type=None,
        body=transform_block(setter.body),
    )

    # The getter must return exactly what the setter accepts
    if set_parameter.type_node is not None:
        return_type = set_parameter.type_node.text
    else:
        return_type = _fallback_return_type(
            ctx,
            name,
            f"Computed getter for 「{name}」 will require a manual return type.",
        )

    getter_declaration = ir.MethodDeclaration(
        name="get",
        parameters=[],
        return_type=return_type,
        body=transform_block(getter.body),
    )

    return ir.PropertyAssignment(
        name=name,
        initializer=ir.ObjectLiteral([getter_declaration, setter_declaration]),
    )


def class_computed_to_object_computed(
    ctx: TranslationContext, vue: VueClass
) -> ir.PropertyAssignment:
    """Build the ``computed`` option.

    Raises:
        TranslationError: For a setter without a getter, or a parameterless setter
    """
    properties: list[ir.ObjectElement] = []

    for name, pair in vue.computed.items():
        if pair.getter is not None:
            if pair.setter is not None:
                properties.append(
                    class_computed_property_to_object_computed_property(
                        ctx, name, pair.getter, pair.setter
                    )
                )
            else:
                properties.append(
                    class_computed_getter_to_object_computed_getter(
                        ctx, name, pair.getter
                    )
                )
        elif pair.setter is not None:
            raise TranslationError(
                f"Found an illegal computed setter 「{name}」 without a getter.",
                pair.setter,
            )

    logger.debug(f"Computed properties: {list(vue.computed)}")
    return ir.PropertyAssignment(
        name="computed", initializer=ir.ObjectLiteral(properties)
    )
