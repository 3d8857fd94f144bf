"""Translation of initialized class fields into the ``data()`` option."""

from loguru import logger

from vue_declassify.transformer import ir
from vue_declassify.transformer.ast_utils import create_documentation
from vue_declassify.transformer.errors import TranslationError
from vue_declassify.transformer.models import PropertyDeclaration, VueClass


def class_data_field_to_object_data_field(
    declaration: PropertyDeclaration,
) -> ir.PropertyAssignment:
    """Translate one field into an entry of the returned data object.

    The object literal cannot carry a field's own type annotation, so a typed
    field becomes ``initializer as Type``.

    Raises:
        TranslationError: If the field has no initializer
    """
    if declaration.initializer is None:
        raise TranslationError(
            f"Data field '{declaration.name}' has no initial value", declaration
        )

    initializer: ir.Expr = ir.Identifier(declaration.initializer)
    if declaration.type_node is not None:
        initializer = ir.AsExpression(
            expression=initializer, type=declaration.type_node.text
        )

    return create_documentation(
        ir.PropertyAssignment(name=declaration.name, initializer=initializer),
        declaration.docs,
    )


def class_data_to_object_data(vue: VueClass) -> ir.MethodDeclaration:
    """Build ``data() { return { ... }; }`` from the class fields."""
    properties: list[ir.ObjectElement] = [
        class_data_field_to_object_data_field(declaration) for declaration in vue.data
    ]
    logger.debug(f"Data fields: {[d.name for d in vue.data]}")

    return ir.MethodDeclaration(
        name="data",
        parameters=[],
        return_type=None,
        body=ir.Block([ir.ReturnStatement(ir.ObjectLiteral(properties))]),
    )
