"""Translation of the component name and the ``@Component`` decorator options."""

from loguru import logger

from vue_declassify.transformer import ir
from vue_declassify.transformer.models import VueClass


def class_name_to_prop_name(vue: VueClass) -> ir.PropertyAssignment:
    """Turn the class name into the ``name`` option.

    Raises:
        TranslationError: If the class has no name
    """
    name = vue.declaration.get_name_or_throw()
    logger.debug(f"Component name: {name}")
    return ir.PropertyAssignment(name="name", initializer=ir.StringLiteral(name))


def copy_passthrough_options(vue: VueClass) -> list[ir.ObjectElement]:
    """Carry the decorator's option entries over verbatim, in order.

    Options such as ``components`` or lifecycle hooks are opaque here; nothing
    is merged with what the class body declares.
    """
    elements: list[ir.ObjectElement] = [
        ir.RawElement(text=option.text) for option in vue.passthrough
    ]
    if elements:
        logger.debug(f"Copied decorator options: {[o.name for o in vue.passthrough]}")
    return elements
