"""Configuration for the class-to-object transformer."""

from dataclasses import dataclass

from vue_declassify.transformer.constants import (
    FACTORY_CALLEE,
    FALLBACK_RETURN_TYPE,
    INDENT_SIZE,
    PROP_TYPE_MODULE,
    PROP_TYPE_NAME,
)


@dataclass(frozen=True)
class TransformOptions:
    """Knobs for the generated code.

    Attributes:
        factory: Callee wrapping the options object
        prop_type_module: Module the prop type helper is imported from
        prop_type_name: Name of the prop type helper
        fallback_return_type: Type used for computed getters of unknown type
        indent_size: Spaces per indentation level
    """

    factory: str = FACTORY_CALLEE
    prop_type_module: str = PROP_TYPE_MODULE
    prop_type_name: str = PROP_TYPE_NAME
    fallback_return_type: str = FALLBACK_RETURN_TYPE
    indent_size: int = INDENT_SIZE
