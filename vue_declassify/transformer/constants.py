"""
Constants and predefined values for the class-to-object transformer.

This module contains the names of the Vue runtime helpers the generated code
refers to and the mapping from TypeScript primitives to Vue prop type markers.
"""

# Factory call wrapping the generated options object
FACTORY_CALLEE = "Vue.extend"

# Helper used to keep static typing on non-primitive props
PROP_TYPE_MODULE = "vue"
PROP_TYPE_NAME = "PropType"

# Vue only accepts these runtime markers for primitive props
PRIMITIVE_PROP_TYPES: dict[str, str] = {
    "string": "String",
    "number": "Number",
    "boolean": "Boolean",
}

# Return type used when a computed getter's type cannot be determined
FALLBACK_RETURN_TYPE = "any"

# Indentation width of the generated code
INDENT_SIZE = 4
