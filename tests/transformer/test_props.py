"""Tests for the translation of @Prop fields."""

import pytest

from vue_declassify.transformer import ir
from vue_declassify.transformer.diagnostics import DiagnosticKind
from vue_declassify.transformer.emitter import print_node
from vue_declassify.transformer.errors import TranslationError
from vue_declassify.transformer.models import (
    ClassDeclaration,
    JSDoc,
    PropertyAssignment,
    PropertyDeclaration,
    PropModel,
    TypeNode,
    VueClass,
)
from vue_declassify.transformer.props import (
    PropOption,
    choose_prop_option,
    class_prop_options_to_object_prop_options,
    class_prop_to_object_prop,
    class_prop_type_to_object_prop_type,
    class_props_to_object_props,
)


def make_prop(
    name="value",
    type_text=None,
    initializer=None,
    default=None,
    required=None,
    docs=None,
) -> PropModel:
    return PropModel(
        declaration=PropertyDeclaration(
            name=name,
            type_node=TypeNode(type_text) if type_text else None,
            initializer=initializer,
            docs=docs or [],
        ),
        default=(
            PropertyAssignment("default", default, f"default: {default}")
            if default is not None
            else None
        ),
        required=(
            PropertyAssignment("required", required, f"required: {required}")
            if required is not None
            else None
        ),
    )


class TestPropType:
    @pytest.mark.parametrize(
        "type_text, marker",
        [("string", "String"), ("number", "Number"), ("boolean", "Boolean")],
    )
    def test_primitive_types_are_not_wrapped(self, ctx, type_text, marker):
        # Act
        entry = class_prop_type_to_object_prop_type(ctx, make_prop(type_text=type_text))

        # Assert
        assert entry == ir.PropertyAssignment("type", ir.Identifier(marker))
        assert ctx.imports == {}

    @pytest.mark.parametrize(
        "type_text, expected",
        [
            ("(value: string) => void", "Function as PropType<(value: string) => void>"),
            ("string[]", "Array as PropType<string[]>"),
            ("Array<User>", "Array as PropType<Array<User>>"),
            ("MyInterface", "Object as PropType<MyInterface>"),
            ("'small' | 'large'", "Object as PropType<'small' | 'large'>"),
        ],
    )
    def test_non_primitive_types_use_prop_type(self, ctx, type_text, expected):
        # Act
        entry = class_prop_type_to_object_prop_type(ctx, make_prop(type_text=type_text))

        # Assert
        assert print_node(entry.initializer) == expected
        assert ctx.imports == {"vue": ["PropType"]}

    def test_prop_type_imported_once(self, ctx):
        vue = VueClass(
            declaration=ClassDeclaration("Foo", 0, 0),
            props=[
                make_prop("a", "MyInterface"),
                make_prop("b", "string[]"),
                make_prop("c", "() => void"),
            ],
        )

        class_props_to_object_props(ctx, vue)

        assert ctx.imports == {"vue": ["PropType"]}

    def test_type_inferred_from_literal_initializer(self, ctx):
        prop = make_prop(initializer="'medium'")
        entry = class_prop_type_to_object_prop_type(ctx, prop)
        assert entry.initializer == ir.Identifier("String")

    def test_type_inferred_from_default(self, ctx):
        prop = make_prop(default="10")
        entry = class_prop_type_to_object_prop_type(ctx, prop)
        assert entry.initializer == ir.Identifier("Number")

    def test_untyped_prop_without_literal_fails(self, ctx):
        with pytest.raises(TranslationError, match="needs an explicit type"):
            class_prop_type_to_object_prop_type(ctx, make_prop(default="() => []"))


class TestPropOption:
    def test_default_wins(self, ctx):
        assert choose_prop_option(ctx, make_prop(default="1")) == PropOption.DEFAULT

    def test_required(self, ctx):
        assert choose_prop_option(ctx, make_prop(required="true")) == PropOption.REQUIRED

    def test_neither(self, ctx):
        assert choose_prop_option(ctx, make_prop()) == PropOption.NOT_REQUIRED

    def test_both_keeps_default_and_reports(self, ctx, diagnostics):
        # Act
        option = choose_prop_option(ctx, make_prop(default="1", required="true"))

        # Assert
        assert option == PropOption.DEFAULT
        assert [d.kind for d in diagnostics] == [DiagnosticKind.REQUIRED_DROPPED]

    @pytest.mark.parametrize(
        "default, required, expected",
        [
            ("1", None, "default: 1"),
            ("1", "true", "default: 1"),
            (None, "true", "required: true"),
            (None, None, "required: false"),
        ],
    )
    def test_option_entry(self, ctx, default, required, expected):
        prop = make_prop(default=default, required=required)

        entry = class_prop_options_to_object_prop_options(ctx, prop)

        assert print_node(ir.ObjectLiteral([entry])) == f"{{\n    {expected}\n}}"


class TestClassPropToObjectProp:
    def test_default_text_carried_verbatim(self, ctx):
        prop = make_prop("label", "string", default="'a' + 'b'")
        code = print_node(ir.ObjectLiteral([class_prop_to_object_prop(ctx, prop)]))
        expected = """\
{
    label: {
        type: String,
        default: 'a' + 'b'
    }
}"""
        assert code == expected

    def test_required_copied_unchanged(self, ctx):
        prop = make_prop("label", "string", required="true")
        code = print_node(ir.ObjectLiteral([class_prop_to_object_prop(ctx, prop)]))
        expected = """\
{
    label: {
        type: String,
        required: true
    }
}"""
        assert code == expected

    def test_interface_prop_not_required(self, ctx):
        # Arrange
        prop = make_prop("config", "MyInterface")

        # Act
        code = print_node(ir.ObjectLiteral([class_prop_to_object_prop(ctx, prop)]))

        # Assert
        expected = """\
{
    config: {
        type: Object as PropType<MyInterface>,
        required: false
    }
}"""
        assert code == expected

    @pytest.mark.parametrize(
        "default, required",
        [("1", None), (None, "true"), (None, None), ("1", "false")],
    )
    def test_exactly_one_of_default_and_required(self, ctx, default, required):
        prop = make_prop("n", "number", default=default, required=required)

        entry = class_prop_to_object_prop(ctx, prop)

        keys = []
        for element in entry.initializer.properties[1:]:
            if isinstance(element, ir.RawElement):
                keys.append(element.text.split(":")[0])
            else:
                keys.append(element.name)
        assert len(keys) == 1
        assert keys[0] in ("default", "required")

    def test_documentation_attached(self, ctx):
        prop = make_prop("size", "number", docs=[JSDoc(comment="Size in px")])
        entry = class_prop_to_object_prop(ctx, prop)
        assert entry.doc == ir.DocComment(["Size in px"])
