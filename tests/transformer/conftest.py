"""
Pytest configuration and shared fixtures for transformer tests.

This module contains fixtures that build component models by hand, the way an
extractor would hand them to the transformer.
"""

import textwrap

import pytest

from vue_declassify.source import SourceUnit
from vue_declassify.transformer.context import TranslationContext
from vue_declassify.transformer.diagnostics import Diagnostics
from vue_declassify.transformer.models import (
    Block,
    ClassDeclaration,
    ComputedPair,
    GetAccessor,
    JSDoc,
    PropertyAssignment,
    PropertyDeclaration,
    PropModel,
    Statement,
    TypeNode,
    VueClass,
)

HELLO_WORLD = textwrap.dedent(
    """\
    import { Component, Prop, Vue } from 'vue-property-decorator'

    /**
     * Greets the user.
     */
    @Component({
      components: { Child },
    })
    export default class HelloWorld extends Vue {
      /** Message to show */
      @Prop({ default: "x" }) readonly msg!: string

      count = 1

      get double(): number {
        return this.count * 2
      }
    }
    """
)


def block(*statements: str) -> Block:
    """Build a function body from statement texts."""
    return Block([Statement(text) for text in statements])


def class_span(text: str) -> tuple[int, int]:
    """Span of the component class, from its documentation to its last brace."""
    decorator = text.index("@Component")
    doc = text.rfind("/**", 0, decorator)
    start = doc if doc != -1 else decorator
    return start, text.rindex("}") + 1


@pytest.fixture
def span_of():
    """Fixture providing the class span helper."""
    return class_span


@pytest.fixture
def make_block():
    """Fixture providing the function body builder."""
    return block


@pytest.fixture
def diagnostics():
    """Fixture providing an accumulating diagnostic sink."""
    return Diagnostics()


@pytest.fixture
def ctx(diagnostics):
    """Fixture providing a translation context wired to ``diagnostics``."""
    return TranslationContext(sink=diagnostics)


@pytest.fixture
def declaration():
    """Fixture providing a documented class declaration."""
    return ClassDeclaration(
        name="HelloWorld",
        start=0,
        end=0,
        docs=[JSDoc(comment="Greets the user.", full_text="/**\n * Greets the user.\n */")],
    )


@pytest.fixture
def hello_world_source():
    """Fixture providing the source unit of a small class component."""
    return SourceUnit(HELLO_WORLD, "HelloWorld.ts")


@pytest.fixture
def hello_world(hello_world_source):
    """Fixture providing the model an extractor would produce for HELLO_WORLD."""
    start, end = class_span(hello_world_source.get_full_text())
    return VueClass(
        declaration=ClassDeclaration(
            name="HelloWorld",
            start=start,
            end=end,
            docs=[
                JSDoc(
                    comment="Greets the user.",
                    full_text="/**\n * Greets the user.\n */",
                )
            ],
            source_file="HelloWorld.ts",
        ),
        passthrough=[
            PropertyAssignment(
                name="components",
                initializer="{ Child }",
                text="components: { Child }",
            )
        ],
        props=[
            PropModel(
                declaration=PropertyDeclaration(
                    name="msg",
                    type_node=TypeNode("string"),
                    docs=[JSDoc(comment="Message to show")],
                ),
                default=PropertyAssignment(
                    name="default", initializer='"x"', text='default: "x"'
                ),
            )
        ],
        data=[PropertyDeclaration(name="count", initializer="1")],
        computed={
            "double": ComputedPair(
                getter=GetAccessor(
                    body=block("return this.count * 2"),
                    return_type=TypeNode("number"),
                )
            )
        },
    )
