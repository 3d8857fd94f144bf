"""
Data models for a class-style Vue component.

These dataclasses are the structured model handed to the transformer by an
extractor: the decorated class declaration, its props, data fields and computed
accessors. Text-carrying fields hold the exact source text of the node they
describe, so the transformer can reproduce it without re-deriving it.
"""

from dataclasses import dataclass, field

from vue_declassify.transformer.errors import TranslationError


@dataclass
class JSDoc:
    """Documentation block attached to a declaration.

    Attributes:
        comment: Description text with the comment markers stripped, or None
        full_text: The block exactly as written in the source (``/** ... */``)
    """

    comment: str | None
    full_text: str = ""


@dataclass
class TypeNode:
    """Explicit type annotation.

    Attributes:
        text: Annotation text as written, e.g. ``Array<string>``
        call_signatures: Number of call signatures the resolved type has, when
            the extractor had access to a type checker. None means unknown and
            the transformer falls back to inspecting ``text``.
    """

    text: str
    call_signatures: int | None = None


@dataclass
class PropertyAssignment:
    """A ``key: value`` entry of an object literal, e.g. in ``@Component({...})``.

    Attributes:
        name: Entry key
        initializer: Value text, or None for shorthand and method entries
        text: Entry text exactly as written
    """

    name: str
    initializer: str | None
    text: str
    lineno: int | None = None

    def get_initializer_or_throw(self) -> str:
        if self.initializer is None:
            raise TranslationError(f"Expected '{self.name}' to have an initializer", self)
        return self.initializer


@dataclass
class PropertyDeclaration:
    """Class field declaration, used for both props and data fields."""

    name: str
    type_node: TypeNode | None = None
    initializer: str | None = None
    docs: list[JSDoc] = field(default_factory=list)
    lineno: int | None = None


@dataclass
class Parameter:
    """Accessor parameter.

    Attributes:
        name: Parameter name
        type_node: Explicit type annotation, if any
        text: Parameter text as written; defaults to ``name: type``
    """

    name: str
    type_node: TypeNode | None = None
    text: str = ""

    def __post_init__(self) -> None:
        if not self.text:
            self.text = (
                f"{self.name}: {self.type_node.text}" if self.type_node else self.name
            )


@dataclass
class Statement:
    """Top-level statement or comment inside a function body."""

    text: str


@dataclass
class Block:
    """Function body: top-level statements with interleaved comments kept."""

    statements: list[Statement] = field(default_factory=list)


@dataclass
class GetAccessor:
    """``get name(): T { ... }`` accessor."""

    body: Block
    return_type: TypeNode | None = None
    lineno: int | None = None


@dataclass
class SetAccessor:
    """``set name(value: T) { ... }`` accessor."""

    body: Block
    parameters: list[Parameter] = field(default_factory=list)
    lineno: int | None = None


@dataclass
class ComputedPair:
    """Getter and/or setter sharing one computed property name."""

    getter: GetAccessor | None = None
    setter: SetAccessor | None = None


@dataclass
class ClassDeclaration:
    """The decorated component class.

    Attributes:
        name: Class name, None for anonymous classes
        start: Offset of the first character of the declaration in the unit,
            including its documentation and decorators
        end: Offset one past the declaration's closing brace
        docs: Documentation blocks attached to the class
    """

    name: str | None
    start: int
    end: int
    docs: list[JSDoc] = field(default_factory=list)
    source_file: str | None = None
    lineno: int | None = None

    def get_name_or_throw(self) -> str:
        if not self.name:
            raise TranslationError("Expected the component class to have a name", self)
        return self.name


@dataclass
class PropModel:
    """A ``@Prop`` field with the ``default``/``required`` options of its decorator."""

    declaration: PropertyDeclaration
    default: PropertyAssignment | None = None
    required: PropertyAssignment | None = None


@dataclass
class VueClass:
    """Everything the transformer needs to know about one class component.

    Attributes:
        declaration: The class declaration
        passthrough: Entries of the ``@Component({...})`` argument, in order
        props: Prop fields, in declaration order
        data: Plain initialized fields, in declaration order
        computed: Accessors grouped by property name
    """

    declaration: ClassDeclaration
    passthrough: list[PropertyAssignment] = field(default_factory=list)
    props: list[PropModel] = field(default_factory=list)
    data: list[PropertyDeclaration] = field(default_factory=list)
    computed: dict[str, ComputedPair] = field(default_factory=dict)
