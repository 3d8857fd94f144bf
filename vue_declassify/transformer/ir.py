"""Intermediate representation of the options-object component."""

from dataclasses import dataclass, field


@dataclass
class DocComment:
    """Leading ``/** ... */`` comment, one entry per comment line."""

    lines: list[str]


# Expressions


@dataclass
class Expr:
    """Base for all expressions."""


@dataclass
class Identifier(Expr):
    """Text printed as-is. Also used for expressions carried over verbatim."""

    text: str


@dataclass
class StringLiteral(Expr):
    """String literal."""

    value: str
    single_quote: bool = True


@dataclass
class BooleanLiteral(Expr):
    """``true`` or ``false``."""

    value: bool


@dataclass
class AsExpression(Expr):
    """Type cast, ``expression as type``."""

    expression: Expr
    type: str


@dataclass
class ObjectLiteral(Expr):
    """Object literal, printed one element per line."""

    properties: list["ObjectElement"] = field(default_factory=list)


@dataclass
class CallExpression(Expr):
    """Function call."""

    callee: str
    args: list[Expr] = field(default_factory=list)


# Statements


@dataclass
class Stmt:
    """Base for all statements."""


@dataclass
class ReturnStatement(Stmt):
    """``return expression;``"""

    expression: Expr | None = None


@dataclass
class OpaqueStatement(Stmt):
    """Statement reproduced from its original source text, never re-analysed."""

    text: str


@dataclass
class Block:
    """Braced statement list."""

    statements: list[Stmt] = field(default_factory=list)


# Object literal elements


@dataclass
class ObjectElement:
    """Base for object literal members."""


@dataclass
class PropertyAssignment(ObjectElement):
    """``name: initializer``"""

    name: str
    initializer: Expr
    doc: DocComment | None = None


@dataclass
class MethodDeclaration(ObjectElement):
    """``name(parameters): return_type { body }``"""

    name: str
    parameters: list[str]
    return_type: str | None
    body: Block
    doc: DocComment | None = None


@dataclass
class RawElement(ObjectElement):
    """Member copied verbatim from the source, e.g. a decorator option."""

    text: str
    doc: DocComment | None = None

