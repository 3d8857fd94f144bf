"""Code emitter that prints the options-object IR as TypeScript."""

from vue_declassify.transformer.constants import INDENT_SIZE
from vue_declassify.transformer.ir import (
    AsExpression,
    Block,
    BooleanLiteral,
    CallExpression,
    DocComment,
    Expr,
    Identifier,
    MethodDeclaration,
    ObjectElement,
    ObjectLiteral,
    OpaqueStatement,
    PropertyAssignment,
    RawElement,
    ReturnStatement,
    Stmt,
    StringLiteral,
)


def _quote(value: str, single_quote: bool) -> str:
    quote = "'" if single_quote else '"'
    escaped = (
        value.replace("\\", "\\\\")
        .replace(quote, f"\\{quote}")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"{quote}{escaped}{quote}"


class Emitter:
    """Prints IR nodes.

    Nested constructs are indented by ``indent_size`` spaces per level. Text
    carried over verbatim keeps its own line breaks and inner indentation;
    ``formatter.format_code`` evens those out afterwards.
    """

    def __init__(self, indent_size: int = INDENT_SIZE):
        self.indent = " " * indent_size

    def emit(self, node: Expr) -> str:
        return self._emit_expr(node, 0)

    def _emit_doc(self, doc: DocComment | None, prefix: str) -> list[str]:
        if doc is None:
            return []
        lines = [f"{prefix}/**"]
        for line in doc.lines:
            lines.append(f"{prefix} * {line}".rstrip())
        lines.append(f"{prefix} */")
        return lines

    def _emit_expr(self, expr: Expr, level: int) -> str:
        match expr:
            case Identifier(text):
                return text

            case StringLiteral(value, single_quote):
                return _quote(value, single_quote)

            case BooleanLiteral(value):
                return "true" if value else "false"

            case AsExpression(inner, type_):
                return f"{self._emit_expr(inner, level)} as {type_}"

            case CallExpression(callee, args):
                args_str = ", ".join(self._emit_expr(a, level) for a in args)
                return f"{callee}({args_str})"

            case ObjectLiteral(properties):
                if not properties:
                    return "{}"
                members = [self._emit_element(p, level + 1) for p in properties]
                lines = ["{"]
                for i, member in enumerate(members):
                    separator = "," if i < len(members) - 1 else ""
                    lines.append(f"{member}{separator}")
                lines.append(f"{self.indent * level}}}")
                return "\n".join(lines)

        raise TypeError(f"Cannot emit expression node: {type(expr).__name__}")

    def _emit_element(self, element: ObjectElement, level: int) -> str:
        prefix = self.indent * level
        match element:
            case PropertyAssignment(name, initializer, doc):
                lines = self._emit_doc(doc, prefix)
                lines.append(f"{prefix}{name}: {self._emit_expr(initializer, level)}")
                return "\n".join(lines)

            case MethodDeclaration(name, parameters, return_type, body, doc):
                lines = self._emit_doc(doc, prefix)
                signature = f"{name}({', '.join(parameters)})"
                if return_type:
                    signature += f": {return_type}"
                lines.append(f"{prefix}{signature} {self._emit_block(body, level)}")
                return "\n".join(lines)

            case RawElement(text, doc):
                lines = self._emit_doc(doc, prefix)
                lines.append(f"{prefix}{text}")
                return "\n".join(lines)

        raise TypeError(f"Cannot emit object element: {type(element).__name__}")

    def _emit_block(self, block: Block, level: int) -> str:
        lines = ["{"]
        for stmt in block.statements:
            lines.append(self._emit_stmt(stmt, level + 1))
        lines.append(f"{self.indent * level}}}")
        return "\n".join(lines)

    def _emit_stmt(self, stmt: Stmt, level: int) -> str:
        prefix = self.indent * level
        match stmt:
            case ReturnStatement(expression):
                if expression is None:
                    return f"{prefix}return;"
                return f"{prefix}return {self._emit_expr(expression, level)};"

            case OpaqueStatement(text):
                return f"{prefix}{text}"

        raise TypeError(f"Cannot emit statement: {type(stmt).__name__}")


def print_node(node: Expr, indent_size: int = INDENT_SIZE) -> str:
    """Print an IR node as TypeScript source text."""
    return Emitter(indent_size).emit(node)
