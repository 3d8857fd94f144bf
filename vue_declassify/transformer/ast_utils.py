"""
Node helpers shared by the option translators.

This module carries documentation over from a class member to the node that
replaces it, and reproduces accessor bodies statement by statement.
"""

from typing import TypeVar

from vue_declassify.transformer import ir
from vue_declassify.transformer.models import Block, JSDoc

T = TypeVar("T", ir.PropertyAssignment, ir.MethodDeclaration, ir.RawElement)


def create_documentation(target: T, docs: list[JSDoc]) -> T:
    """Attach the first documentation block to a generated node.

    The comment is rebuilt line by line from the block's description text
    rather than copied as a rendered block.

    Args:
        target: Node receiving the documentation
        docs: Documentation blocks of the original declaration

    Returns:
        The same node, documented if the first block had any comment text
    """
    if docs and docs[0].comment:
        target.doc = ir.DocComment(lines=docs[0].comment.split("\n"))
    return target


def transform_block(block: Block) -> ir.Block:
    """Reproduce a function body with one opaque statement per original statement.

    Comments between statements are kept as statements of their own.
    """
    return ir.Block(
        statements=[ir.OpaqueStatement(text=s.text) for s in block.statements]
    )
