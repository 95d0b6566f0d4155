"""
Source-to-Target AST Transformer
================================

Rewrites the Lisp-shaped source tree into the C-shaped target tree in
a single traversal.

Rules
-----
| Source                      | Target                                      |
|-----------------------------|---------------------------------------------|
| NumberLiteral(v)            | TargetNumberLiteral(v)                      |
| StringLiteral(v)            | TargetStringLiteral(v)                      |
| CallExpression(name, ...)   | TargetCallExpression(Identifier(name), ...) |
| top-level CallExpression    | ExpressionStatement(TargetCallExpression)   |

How the new tree is built
-------------------------
The traversal context is the list the current node's output belongs
in. It starts as the new program's body. A call handler appends its
new node to the incoming list and returns the node's own ``arguments``
list, which becomes the context for the call's children. Source nodes
are never modified.
"""

from supertiny.ast import (
    Program,
    CallExpression,
    NumberLiteral,
    StringLiteral,
    TargetProgram,
    ExpressionStatement,
    TargetCallExpression,
    Identifier,
    TargetNumberLiteral,
    TargetStringLiteral,
)
from supertiny.traverser import NodeHandlers, traverse


def _enter_number(node: NumberLiteral, parent, context: list) -> None:
    context.append(TargetNumberLiteral(value=node.value))


def _enter_string(node: StringLiteral, parent, context: list) -> None:
    context.append(TargetStringLiteral(value=node.value))


def _enter_call(node: CallExpression, parent, context: list) -> list:
    expression = TargetCallExpression(callee=Identifier(name=node.name))

    # Only calls nested inside other calls stay bare
    if isinstance(parent, CallExpression):
        context.append(expression)
    else:
        context.append(ExpressionStatement(expression=expression))

    return expression.arguments


TRANSFORM_VISITOR = {
    NumberLiteral: NodeHandlers(enter=_enter_number),
    StringLiteral: NodeHandlers(enter=_enter_string),
    CallExpression: NodeHandlers(enter=_enter_call),
}


def transform(ast: Program) -> TargetProgram:
    """
    Build the target AST for a source program.

    Args:
        ast: Source Program from the parser

    Returns:
        A freshly built TargetProgram

    Raises:
        UnknownNodeTypeError: If the source tree contains a foreign node
    """
    new_ast = TargetProgram()
    traverse(ast, TRANSFORM_VISITOR, context=new_ast.body)
    return new_ast
