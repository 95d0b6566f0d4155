"""
AST Pretty Printer
==================

Indented outline of a source or target tree, for debugging and for
``stc --ast`` / ``stc --target-ast``. Built on the generic traverser:
the traversal context is the current indentation depth.

Example output for ``(add 2 "x")``:

    Program
      CallExpression add
        NumberLiteral 2
        StringLiteral "x"
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


class ASTPrinter:
    """
    Renders a tree as an indented outline.

    Usage:
        printer = ASTPrinter()
        print(printer.print(ast))
    """

    indent = "  "

    def __init__(self):
        self.output: list[str] = []

    def print(self, node) -> str:
        """Print the tree and return it as a string."""
        self.output = []
        handlers = NodeHandlers(enter=self._enter)
        visitor = {
            node_type: handlers
            for node_type in (
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
        }
        traverse(node, visitor, context=0)
        return "\n".join(self.output)

    def _enter(self, node, parent, depth: int) -> int:
        self.output.append(f"{self.indent * depth}{self._describe(node)}")
        return depth + 1

    def _describe(self, node) -> str:
        name = type(node).__name__
        if isinstance(node, CallExpression):
            return f"{name} {node.name}"
        if isinstance(node, TargetCallExpression):
            return f"{name} {node.callee.name}"
        if isinstance(node, Identifier):
            return f"{name} {node.name}"
        if isinstance(node, (StringLiteral, TargetStringLiteral)):
            return f'{name} "{node.value}"'
        if isinstance(node, (NumberLiteral, TargetNumberLiteral)):
            return f"{name} {node.value}"
        return name
