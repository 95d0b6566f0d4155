"""
C-Style Code Generator
======================

Renders a target AST as text. This is the last stage of the pipeline.

Rendering Rules
---------------
| Node                   | Output                                  |
|------------------------|-----------------------------------------|
| TargetProgram          | each body element, joined by newlines   |
| ExpressionStatement    | <expression>;                           |
| TargetCallExpression   | callee(arg, arg, ...)                   |
| Identifier             | name                                    |
| TargetNumberLiteral    | value, verbatim                         |
| TargetStringLiteral    | "value" (no escaping)                   |

Example
-------
>>> generate(transform(parse(tokenize('(add 2 (subtract 4 2))'))))
'add(2, subtract(4, 2));'
"""

from supertiny.ast import (
    TargetProgram,
    ExpressionStatement,
    TargetCallExpression,
    Identifier,
    TargetNumberLiteral,
    TargetStringLiteral,
)
from supertiny.errors import UnknownNodeTypeError


class CodeGenerator:
    """
    Recursive renderer for target trees.

    Usage:
        generator = CodeGenerator()
        text = generator.generate(target_ast)
    """

    statement_separator = "\n"
    argument_separator = ", "

    def generate(self, node) -> str:
        """
        Render a target node and everything below it.

        Raises:
            UnknownNodeTypeError: If node is not a target AST node
        """
        if isinstance(node, TargetProgram):
            return self.statement_separator.join(
                self.generate(child) for child in node.body
            )
        elif isinstance(node, ExpressionStatement):
            return self.generate(node.expression) + ";"
        elif isinstance(node, TargetCallExpression):
            args = self.argument_separator.join(
                self.generate(arg) for arg in node.arguments
            )
            return f"{self.generate(node.callee)}({args})"
        elif isinstance(node, Identifier):
            return node.name
        elif isinstance(node, TargetNumberLiteral):
            return node.value
        elif isinstance(node, TargetStringLiteral):
            return f'"{node.value}"'
        raise UnknownNodeTypeError(node, walker="generator")


def generate(node) -> str:
    """Render a target AST to C-style text."""
    return CodeGenerator().generate(node)
