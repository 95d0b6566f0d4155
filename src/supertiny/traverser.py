"""
Depth-First AST Traverser
=========================

A generic walker shared by every pass that consumes a tree. The walker
owns the visiting order; callers supply per-node-class handlers.

Visit Order
-----------
For each node: ``enter`` (pre-order), then the children left to right,
then ``exit`` (post-order). Sibling subtrees are fully nested and never
interleave. The root is visited with ``parent=None``.

| Node class            | Children               |
|-----------------------|------------------------|
| Program               | body                   |
| CallExpression        | params                 |
| NumberLiteral         | (none)                 |
| StringLiteral         | (none)                 |
| TargetProgram         | body                   |
| ExpressionStatement   | expression             |
| TargetCallExpression  | arguments              |
| Identifier            | (none)                 |
| TargetNumberLiteral   | (none)                 |
| TargetStringLiteral   | (none)                 |

Subclasses of these classes are walked like their base, and a visitor
entry for a base class also handles its subclasses (the most derived
registered class wins). Any other object is an UnknownNodeTypeError.

Context Threading
-----------------
Handlers have the signature ``handler(node, parent, context)``. Each
``enter`` may return a new context; the node's children then receive
that value instead of the one the node received. Returning None keeps
the incoming context. ``exit`` is called with the same context that
``enter`` received.

This lets one pass build a second tree: the context is the list that
the current node's output should be appended to.

Example Usage
-------------
>>> calls = []
>>> traverse(program, {
...     CallExpression: NodeHandlers(enter=lambda n, p, ctx: calls.append(n.name)),
... })
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

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
from supertiny.errors import UnknownNodeTypeError


Handler = Callable[[Any, Optional[Any], Any], Any]


@dataclass(frozen=True)
class NodeHandlers:
    """
    The enter/exit pair registered for one node class.

    Attributes:
        enter: Called before the children; may return the children's context
        exit: Called after the children
    """
    enter: Optional[Handler] = None
    exit: Optional[Handler] = None


Visitor = Mapping[type, NodeHandlers]


_LEAF_TYPES = (
    NumberLiteral,
    StringLiteral,
    Identifier,
    TargetNumberLiteral,
    TargetStringLiteral,
)


def children_of(node: Any) -> list:
    """
    Return the child nodes of a known node, in visiting order.

    Raises:
        UnknownNodeTypeError: If node is not one of the AST classes
    """
    if isinstance(node, (Program, TargetProgram)):
        return node.body
    elif isinstance(node, CallExpression):
        return node.params
    elif isinstance(node, TargetCallExpression):
        return node.arguments
    elif isinstance(node, ExpressionStatement):
        return [node.expression]
    elif isinstance(node, _LEAF_TYPES):
        return []
    raise UnknownNodeTypeError(node, walker="traverser")


def traverse(ast: Any, visitor: Visitor, context: Any = None) -> None:
    """
    Walk a tree depth-first, calling the visitor's handlers.

    Args:
        ast: Root node (source or target tree)
        visitor: Mapping from node class to NodeHandlers
        context: Initial context handed to the root's handlers

    Raises:
        UnknownNodeTypeError: If the tree contains a foreign node
    """
    _traverse_node(ast, None, visitor, context)


def handlers_for(node: Any, visitor: Visitor) -> Optional[NodeHandlers]:
    """
    Find the handlers registered for node's class or its nearest base.

    Subclasses of a node class are matched the same way children_of
    matches them, so a specialised node still reaches its base handlers.
    """
    for cls in type(node).__mro__:
        handlers = visitor.get(cls)
        if handlers is not None:
            return handlers
    return None


def _traverse_node(node: Any, parent: Any, visitor: Visitor, context: Any) -> None:
    handlers = handlers_for(node, visitor)

    child_context = context
    if handlers is not None and handlers.enter is not None:
        returned = handlers.enter(node, parent, context)
        if returned is not None:
            child_context = returned

    for child in children_of(node):
        _traverse_node(child, node, visitor, child_context)

    if handlers is not None and handlers.exit is not None:
        handlers.exit(node, parent, context)
