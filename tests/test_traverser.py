# =============================================================================
# test_traverser.py - Traverser Unit Tests
# =============================================================================
# Tests for the generic depth-first walker.
#
# Test coverage includes:
#   - enter/exit ordering (pre-order / post-order, left to right)
#   - parent argument, including None for the root
#   - context threading through enter return values
#   - walking target trees
#   - UnknownNodeTypeError on foreign nodes
# =============================================================================

import pytest
from supertiny.parser import parse_source
from supertiny.traverser import NodeHandlers, children_of, traverse
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
)
from supertiny.errors import UnknownNodeTypeError


def label(node) -> str:
    """Short label for event logs."""
    if isinstance(node, CallExpression):
        return node.name
    if isinstance(node, (NumberLiteral, StringLiteral)):
        return node.value
    return type(node).__name__


def recording_visitor(events: list) -> dict:
    """Visitor that logs every enter and exit."""
    handlers = NodeHandlers(
        enter=lambda node, parent, ctx: events.append(("enter", label(node))),
        exit=lambda node, parent, ctx: events.append(("exit", label(node))),
    )
    return {
        Program: handlers,
        CallExpression: handlers,
        NumberLiteral: handlers,
        StringLiteral: handlers,
    }


# =============================================================================
# Ordering Tests
# =============================================================================

class TestOrdering:
    """Visit order matches syntactic nesting."""

    def test_enter_children_exit(self):
        """Pre-order enter, children, post-order exit."""
        events = []
        traverse(parse_source("(add 2 (sub 4 3))"), recording_visitor(events))
        assert events == [
            ("enter", "Program"),
            ("enter", "add"),
            ("enter", "2"),
            ("exit", "2"),
            ("enter", "sub"),
            ("enter", "4"),
            ("exit", "4"),
            ("enter", "3"),
            ("exit", "3"),
            ("exit", "sub"),
            ("exit", "add"),
            ("exit", "Program"),
        ]

    def test_siblings_do_not_interleave(self):
        """The first sibling's subtree finishes before the second starts."""
        events = []
        traverse(parse_source("(a (b 1)) (c 2)"), recording_visitor(events))
        assert events.index(("exit", "a")) < events.index(("enter", "c"))
        assert events.index(("exit", "b")) < events.index(("exit", "a"))

    def test_missing_handlers_are_skipped(self):
        """Node classes absent from the visitor are still walked through."""
        seen = []
        visitor = {
            NumberLiteral: NodeHandlers(enter=lambda n, p, ctx: seen.append(n.value)),
        }
        traverse(parse_source("(a 1 (b 2 (c 3)))"), visitor)
        assert seen == ["1", "2", "3"]

    def test_exit_only_handler(self):
        """A handler pair may define just exit."""
        seen = []
        visitor = {
            CallExpression: NodeHandlers(exit=lambda n, p, ctx: seen.append(n.name)),
        }
        traverse(parse_source("(outer (inner))"), visitor)
        assert seen == ["inner", "outer"]


# =============================================================================
# Parent and Context Tests
# =============================================================================

class TestParentAndContext:
    """Handlers receive the parent node and the threaded context."""

    def test_root_parent_is_none(self):
        """The root is entered with parent=None."""
        parents = []
        visitor = {Program: NodeHandlers(enter=lambda n, p, ctx: parents.append(p))}
        traverse(parse_source("(a)"), visitor)
        assert parents == [None]

    def test_parent_is_enclosing_node(self):
        """Each node's parent is the node whose children list holds it."""
        ast = parse_source("(a 1)")
        pairs = []
        visitor = {
            NumberLiteral: NodeHandlers(enter=lambda n, p, ctx: pairs.append((n, p))),
            CallExpression: NodeHandlers(enter=lambda n, p, ctx: pairs.append((n, p))),
        }
        traverse(ast, visitor)
        call = ast.body[0]
        assert pairs[0][0] is call and pairs[0][1] is ast
        assert pairs[1][0] is call.params[0] and pairs[1][1] is call

    def test_initial_context_reaches_root(self):
        """The context argument is handed to the root's handlers."""
        seen = []
        visitor = {Program: NodeHandlers(enter=lambda n, p, ctx: seen.append(ctx))}
        traverse(parse_source(""), visitor, context="root")
        assert seen == ["root"]

    def test_enter_return_value_becomes_child_context(self):
        """Depth can be threaded by returning ctx + 1."""
        depths = {}

        def enter(node, parent, depth):
            depths[label(node)] = depth
            return depth + 1

        handlers = NodeHandlers(enter=enter)
        visitor = {Program: handlers, CallExpression: handlers, NumberLiteral: handlers}
        traverse(parse_source("(a 1 (b 2))"), visitor, context=0)
        assert depths == {"Program": 0, "a": 1, "1": 2, "b": 2, "2": 3}

    def test_none_return_inherits_context(self):
        """Returning None passes the incoming context through."""
        seen = []
        visitor = {
            CallExpression: NodeHandlers(enter=lambda n, p, ctx: None),
            NumberLiteral: NodeHandlers(enter=lambda n, p, ctx: seen.append(ctx)),
        }
        traverse(parse_source("(a (b 1))"), visitor, context="outer")
        assert seen == ["outer"]

    def test_exit_sees_enter_context(self):
        """exit is called with the context enter received."""
        seen = []
        visitor = {
            CallExpression: NodeHandlers(
                enter=lambda n, p, ctx: ctx + [n.name],
                exit=lambda n, p, ctx: seen.append((n.name, ctx)),
            ),
        }
        traverse(parse_source("(a (b))"), visitor, context=[])
        assert seen == [("b", ["a"]), ("a", [])]


# =============================================================================
# Target Tree and Error Tests
# =============================================================================

class TestNodeKinds:
    """The walker knows both trees and nothing else."""

    def test_walks_target_tree(self):
        """Statements, calls and literals of the target tree are walked."""
        target = TargetProgram(body=[
            ExpressionStatement(expression=TargetCallExpression(
                callee=Identifier(name="f"),
                arguments=[TargetNumberLiteral(value="1")],
            )),
        ])
        names = []
        handlers = NodeHandlers(enter=lambda n, p, ctx: names.append(type(n).__name__))
        visitor = {
            TargetProgram: handlers,
            ExpressionStatement: handlers,
            TargetCallExpression: handlers,
            TargetNumberLiteral: handlers,
        }
        traverse(target, visitor)
        assert names == [
            "TargetProgram",
            "ExpressionStatement",
            "TargetCallExpression",
            "TargetNumberLiteral",
        ]

    def test_subclass_uses_base_handlers(self):
        """A node subclass is walked and reaches its base class handlers."""

        class TracedCall(CallExpression):
            pass

        ast = Program(body=[TracedCall(name="f", params=[NumberLiteral(value="1")])])
        events = []
        traverse(ast, recording_visitor(events))
        assert events == [
            ("enter", "Program"),
            ("enter", "f"),
            ("enter", "1"),
            ("exit", "1"),
            ("exit", "f"),
            ("exit", "Program"),
        ]

    def test_most_derived_handlers_win(self):
        """An entry for the subclass itself takes precedence over the base."""

        class TracedCall(CallExpression):
            pass

        seen = []
        visitor = {
            CallExpression: NodeHandlers(enter=lambda n, p, ctx: seen.append("base")),
            TracedCall: NodeHandlers(enter=lambda n, p, ctx: seen.append("derived")),
        }
        traverse(Program(body=[TracedCall(name="f"), CallExpression(name="g")]), visitor)
        assert seen == ["derived", "base"]

    def test_children_of_literal_is_empty(self):
        """Literals and identifiers have no children."""
        assert children_of(NumberLiteral(value="1")) == []
        assert children_of(Identifier(name="x")) == []

    def test_unknown_root(self):
        """A foreign root object is rejected."""
        with pytest.raises(UnknownNodeTypeError) as exc_info:
            traverse({"type": "Program", "body": []}, {})
        assert exc_info.value.node_type == "dict"
        assert exc_info.value.kind == "UnknownNodeType"

    def test_unknown_nested_node(self):
        """A foreign node deep in the tree is rejected."""
        ast = Program(body=[CallExpression(name="f", params=[3.5])])
        with pytest.raises(UnknownNodeTypeError) as exc_info:
            traverse(ast, {})
        assert "float" in str(exc_info.value)
