"""
Abstract Syntax Tree (AST) Definitions
======================================

This module defines the two trees the compiler works with: the source
AST built by the parser, and the target AST built by the transformer
and consumed by the code generator.

Source Tree (Lisp shape)
------------------------
Program
├── CallExpression(name, params)
│   ├── NumberLiteral(value)
│   ├── StringLiteral(value)
│   └── CallExpression(...)        # nesting to any depth
└── ...

Target Tree (C shape)
---------------------
TargetProgram
├── ExpressionStatement            # wraps each top-level call
│   └── TargetCallExpression(callee, arguments)
│       ├── Identifier(name)       # the callee
│       ├── TargetNumberLiteral(value)
│       ├── TargetStringLiteral(value)
│       └── TargetCallExpression(...)   # nested calls are never wrapped
└── ...

Design Notes
------------
- All nodes are plain dataclasses; the two trees use separate classes
  so a walker can never confuse a source node for a target node
- Literal values are strings, kept verbatim from the source text
- Nodes do not track source locations
- SourceNode and TargetNode are the closed unions each walker
  dispatches over
"""

from dataclasses import dataclass, field
from typing import Optional, Union


# =============================================================================
# Source AST
# =============================================================================

@dataclass
class NumberLiteral:
    """
    Numeric literal. The digits are kept as text.

    Attributes:
        value: Digit string exactly as written, e.g. "007"
    """
    value: str = ""


@dataclass
class StringLiteral:
    """
    String literal.

    Attributes:
        value: The text between the quotes
    """
    value: str = ""


@dataclass
class CallExpression:
    """
    Parenthesized call such as (add 2 3).

    Attributes:
        name: The function name (first element of the list)
        params: Argument expressions in source order
    """
    name: str = ""
    params: list["SourceNode"] = field(default_factory=list)


@dataclass
class Program:
    """
    Root of the source AST.

    Attributes:
        body: Top-level expressions in source order
    """
    body: list["SourceNode"] = field(default_factory=list)


SourceNode = Union[Program, CallExpression, NumberLiteral, StringLiteral]


# =============================================================================
# Target AST
# =============================================================================

@dataclass
class Identifier:
    """A bare name; the callee of a target call."""
    name: str = ""


@dataclass
class TargetNumberLiteral:
    """Numeric literal in the target tree (same shape as the source one)."""
    value: str = ""


@dataclass
class TargetStringLiteral:
    """String literal in the target tree (same shape as the source one)."""
    value: str = ""


@dataclass
class TargetCallExpression:
    """
    C-style call: callee(arguments...).

    Attributes:
        callee: Identifier naming the function
        arguments: Argument expressions in order
    """
    callee: Identifier = field(default_factory=Identifier)
    arguments: list["TargetNode"] = field(default_factory=list)


@dataclass
class ExpressionStatement:
    """
    Statement wrapper around a top-level call (rendered with a ';').

    Attributes:
        expression: The wrapped call
    """
    expression: Optional["TargetNode"] = None


@dataclass
class TargetProgram:
    """
    Root of the target AST.

    Attributes:
        body: Statements (and any bare top-level literals) in order
    """
    body: list["TargetNode"] = field(default_factory=list)


TargetNode = Union[
    TargetProgram,
    ExpressionStatement,
    TargetCallExpression,
    Identifier,
    TargetNumberLiteral,
    TargetStringLiteral,
]
