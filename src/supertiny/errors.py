"""
Super Tiny Compiler Error Hierarchy
===================================

This module defines the exception hierarchy for the compiler. Every
stage raises a subclass of SuperTinyError, so callers can catch any
compilation failure with a single except clause.

Exception Hierarchy
-------------------
SuperTinyError (base)
├── CompileSyntaxError - lexer and parser errors (bad user input)
│   ├── UnrecognizedCharacterError - character outside every token class
│   ├── UnterminatedStringError - string literal missing its closing quote
│   └── UnexpectedTokenError - token cannot start or continue an expression
└── UnknownNodeTypeError - traverser/generator met a foreign node

Every error is terminal: no stage recovers, and compilation produces no
output once one has been raised.

Error Message Format
--------------------
    prog.lisp:1:9: error: unrecognized character '%'
        (add 2 % 3)
                ^
    hint: only parentheses, digits, letters and "strings" are allowed

The ``kind`` class attribute names the failure category independently
of the message text ("UnrecognizedCharacter", "UnexpectedToken", ...).
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset from the start of the source (0-indexed)
    """
    filename: str
    line: int
    column: int
    offset: int = 0

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception
# =============================================================================

class SuperTinyError(Exception):
    """
    Base exception for all compiler errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
    """

    kind = "CompileError"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            <input>:1:9: error: unrecognized character '%'
                (add 2 % 3)
                        ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Syntax Errors (Lexer and Parser)
# =============================================================================

class CompileSyntaxError(SuperTinyError):
    """
    Invalid source text.

    Raised by the lexer or parser when the input does not match the
    accepted grammar:

        program    := expression*
        expression := NUMBER | STRING | '(' NAME expression* ')'
    """

    kind = "SyntaxError"


class UnrecognizedCharacterError(CompileSyntaxError):
    """
    Character that matches none of the lexer's token classes.

    Example:
        (add 2 -3)     # '-' is not a recognized character
    """

    kind = "UnrecognizedCharacter"

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unrecognized character {char!r} (U+{ord(char):04X})",
            location=location,
            hint='only parentheses, digits, letters and "strings" are allowed',
            source_line=source_line,
        )


class UnterminatedStringError(CompileSyntaxError):
    """
    String literal with no closing quote before the end of input.

    Example:
        (print "hello)
    """

    kind = "UnterminatedString"

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class UnexpectedTokenError(CompileSyntaxError):
    """
    Token that cannot start or continue an expression.

    Raised for a stray closing paren, an opening paren that is not
    followed by a name, or input that ends while a call is still open.

    Attributes:
        found: Description of the offending token ("end of input" at EOF)
        expected: What the parser was looking for (optional)
        position: Index of the offending token in the token stream
    """

    kind = "UnexpectedToken"

    def __init__(
        self,
        found: str,
        expected: Optional[str] = None,
        position: Optional[int] = None,
        location: Optional[SourceLocation] = None,
    ):
        self.found = found
        self.expected = expected
        self.position = position

        message = f"unexpected {found}"
        if position is not None:
            message = f"{message} at token {position}"

        hint = None
        if expected:
            hint = f"expected {expected}"

        super().__init__(message, location=location, hint=hint)


# =============================================================================
# Internal Errors (Tree Walking)
# =============================================================================

class UnknownNodeTypeError(SuperTinyError):
    """
    Node outside the closed set a tree walker knows how to handle.

    This indicates a malformed tree rather than bad user input: the
    parser and transformer only ever build the known node classes.
    """

    kind = "UnknownNodeType"

    def __init__(self, node: object, walker: Optional[str] = None):
        self.node = node
        self.node_type = type(node).__name__

        message = f"unknown node type '{self.node_type}'"
        if walker:
            message = f"{walker}: {message}"

        super().__init__(message)
