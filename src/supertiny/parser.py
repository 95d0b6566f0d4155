"""
S-Expression Recursive Descent Parser
=====================================

This module turns the lexer's token list into the source AST.

Grammar (EBNF)
--------------
program     ::= expression*
expression  ::= NUMBER | STRING | call
call        ::= '(' NAME expression* ')'

The parser uses one token of lookahead and never backtracks. There is
no error recovery: the first token that does not fit the grammar
aborts parsing with an UnexpectedTokenError.

Example Usage
-------------
>>> from supertiny.lexer import tokenize
>>> from supertiny.parser import parse
>>> parse(tokenize('(add 2 (subtract 4 2))'))
Program(body=[CallExpression(name='add', params=[NumberLiteral(value='2'),
    CallExpression(name='subtract', params=[NumberLiteral(value='4'),
    NumberLiteral(value='2')])])])
"""

from typing import Optional

from supertiny.lexer import Lexer, Token, TokenType
from supertiny.ast import (
    Program,
    CallExpression,
    NumberLiteral,
    StringLiteral,
    SourceNode,
)
from supertiny.errors import UnexpectedTokenError


class Parser:
    """
    Recursive descent parser for s-expressions.

    Attributes:
        tokens: List of tokens to parse
    """

    END_OF_INPUT = "end of input"

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

        # Current position in token stream
        self._pos = 0

    def parse(self) -> Program:
        """
        Parse the whole token list.

        Multiple top-level expressions are allowed; each becomes one
        entry of Program.body.

        Returns:
            Program node

        Raises:
            UnexpectedTokenError: If the tokens do not fit the grammar
        """
        body = []
        while not self._at_end():
            body.append(self._parse_expression())
        return Program(body=body)

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        """Current token, or None past the end."""
        if self._at_end():
            return None
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    def _expect(self, token_type: TokenType, expected: str) -> Token:
        """
        Consume a token of the given type.

        Raises:
            UnexpectedTokenError: If the current token is missing or different
        """
        token = self._peek()
        if token is not None and token.type is token_type:
            return self._advance()
        raise self._unexpected(token, expected)

    def _unexpected(self, token: Optional[Token], expected: str) -> UnexpectedTokenError:
        found = token.describe() if token is not None else self.END_OF_INPUT
        return UnexpectedTokenError(found, expected=expected, position=self._pos)

    # =========================================================================
    # Expression Parsing
    # =========================================================================

    def _parse_expression(self) -> SourceNode:
        """Parse one expression: a literal or a parenthesized call."""
        token = self._peek()

        if token is None:
            raise self._unexpected(token, "an expression")

        if token.type is TokenType.NUMBER:
            self._advance()
            return NumberLiteral(value=token.value)

        if token.type is TokenType.STRING:
            self._advance()
            return StringLiteral(value=token.value)

        if token.is_open_paren():
            return self._parse_call()

        raise self._unexpected(token, "a number, a string or '('")

    def _parse_call(self) -> CallExpression:
        """Parse '(' NAME expression* ')'."""
        self._advance()  # consume (

        name = self._expect(TokenType.NAME, "a function name after '('")
        node = CallExpression(name=name.value)

        while True:
            token = self._peek()
            if token is None:
                raise self._unexpected(token, "')'")
            if token.is_close_paren():
                break
            node.params.append(self._parse_expression())

        self._advance()  # consume )
        return node


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(tokens: list[Token]) -> Program:
    """
    Parse a token list into a source AST.

    Raises:
        UnexpectedTokenError: If the tokens do not fit the grammar
    """
    return Parser(tokens).parse()


def parse_source(source: str, filename: str = "<input>") -> Program:
    """
    Lex and parse source text in one step.

    Raises:
        CompileSyntaxError: If lexing or parsing fails
    """
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens).parse()
