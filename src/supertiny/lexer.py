"""
S-Expression Lexer (Tokenizer)
==============================

This module converts source text into a flat list of tokens for the
parser. It is the first stage of the pipeline:

    Source → Lexer → Parser → Transformer → Generator → Output

Token Categories
----------------
| Type   | Pattern      | Example     | Value       |
|--------|--------------|-------------|-------------|
| PAREN  | ( or )       | (           | "("         |
| NUMBER | [0-9]+       | 42          | "42"        |
| STRING | "[^"]*"      | "hello"     | "hello"     |
| NAME   | [A-Za-z]+    | add         | "add"       |

Whitespace separates tokens and is otherwise ignored. Number text is
kept verbatim (never converted to int) so that "007" renders as "007".
There are no escape sequences, comments, negative numbers or decimals.

Example Usage
-------------
>>> from supertiny.lexer import tokenize
>>> tokenize('(add 2 (subtract 4 2))')
[Token(PAREN, '('), Token(NAME, 'add'), Token(NUMBER, '2'),
 Token(PAREN, '('), Token(NAME, 'subtract'), Token(NUMBER, '4'),
 Token(NUMBER, '2'), Token(PAREN, ')'), Token(PAREN, ')')]
"""

from dataclasses import dataclass
from enum import Enum, auto
import string

from supertiny.errors import (
    SourceLocation,
    UnrecognizedCharacterError,
    UnterminatedStringError,
)


# =============================================================================
# Token Types
# =============================================================================

class TokenType(Enum):
    """Lexical categories of the s-expression language."""

    PAREN = auto()      # ( or )
    NUMBER = auto()     # digit run
    STRING = auto()     # "..." with quotes stripped
    NAME = auto()       # letter run


@dataclass(frozen=True)
class Token:
    """
    A single lexical element.

    Tokens are immutable and carry no position information; their
    order in the token list matches their order in the source.

    Attributes:
        type: The TokenType classification
        value: The token text ("(" / ")" for parens, quotes stripped for strings)
    """
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    def is_open_paren(self) -> bool:
        """Return True for a '(' token."""
        return self.type is TokenType.PAREN and self.value == "("

    def is_close_paren(self) -> bool:
        """Return True for a ')' token."""
        return self.type is TokenType.PAREN and self.value == ")"

    def describe(self) -> str:
        """Describe the token for error messages, e.g. "NAME 'add'"."""
        return f"{self.type.name} {self.value!r}"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes s-expression source text.

    Single left-to-right scan with an explicit cursor and no
    backtracking. The first character that fits no token class
    aborts tokenization.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The source text being tokenized
        filename: Name of the source (for error reporting)
    """

    DIGITS = string.digits
    LETTERS = string.ascii_letters
    QUOTE = '"'

    # Tab through CR, space, the Unicode Zs spaces, line/paragraph
    # separators and the byte order mark. Not str.isspace(): U+001C-U+001F
    # and U+0085 are rejected, U+FEFF is skipped.
    WHITESPACE = frozenset(
        "\t\n\v\f\r \u00a0\u1680"
        + "".join(chr(c) for c in range(0x2000, 0x200B))
        + "\u2028\u2029\u202f\u205f\u3000\ufeff"
    )

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        # Cursor and line tracking for error locations
        self._pos = 0
        self._line = 1
        self._line_start_pos = 0

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order

        Raises:
            UnrecognizedCharacterError: On a character outside every class
            UnterminatedStringError: On a string with no closing quote
        """
        tokens = []

        while not self._at_end():
            char = self._peek()

            if char in "()":
                self._advance()
                tokens.append(Token(TokenType.PAREN, char))
                continue

            if char in self.WHITESPACE:
                self._advance()
                continue

            if char in self.DIGITS:
                tokens.append(self._scan_run(TokenType.NUMBER, self.DIGITS))
                continue

            if char == self.QUOTE:
                tokens.append(self._scan_string())
                continue

            if char in self.LETTERS:
                tokens.append(self._scan_run(TokenType.NAME, self.LETTERS))
                continue

            raise UnrecognizedCharacterError(
                char,
                self._location(),
                self._get_current_line(),
            )

        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Current character, or empty string past the end."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._line_start_pos = self._pos

        return char

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_run(self, token_type: TokenType, charset: str) -> Token:
        """
        Greedily consume consecutive characters from charset.

        Used for both numbers and names: "22" is one NUMBER, "add" is
        one NAME.
        """
        start = self._pos
        while self._peek() and self._peek() in charset:
            self._advance()
        return Token(token_type, self.source[start:self._pos])

    def _scan_string(self) -> Token:
        """
        Scan a double-quoted string literal.

        Everything up to the next quote is the value, newlines included.
        """
        location = self._location()
        source_line = self._get_current_line()

        self._advance()  # consume opening "
        start = self._pos

        while not self._at_end():
            if self._peek() == self.QUOTE:
                value = self.source[start:self._pos]
                self._advance()  # consume closing "
                return Token(TokenType.STRING, value)
            self._advance()

        raise UnterminatedStringError(location, source_line)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _location(self) -> SourceLocation:
        """Location of the character under the cursor."""
        return SourceLocation(
            self.filename,
            self._line,
            self._pos - self._line_start_pos + 1,
            self._pos,
        )

    def _get_current_line(self) -> str:
        """Current line of source text for error context."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """
    Convert source text into a list of tokens.

    Args:
        source: The s-expression source text
        filename: Source name for error messages

    Returns:
        Tokens in source order

    Raises:
        CompileSyntaxError: If the text contains an invalid character
            or an unterminated string
    """
    return Lexer(source, filename).tokenize()
