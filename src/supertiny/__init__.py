"""
Super Tiny Compiler
===================

A four-stage compiler from Lisp-style calls to C-style calls:

    (add 2 (subtract 4 2))    →    add(2, subtract(4, 2));

Pipeline
--------
    Source → Lexer → Parser → Transformer → Generator → Output
                                   ↑
                               Traverser

- **lexer**: text to tokens (parens, numbers, strings, names)
- **parser**: tokens to the source AST (recursive descent)
- **traverser**: generic depth-first walker with enter/exit handlers
- **transformer**: source AST to target AST, one traversal
- **generator**: target AST to text

Each stage is also exported on its own, so the pipeline can be run a
step at a time:

>>> from supertiny import tokenize, parse, transform, generate
>>> generate(transform(parse(tokenize('(foo)'))))
'foo();'

Or use the command-line tool:
    $ stc -e '(add 1 2) (add 3 4)'
    add(1, 2);
    add(3, 4);
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Imports
# =============================================================================

from supertiny.errors import (
    SourceLocation,
    SuperTinyError,
    CompileSyntaxError,
    UnrecognizedCharacterError,
    UnterminatedStringError,
    UnexpectedTokenError,
    UnknownNodeTypeError,
)
from supertiny.lexer import Lexer, Token, TokenType, tokenize
from supertiny.parser import Parser, parse, parse_source
from supertiny.traverser import NodeHandlers, traverse
from supertiny.transformer import transform
from supertiny.generator import CodeGenerator, generate
from supertiny.printer import ASTPrinter
from supertiny.compiler import (
    Compiler,
    CompilerOptions,
    CompilerResult,
    compile_source,
    compile_file,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "compile_source",
    "compile_file",
    "Compiler",
    "CompilerOptions",
    "CompilerResult",
    # Stages
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "parse",
    "parse_source",
    "NodeHandlers",
    "traverse",
    "transform",
    "CodeGenerator",
    "generate",
    "ASTPrinter",
    # Errors
    "SourceLocation",
    "SuperTinyError",
    "CompileSyntaxError",
    "UnrecognizedCharacterError",
    "UnterminatedStringError",
    "UnexpectedTokenError",
    "UnknownNodeTypeError",
]
