"""
Compiler Driver
===============

Runs the complete pipeline:

    Source → Lex → Parse → Transform → Generate → Output

Usage
-----
Command line:
    $ stc prog.lisp -o prog.c
    $ stc -e '(add 2 (subtract 4 2))'

Programmatic:
    >>> from supertiny import compile_source
    >>> compile_source('(add 2 (subtract 4 2))')
    'add(2, subtract(4, 2));'

Error Handling
--------------
Every stage runs eagerly and synchronously. The first error from any
stage propagates out of compile_source unchanged; no partial output is
produced.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from supertiny.ast import Program, TargetProgram
from supertiny.generator import CodeGenerator
from supertiny.lexer import Lexer, Token
from supertiny.parser import Parser
from supertiny.transformer import transform


logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        filename: Source name used in error locations
    """
    filename: str = "<input>"


@dataclass
class CompilerResult:
    """
    Result of a compilation, with every intermediate stage.

    Attributes:
        filename: Source filename
        tokens: Lexer output
        ast: Source AST from the parser
        target_ast: Target AST from the transformer
        output: Generated C-style text
    """
    filename: str = ""
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[Program] = None
    target_ast: Optional[TargetProgram] = None
    output: str = ""

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class Compiler:
    """
    S-expression to C-call compiler.

    Example:
        compiler = Compiler()
        result = compiler.compile_file("prog.lisp")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(
        self,
        source: str,
        filename: Optional[str] = None,
    ) -> CompilerResult:
        """
        Compile source text.

        Args:
            source: S-expression source text
            filename: Source name for error locations (default: options.filename)

        Returns:
            CompilerResult with output and intermediate stages

        Raises:
            SuperTinyError: If any stage fails
        """
        filename = filename or self.options.filename
        result = CompilerResult(filename=filename)

        # Stage 1: Lexical analysis
        result.tokens = Lexer(source, filename).tokenize()
        logger.debug(f"{filename}: lexed {result.token_count} tokens")

        # Stage 2: Parsing
        result.ast = Parser(result.tokens).parse()
        logger.debug(f"{filename}: parsed {len(result.ast.body)} top-level expressions")

        # Stage 3: Transformation
        result.target_ast = transform(result.ast)
        logger.debug(f"{filename}: transformed into {len(result.target_ast.body)} statements")

        # Stage 4: Code generation
        result.output = CodeGenerator().generate(result.target_ast)
        logger.debug(f"{filename}: generated {len(result.output)} characters")

        return result

    def compile_file(self, filepath: str | Path) -> CompilerResult:
        """
        Compile a source file.

        Error locations name the file; options are left unchanged.

        Raises:
            SuperTinyError: If compilation fails
            FileNotFoundError: If the file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(path))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_source(source: str, filename: str = "<input>") -> str:
    """
    Compile s-expression source text to C-style calls.

    This is the primary high-level interface.

    Args:
        source: S-expression source text
        filename: Source name for error messages

    Returns:
        The generated text, one statement per line

    Raises:
        SuperTinyError: If compilation fails

    Example:
        >>> compile_source('(add 1 2) (add 3 4)')
        'add(1, 2);\\nadd(3, 4);'
    """
    compiler = Compiler(CompilerOptions(filename=filename))
    return compiler.compile_source(source).output


def compile_file(
    filepath: str | Path,
    output_path: Optional[str | Path] = None,
) -> str:
    """
    Compile a source file, optionally writing the output.

    Args:
        filepath: Path to the source file
        output_path: Optional path to write the generated text to

    Returns:
        The generated text

    Raises:
        SuperTinyError: If compilation fails
        FileNotFoundError: If the source file is not found
    """
    result = Compiler().compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.output, encoding="utf-8")

    return result.output
