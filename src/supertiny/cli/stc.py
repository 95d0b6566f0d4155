"""
stc - Super Tiny Compiler Command-Line Interface
================================================

Usage Examples
--------------
Compile a file to stdout:
    $ stc prog.lisp

With output file:
    $ stc prog.lisp -o prog.c

Compile an expression given on the command line:
    $ stc -e '(add 2 (subtract 4 2))'
    add(2, subtract(4, 2));

Inspect intermediate stages:
    $ stc --tokens -e '(foo 1)'
    $ stc --ast prog.lisp
    $ stc --target-ast prog.lisp
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from supertiny import __version__
from supertiny.cli.errors import ExitCode, handle_cli_exception
from supertiny.compiler import Compiler, CompilerOptions
from supertiny.printer import ASTPrinter


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expr",
    help="Compile EXPR instead of reading INPUT_FILE",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream and exit",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the source AST and exit",
)
@click.option(
    "--target-ast",
    is_flag=True,
    help="Print the transformed AST and exit",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="stc")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    output: Optional[Path],
    tokens: bool,
    ast: bool,
    target_ast: bool,
    verbose: bool,
) -> None:
    """
    Compile Lisp-style calls into C-style calls.

    INPUT_FILE is the source file to compile. Use -e to pass the
    source on the command line instead.

    \b
    Examples:
        stc prog.lisp                # Print to stdout
        stc prog.lisp -o prog.c      # Write to a file
        stc -e '(add 2 3)'           # Prints add(2, 3);
        stc --ast -e '(add 2 3)'     # Dump the source AST
    """
    setup_logging(verbose)

    if (input_file is None) == (expr is None):
        click.echo("Error: give exactly one of INPUT_FILE or -e/--expr", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    try:
        if input_file is not None:
            logger.debug(f"Compiling {input_file}")
            result = Compiler().compile_file(input_file)
        else:
            options = CompilerOptions(filename="<expr>")
            result = Compiler(options).compile_source(expr)
    except Exception as e:
        handle_cli_exception(e, verbose)

    if tokens:
        for token in result.tokens:
            click.echo(repr(token))
        return

    if ast:
        click.echo(ASTPrinter().print(result.ast))
        return

    if target_ast:
        click.echo(ASTPrinter().print(result.target_ast))
        return

    if output is None:
        click.echo(result.output)
        return

    output.write_text(result.output + "\n", encoding="utf-8")

    if verbose:
        click.echo(f"Tokenized: {result.token_count} tokens", err=True)
        click.echo(f"Parsed: {len(result.ast.body)} top-level expressions", err=True)
        click.echo(f"Wrote {len(result.output)} characters to {output}", err=True)


if __name__ == "__main__":
    main()
