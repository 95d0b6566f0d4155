# =============================================================================
# test_cli.py - stc Command-Line Tests
# =============================================================================

from click.testing import CliRunner

from supertiny.cli.errors import ExitCode
from supertiny.cli.stc import main


class TestStcCLI:
    """Tests for the stc CLI tool."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Compile Lisp-style calls" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_cli_expr(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "(add 2 (subtract 4 2))"])

        assert result.exit_code == 0
        assert result.output == "add(2, subtract(4, 2));\n"

    def test_cli_file_to_stdout(self, tmp_path):
        source_file = tmp_path / "prog.lisp"
        source_file.write_text("(add 1 2) (add 3 4)")

        runner = CliRunner()
        result = runner.invoke(main, [str(source_file)])

        assert result.exit_code == 0
        assert result.output == "add(1, 2);\nadd(3, 4);\n"

    def test_cli_output_file(self, tmp_path):
        source_file = tmp_path / "prog.lisp"
        source_file.write_text('(print "hi")')
        output_file = tmp_path / "prog.c"

        runner = CliRunner()
        result = runner.invoke(main, [str(source_file), "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.read_text() == 'print("hi");\n'

    def test_cli_tokens(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--tokens", "-e", "(foo 1)"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Token(PAREN, '(')",
            "Token(NAME, 'foo')",
            "Token(NUMBER, '1')",
            "Token(PAREN, ')')",
        ]

    def test_cli_ast(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--ast", "-e", '(add 2 "x")'])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Program",
            "  CallExpression add",
            "    NumberLiteral 2",
            '    StringLiteral "x"',
        ]

    def test_cli_target_ast(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--target-ast", "-e", "(add (neg 1))"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "TargetProgram",
            "  ExpressionStatement",
            "    TargetCallExpression add",
            "      TargetCallExpression neg",
            "        TargetNumberLiteral 1",
        ]

    def test_cli_compile_error(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "(add 2 3"])

        assert result.exit_code == ExitCode.COMPILE_ERROR
        assert "unexpected end of input" in result.output

    def test_cli_lexer_error_location(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "(add 2 %)"])

        assert result.exit_code == ExitCode.COMPILE_ERROR
        assert "<expr>:1:8: error: unrecognized character '%'" in result.output

    def test_cli_requires_input(self):
        runner = CliRunner()
        result = runner.invoke(main, [])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "exactly one of INPUT_FILE or -e/--expr" in result.output

    def test_cli_rejects_file_and_expr(self, tmp_path):
        source_file = tmp_path / "prog.lisp"
        source_file.write_text("(foo)")

        runner = CliRunner()
        result = runner.invoke(main, [str(source_file), "-e", "(bar)"])

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_cli_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.lisp")])

        # click rejects the path before the compiler runs
        assert result.exit_code == 2
