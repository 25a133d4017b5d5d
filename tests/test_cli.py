"""
Tests for the stackc command line driver.
"""

import pytest

from stackc.cli import DEFAULT_SOURCE, format_listing, main
from stackc import compile_source


class TestDriverOutput:
    """Output layout of a successful run."""

    def test_default_source(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            f"[Main] Source: {DEFAULT_SOURCE}",
            "[Lexer] Token: LET          Lexeme: 'let'",
            "[Lexer] Token: IDENTIFIER   Lexeme: 'x'",
            "[Lexer] Token: EQUAL        Lexeme: '='",
            "[Lexer] Token: NUMBER       Lexeme: '5'",
            "[Lexer] Token: STAR         Lexeme: '*'",
            "[Lexer] Token: NUMBER       Lexeme: '3'",
            "[Lexer] Token: SEMICOLON    Lexeme: ';'",
            "[Lexer] Token: EOF          Lexeme: ''",
            "[Parser] Parsed number: 5",
            "[Parser] Parsed number: 3",
            "[Parser] Parsed term expression (*)",
            "[Parser] Parsed variable declaration: x",
            "[Bytecode] Emit LOAD_CONST 5",
            "[Bytecode] Emit LOAD_CONST 3",
            "[Bytecode] Emit MUL",
            "[Bytecode] Emit STORE_VAR x",
            "",
            "--Bytecode --",
            "0 0 3 5",
            "Constants: 5 3",
            "Variables: x",
        ]

    def test_source_argument(self, capsys):
        assert main(["let z = 10 - 4 - 2;"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "[Main] Source: let z = 10 - 4 - 2;"
        assert out[-3:] == [
            "0 0 2 0 2 5",
            "Constants: 10 4 2",
            "Variables: z",
        ]

    def test_parser_lines_precede_emitter_lines(self, capsys):
        main(["let y = 1 + 2 * 3;"])
        out = capsys.readouterr().out.splitlines()
        last_parser = max(i for i, line in enumerate(out) if line.startswith("[Parser]"))
        first_emit = min(i for i, line in enumerate(out) if line.startswith("[Bytecode]"))
        assert last_parser < first_emit

    def test_ast_flag(self, capsys):
        assert main(["--ast", "let a = 7;"]) == 0
        out = capsys.readouterr().out.splitlines()
        decl = out.index("VarDecl(a)")
        assert out[decl + 1] == "  Number(7)"
        assert out[decl - 1] == "[Parser] Parsed variable declaration: a"

    def test_disassemble_flag(self, capsys):
        assert main(["--disassemble"]) == 0
        out = capsys.readouterr().out
        assert "=== stackc Bytecode ===" in out
        assert out.index("Variables: x") < out.index("=== stackc Bytecode ===")


class TestDriverErrors:
    """Exit status and diagnostics on failure."""

    def test_parse_error(self, capsys):
        assert main(["let a = x;"]) == 1
        out = capsys.readouterr().out.splitlines()
        assert out[-1] == "[Parser] Unexpected token: x"
        assert not any(line.startswith("[Bytecode]") for line in out)
        assert "--Bytecode --" not in out

    def test_lexer_limit(self, capsys):
        assert main([f"let {'v' * 64} = 1;"]) == 1
        out = capsys.readouterr().out.splitlines()
        assert out[-1].startswith("[Lexer] Lexeme exceeds 63 characters")

    def test_emitter_limit(self, capsys):
        assert main(["let x = 99999999999;"]) == 1
        out = capsys.readouterr().out.splitlines()
        assert out[-1] == "[Bytecode] Constant out of range: 99999999999"

    def test_unknown_option(self):
        with pytest.raises(SystemExit) as exc:
            main(["--bogus"])
        assert exc.value.code != 0


class TestFormatListing:
    """Final buffer rendering."""

    def test_single_constant(self):
        assert format_listing(compile_source("let a = 7;")).splitlines() == [
            "",
            "--Bytecode --",
            "0 5",
            "Constants: 7",
            "Variables: a",
        ]
