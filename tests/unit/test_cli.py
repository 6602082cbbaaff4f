#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import json

import pytest
from casematch.__main__ import main


class TestCli:

    def test_match_prints_bindings(self, capsys):
        assert main(["[head, *tail]", "[1, 2, 3]"]) == 0
        out = capsys.readouterr().out
        assert json.loads(out) == {"head": 1, "tail": [2, 3]}

    def test_bindings_sorted(self, capsys):
        assert main(["[b, a]", '["x", "y"]']) == 0
        assert capsys.readouterr().out == '{"a": "y", "b": "x"}\n'

    def test_no_match(self, capsys):
        assert main(["[a]", "[]"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "casematch: no match\n[a]\n^\n"

    def test_quiet(self, capsys):
        assert main(["--quiet", "[a]", "[]"]) == 1
        assert main(["-q", "[a]", "[1]"]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_invalid_json(self, capsys):
        assert main(["[a]", "[1,"]) == 1
        assert "value is not valid JSON" in capsys.readouterr().err

    def test_invalid_pattern(self, capsys):
        assert main(["[*a, b]", "[1, 2]"]) == 1
        err = capsys.readouterr().err
        assert "error[E0101]" in err
        assert "aborting due to 1 previous error" in err

    def test_syntax_error(self, capsys):
        assert main(["[1,", "[1]"]) == 1
        assert "error[E0001]: unexpected end of pattern" in capsys.readouterr().err

    def test_usage_error_exits_2(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
