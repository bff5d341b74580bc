"""
Copyright (C) 2025 yuygfgg

This file is part of rpnutils.

rpnutils is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

rpnutils is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with rpnutils.  If not, see <https://www.gnu.org/licenses/>.
"""

import pytest

from rpnutils.__main__ import main


class TestCommandLine:
    """Test the rpnutils command line."""

    def test_calculate(self, capsys):
        assert main(["2+3*4", "(2+3)*4"]) == 0
        assert capsys.readouterr().out.split() == ["14", "20"]

    def test_postfix(self, capsys):
        assert main(["--postfix", "2+3*4"]) == 0
        assert capsys.readouterr().out.strip() == "2 3 4 * +"

    def test_infix(self, capsys):
        assert main(["--infix", "1 2 + 3 *"]) == 0
        assert capsys.readouterr().out.strip() == "((1 + 2) * 3)"

    def test_skip_unknown(self, capsys):
        assert main(["--skip-unknown", "2+3^"]) == 0
        assert capsys.readouterr().out.strip() == "5"

    @pytest.mark.parametrize("expr", ["5/0", "(1+2", "2^3"])
    def test_error_exit(self, capsys, expr: str) -> None:
        assert main([expr]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: ")

    def test_stops_at_first_error(self, capsys):
        assert main(["1+1", "1/0", "2+2"]) == 1
        assert capsys.readouterr().out.split() == ["2"]

    def test_exclusive_modes(self):
        with pytest.raises(SystemExit):
            main(["--postfix", "--infix", "1"])

    @pytest.mark.parametrize("mode", ["--postfix", "--infix"])
    def test_skip_unknown_needs_evaluation(self, capsys, mode: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([mode, "--skip-unknown", "1 2 +"])
        assert exc_info.value.code == 2
        assert "--skip-unknown" in capsys.readouterr().err

    def test_evaluation_error_names_token_index(self, capsys):
        assert main(["1 + 5/0"]) == 1
        assert capsys.readouterr().err.startswith("Error: At token 3: ")

    def test_conversion_error_names_character_position(self, capsys):
        assert main(["1 + 2)"]) == 1
        assert capsys.readouterr().err.startswith("Error: At position 5: ")
