"""Tests for the command-line interface."""

import pytest
from sudokusolve.cli import main


# Valid puzzle with eight completions
OPEN_PUZZLE = (
    "100060000"
    "980000605"
    "000005001"
    "000000304"
    "060000900"
    "040720000"
    "093076100"
    "006480007"
    "500902460"
)

# A known solvable puzzle (medium difficulty)
EASY_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the easy puzzle
SOLVED_GRID = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Two 5s in the first row
CONFLICTING_PUZZLE = "550000000" + "0" * 72


class TestCLI:
    """Tests for the solve and check commands."""

    def test_solve_puzzle(self, capsys):
        main(["solve", "--puzzle", EASY_PUZZLE, "--verbose"])
        out = capsys.readouterr().out
        assert "Input puzzle:" in out
        assert "--- Solution 1 ---" in out
        assert "Found 1 solution(s)" in out
        assert "Iterations:" in out

    def test_solve_fancy(self, capsys):
        main(["solve", "--puzzle", SOLVED_GRID, "--fancy"])
        out = capsys.readouterr().out
        assert "┌" in out
        assert "Found 1 solution(s)" in out

    def test_solve_with_limit(self, capsys):
        main(["solve", "--puzzle", "0" * 81, "--limit", "1"])
        out = capsys.readouterr().out
        assert "Found 1 solution(s)" in out

    def test_solve_conflicting(self, capsys):
        main(["solve", "--puzzle", CONFLICTING_PUZZLE])
        out = capsys.readouterr().out
        assert "conflicting" in out
        assert "Solution 1" not in out

    def test_solve_file(self, tmp_path, capsys):
        path = tmp_path / "puzzle.txt"
        path.write_text("\n".join(EASY_PUZZLE[i:i + 9] for i in range(0, 81, 9)))
        main(["solve", "--file", str(path)])
        assert "Found 1 solution(s)" in capsys.readouterr().out

    def test_solve_all_completions(self, capsys):
        main(["solve", "--puzzle", OPEN_PUZZLE])
        out = capsys.readouterr().out
        assert "--- Solution 8 ---" in out
        assert "Found 8 solution(s)" in out

    def test_solve_slash_separated_rows(self, capsys):
        """Test rows may be given on one line separated by slashes."""
        main(["solve", "--puzzle", "/".join(EASY_PUZZLE[i:i + 9] for i in range(0, 81, 9))])
        out = capsys.readouterr().out
        assert "Found 1 solution(s)" in out

    def test_solve_dotted_puzzle(self, capsys):
        main(["solve", "--puzzle", EASY_PUZZLE.replace("0", "."), "--limit", "1"])
        assert "Found 1 solution(s)" in capsys.readouterr().out

    def test_bad_puzzle_string(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["solve", "--puzzle", "123"])
        assert exc.value.code == 1
        assert "Error loading puzzle" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["check", "--file", str(tmp_path / "nope.txt")])
        assert exc.value.code == 1

    def test_bad_limit(self):
        with pytest.raises(SystemExit) as exc:
            main(["solve", "--puzzle", EASY_PUZZLE, "--limit", "0"])
        assert exc.value.code == 1

    def test_check(self, capsys):
        main(["check", "--puzzle", OPEN_PUZZLE])
        out = capsys.readouterr().out
        assert "Clues: 29" in out
        assert "Valid: yes" in out
        assert "Solved: no" in out
        assert "Empty cells: 52" in out

    def test_check_conflicting(self, capsys):
        main(["check", "--puzzle", CONFLICTING_PUZZLE])
        out = capsys.readouterr().out
        assert "Valid: no" in out
        assert "Empty cells" not in out

    def test_no_command(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
