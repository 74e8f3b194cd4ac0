"""Tests for the command-line entry point and game loop."""

import io

import pytest

from labyrinth.core.grid import Position
from labyrinth.core.maze_engine import GameState, GameStatus
from labyrinth.main import EXIT_LOAD_FAILURE, EXIT_OK, EXIT_USAGE, PROMPT, main, run_game

SAMPLE_MAZE = [
    "#####",
    "#S E#",
    "#   #",
    "#   #",
    "#####",
]


def play(state: GameState, commands: str) -> str:
    out = io.StringIO()
    status = run_game(state, io.StringIO(commands), out)
    assert status == EXIT_OK
    return out.getvalue()


class TestRunGame:
    """Tests for the command loop."""

    def test_prompt_is_shown(self, sample_state):
        """Test the prompt is written before reading."""
        output = play(sample_state, "Q\n")
        assert output.startswith(PROMPT)

    def test_quit(self, sample_state):
        """Test Q acknowledges and stops."""
        output = play(sample_state, "Q\nD\nD\n")

        assert "Game quit." in output
        assert sample_state.status == GameStatus.QUIT
        assert sample_state.position == Position(1, 1)

    def test_wall_feedback(self, sample_state):
        """Test walking into a wall reports it and continues."""
        output = play(sample_state, "W\nQ\n")

        assert "Blocked by wall!" in output
        assert "Game quit." in output

    def test_edge_feedback(self, edge_grid):
        """Test walking off the grid reports it and continues."""
        output = play(GameState.new(edge_grid), "W\nQ\n")

        assert "Cannot move off the edge!" in output
        assert "Blocked by wall!" not in output

    def test_invalid_command_feedback(self, sample_state):
        """Test an unknown command reports it and continues."""
        output = play(sample_state, "X\nQ\n")

        assert "Invalid command." in output
        assert "Game quit." in output

    def test_blank_lines_are_skipped(self, sample_state):
        """Test empty lines are neither commands nor errors."""
        output = play(sample_state, "\n\n   \nQ\n")

        assert "Invalid command." not in output
        assert "Game quit." in output

    def test_view_map(self, sample_state):
        """Test M prints the map with the player marker."""
        output = play(sample_state, "M\nQ\n")

        assert "# X   E #" in output
        assert sample_state.status == GameStatus.QUIT

    def test_victory(self, sample_state):
        """Test reaching the exit ends the loop."""
        output = play(sample_state, "D\nD\nS\nQ\n")

        assert "!!! VICTORY !!!" in output
        assert "You escaped in 2 moves." in output
        assert "Game quit." not in output
        assert sample_state.status == GameStatus.VICTORY

    def test_valid_path_has_no_errors(self, sample_state):
        """Test moving around the interior gives no feedback errors."""
        output = play(sample_state, "S\nS\nD\nQ\n")

        assert "Blocked" not in output
        assert "Invalid" not in output
        assert "Cannot move" not in output
        assert sample_state.moves == 3

    def test_end_of_input(self, sample_state):
        """Test the loop stops cleanly when input runs out."""
        output = play(sample_state, "S\n")

        assert sample_state.status == GameStatus.IN_PROGRESS
        assert sample_state.position == Position(2, 1)
        assert output.endswith("\n")

    def test_custom_delimiter(self, sample_state):
        """Test the map delimiter is passed through."""
        out = io.StringIO()
        run_game(sample_state, io.StringIO("M\nQ\n"), out, delimiter="")
        assert "#X E#" in out.getvalue()


class TestMain:
    """Tests for argument handling and exit codes."""

    def test_too_many_arguments(self, capsys):
        """Test extra arguments print usage."""
        assert main(["a.txt", "b.txt"]) == EXIT_USAGE
        assert "Usage:" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        """Test a nonexistent file is a load failure."""
        status = main([str(tmp_path / "nope.txt")])

        assert status == EXIT_LOAD_FAILURE
        captured = capsys.readouterr()
        assert "Error opening file" in captured.err
        assert PROMPT not in captured.out

    @pytest.mark.parametrize(
        "rows,message",
        [
            (["#####", "#S E#"], "Invalid maze dimensions"),
            (["#####", "#S E", "#   #", "#   #", "#####"], "Invalid maze: Not rectangular"),
            (["#####", "#S@ #", "#   #", "#  E#", "#####"], "Invalid character '@'"),
            (["#####", "#SS #", "#   #", "#  E#", "#####"], "Multiple start positions"),
            (["#####", "#S  #", "#   #", "# EE#", "#####"], "Multiple exit positions"),
            (["#####", "#   #", "#   #", "#  E#", "#####"], "Missing start position"),
            (["#####", "#S  #", "#   #", "#   #", "#####"], "Missing exit position"),
        ],
    )
    def test_invalid_maze(self, write_maze, capsys, monkeypatch, rows, message):
        """Test each validation failure is reported and the game never starts."""
        monkeypatch.setattr("sys.stdin", io.StringIO("Q\n"))

        status = main([str(write_maze(rows))])
        captured = capsys.readouterr()

        assert status == EXIT_LOAD_FAILURE
        assert message in captured.err
        assert PROMPT not in captured.out

    @pytest.mark.parametrize("variable", ["LABYRINTH_GENERATED_WIDTH", "LABYRINTH_GENERATED_HEIGHT"])
    def test_generated_maze_too_small(self, capsys, monkeypatch, variable):
        """Test a configured generated size below 5 is reported as a load failure."""
        monkeypatch.setenv(variable, "3")
        monkeypatch.setattr("sys.stdin", io.StringIO("Q\n"))

        status = main([])
        captured = capsys.readouterr()

        assert status == EXIT_LOAD_FAILURE
        assert "Invalid maze dimensions" in captured.err
        assert PROMPT not in captured.out

    def test_plays_maze_file(self, write_maze, capsys, monkeypatch):
        """Test a maze file is loaded and played."""
        monkeypatch.setattr("sys.stdin", io.StringIO("M\nD\nD\n"))

        status = main([str(write_maze(SAMPLE_MAZE))])
        out = capsys.readouterr().out

        assert status == EXIT_OK
        assert PROMPT in out
        assert "X" in out
        assert "!!! VICTORY !!!" in out

    def test_plays_generated_maze(self, capsys, monkeypatch):
        """Test no argument plays a generated maze."""
        monkeypatch.setenv("LABYRINTH_SEED", "5")
        monkeypatch.setattr("sys.stdin", io.StringIO("M\nQ\n"))

        status = main([])
        out = capsys.readouterr().out

        assert status == EXIT_OK
        assert "X" in out
        assert "E" in out
        assert "Game quit." in out

    def test_generated_maze_is_reproducible(self, capsys, monkeypatch):
        """Test the same seed shows the same map."""
        monkeypatch.setenv("LABYRINTH_SEED", "5")

        outputs = []
        for _ in range(2):
            monkeypatch.setattr("sys.stdin", io.StringIO("M\nQ\n"))
            main([])
            outputs.append(capsys.readouterr().out)

        assert outputs[0] == outputs[1]
