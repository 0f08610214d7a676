"""
Tests for main.py - headless game runner and CLI.
"""

import json
import os
import sys
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import (
    SnakeGame,
    build_player,
    load_history_from_json,
    main,
    run_simulation,
)
from domain import UP, RIGHT, RUNNING, GAME_OVER, GameState
from players import GreedyPlayer, RandomPlayer


def scripted_player(direction: str) -> Mock:
    player = Mock()
    player.get_move = Mock(return_value=direction)
    player.name = "ScriptedPlayer"
    return player


class TestSnakeGame:
    """Tests for the SnakeGame runner."""

    def test_game_initialization(self):
        """A new game starts from the initial state with one history entry."""
        game = SnakeGame(width=10, height=10, player=GreedyPlayer(), seed=1)

        assert game.state.snake == ((5, 5), (4, 5), (3, 5))
        assert game.state.status == RUNNING
        assert game.step_count == 0
        assert game.game_over is False
        assert game.history == [game.state]

    def test_game_id_can_be_given(self):
        game = SnakeGame(width=10, height=10, player=GreedyPlayer(), game_id="abc")
        assert game.game_id == "abc"

    def test_wall_collision_ends_game(self):
        """A player that always goes up hits the top wall on step 6."""
        player = scripted_player(UP)
        game = SnakeGame(width=10, height=10, player=player, seed=3)

        game.run()

        assert game.game_over is True
        assert game.game_result == "lost"
        assert game.state.status == GAME_OVER
        assert game.step_count == 6
        assert player.get_move.call_count == 6
        assert len(game.history) == 7

    def test_max_steps_stops_game(self):
        """Reaching the step limit ends a game that is still running."""
        game = SnakeGame(width=16, height=16, player=GreedyPlayer(), max_steps=3, seed=5)

        game.run()

        assert game.step_count == 3
        assert game.game_result == "timeout"
        assert game.state.status == RUNNING

    def test_full_board_is_a_win(self):
        """Eating the last free cell ends the game as won."""
        game = SnakeGame(width=4, height=1, player=scripted_player(RIGHT), seed=0)
        game.state = GameState(
            width=4, height=1, snake=((2, 0), (1, 0), (0, 0)), direction=RIGHT, food=(3, 0)
        )

        game.run_step()

        assert game.game_over is True
        assert game.game_result == "won"
        assert game.state.food is None
        assert game.state.score == 1

    def test_run_step_after_game_over_is_noop(self):
        """Once over, further steps change nothing."""
        game = SnakeGame(width=10, height=10, player=scripted_player(UP))
        game.run()
        final_state = game.state
        history_length = len(game.history)

        assert game.run_step() is final_state
        assert len(game.history) == history_length

    def test_same_seed_same_game(self):
        """Two games with the same seed and player replay identically."""
        first = SnakeGame(width=8, height=8, player=GreedyPlayer(), max_steps=200, seed=11)
        second = SnakeGame(width=8, height=8, player=GreedyPlayer(), max_steps=200, seed=11)

        first.run()
        second.run()

        assert first.history == second.history
        assert first.move_history == second.move_history


class TestGameHistory:
    """Tests for replay serialization."""

    def test_serialize_history(self):
        game = SnakeGame(width=6, height=6, player=GreedyPlayer(), max_steps=2, seed=2)
        game.run()

        serialized = game.serialize_history()

        assert len(serialized) == 3
        assert serialized[0]["snake"] == [[3, 3], [2, 3], [1, 3]]
        json.dumps(serialized)

    def test_save_and_load_history(self, tmp_path):
        """A saved replay loads back into the same states."""
        game = SnakeGame(width=8, height=8, player=GreedyPlayer(), max_steps=10, seed=4)
        game.run()

        path = game.save_history_to_json(str(tmp_path))

        assert os.path.basename(path) == f"snake_game_{game.game_id}.json"
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["metadata"]["game_id"] == game.game_id
        assert data["metadata"]["actual_steps"] == game.step_count
        assert data["metadata"]["board"] == {"width": 8, "height": 8}
        assert len(data["moves"]) == game.step_count
        assert load_history_from_json(path) == game.history

    def test_save_uses_configured_directory(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SNAKE_COMPLETED_GAMES_DIR", str(tmp_path / "replays"))
        game = SnakeGame(width=8, height=8, player=GreedyPlayer(), max_steps=1, seed=4)
        game.run()

        path = game.save_history_to_json()

        assert os.path.dirname(path) == str(tmp_path / "replays")

    def test_load_history_rejects_bad_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"metadata": {}}), encoding="utf-8")

        with pytest.raises(ValueError):
            load_history_from_json(str(path))


class TestRunSimulation:
    """Tests for run_simulation() and build_player()."""

    def test_build_player(self):
        assert isinstance(build_player("greedy"), GreedyPlayer)
        assert isinstance(build_player("random", seed=1), RandomPlayer)

    def test_run_simulation_summary(self, tmp_path):
        params = SimpleNamespace(
            width=8, height=8, max_steps=50, player="random", seed=9,
            save=True, output_dir=str(tmp_path),
        )

        result = run_simulation(params)

        assert result["player"] == "RandomPlayer"
        assert result["result"] in {"lost", "won", "timeout"}
        assert 1 <= result["steps"] <= 50
        assert result["final_score"] == result["final_state"].score
        assert os.path.exists(result["replay_path"])

    def test_run_simulation_is_deterministic(self):
        params = SimpleNamespace(width=8, height=8, max_steps=80, player="random", seed=21, save=False)

        first = run_simulation(params)
        second = run_simulation(params)

        assert first["final_state"] == second["final_state"]
        assert first["replay_path"] is None


class TestMain:
    """Tests for the command-line entry point."""

    def test_main_prints_summary(self, capsys):
        code = main(["--width", "8", "--height", "8", "--max-steps", "20", "--seed", "3", "--no-save"])

        assert code == 0
        summary = json.loads(capsys.readouterr().out)
        assert summary["player"] == "GreedyPlayer"
        assert summary["replay_path"] is None
        assert summary["steps"] <= 20

    def test_main_show_board(self, capsys):
        main(["--width", "6", "--height", "4", "--max-steps", "1", "--seed", "1", "--no-save", "--show-board"])

        out = capsys.readouterr().out
        assert "   0 1 2 3 4 5" in out

    def test_main_reads_board_size_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("SNAKE_BOARD_WIDTH", "5")
        monkeypatch.setenv("SNAKE_BOARD_HEIGHT", "5")

        main(["--max-steps", "1", "--seed", "1", "--no-save", "--show-board"])

        out = capsys.readouterr().out
        assert "   0 1 2 3 4\n" in out

    def test_main_rejects_degenerate_board(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--width", "2", "--no-save"])
        assert excinfo.value.code == 2

    def test_main_rejects_unknown_player(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--player", "llm", "--no-save"])
        assert excinfo.value.code == 2
