import argparse
import json
import logging
import os
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, GAME_OVER
from domain.engine import create_initial_state, queue_direction, step
from domain.game_state import GameState
from players import Player, RandomPlayer, get_player_class, AVAILABLE_VARIANTS

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 1000
DEFAULT_LOG_LEVEL = "INFO"


def _get_completed_games_dir() -> str:
    d = os.getenv("SNAKE_COMPLETED_GAMES_DIR", "completed_games").strip()
    return d or "completed_games"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class SnakeGame:
    """
    Headless driver around the simulation core.

    Manages:
      - The current state (replaced on every step)
      - The player choosing directions
      - A seeded randomness source for food placement
      - History for replay
    """

    def __init__(
        self,
        width: int,
        height: int,
        player: Player,
        max_steps: int = DEFAULT_MAX_STEPS,
        seed: Optional[int] = None,
        game_id: Optional[str] = None,
    ):
        self.width = width
        self.height = height
        self.player = player
        self.max_steps = max_steps
        self.seed = seed
        self.game_id = game_id or str(uuid.uuid4())
        self.start_time = time.time()

        self.random = random.Random(seed)
        self.rng = self.random.random

        self.state: GameState = create_initial_state(width=width, height=height, rng=self.rng)
        self.step_count = 0
        self.game_over = False
        self.game_result: Optional[str] = None
        self.end_reason: Optional[str] = None

        # For replay
        self.move_history: List[str] = []
        self.history: List[GameState] = [self.state]

        logger.info(
            "Game %s started on %dx%d board with %s",
            self.game_id, width, height, self.player.name,
        )

    def run_step(self) -> GameState:
        """
        Execute one tick:
          1) If the game is over, do nothing
          2) Ask the player for a move and queue it
          3) Step the simulation
          4) End the game on collision, full board, or step limit
        """
        if self.game_over:
            logger.warning("Game %s is already over. No more steps.", self.game_id)
            return self.state

        move = self.player.get_move(self.state)
        self.move_history.append(move)
        self.state = step(queue_direction(self.state, move), self.rng)
        self.step_count += 1
        self.history.append(self.state)

        if self.state.status == GAME_OVER:
            self.end_game("collision", "lost")
        elif self.state.food is None:
            self.end_game("board full", "won")
        elif self.step_count >= self.max_steps:
            self.end_game("reached max steps", "timeout")

        return self.state

    def run(self) -> GameState:
        while not self.game_over:
            self.run_step()
        return self.state

    def end_game(self, reason: str, result: str):
        self.game_over = True
        self.end_reason = reason
        self.game_result = result
        logger.info(
            "Game %s over after %d steps: %s (score %d)",
            self.game_id, self.step_count, reason, self.state.score,
        )

    def serialize_history(self) -> List[Dict[str, Any]]:
        """Convert the recorded states to a JSON-serializable list of dicts."""
        return [state.to_dict() for state in self.history]

    def save_history_to_json(self, directory: Optional[str] = None) -> str:
        directory = directory or _get_completed_games_dir()
        filename = f"snake_game_{self.game_id}.json"

        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "player": self.player.name,
            "seed": self.seed,
            "board": {"width": self.width, "height": self.height},
            "game_result": self.game_result,
            "end_reason": self.end_reason,
            "final_score": self.state.score,
            "max_steps": self.max_steps,
            "actual_steps": self.step_count,
        }

        data = {
            "metadata": metadata,
            "moves": list(self.move_history),
            "states": self.serialize_history(),
        }

        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        logger.info("Saved replay for game %s to %s", self.game_id, path)
        return path


def load_history_from_json(path: str) -> List[GameState]:
    """
    Load the recorded states of a saved replay.

    Raises:
        ValueError: if the file does not hold a valid replay.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    states = data.get("states") if isinstance(data, dict) else None
    if not isinstance(states, list):
        raise ValueError(f"Replay {path} has no 'states' list")
    return [GameState.from_dict(s) for s in states]


def build_player(variant_key: Optional[str], seed: Optional[int] = None) -> Player:
    """Instantiate a registered player; random players get their own seeded source."""
    player_class = get_player_class(variant_key)
    if issubclass(player_class, RandomPlayer):
        player_seed = None if seed is None else seed + 1
        return player_class(rng=random.Random(player_seed).random)
    return player_class()


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(game_params: argparse.Namespace) -> Dict[str, Any]:
    """
    Runs a single headless game.

    Args:
        game_params: An object (like argparse.Namespace) containing game settings
                     (width, height, max_steps, player, seed, save).

    Returns:
        A dictionary summarizing the game (game_id, final_score, steps, result, replay_path).
    """
    seed = getattr(game_params, "seed", None)
    player = build_player(getattr(game_params, "player", None), seed)

    game = SnakeGame(
        width=game_params.width,
        height=game_params.height,
        player=player,
        max_steps=game_params.max_steps,
        seed=seed,
        game_id=getattr(game_params, "game_id", None),
    )
    game.run()

    replay_path = None
    if getattr(game_params, "save", True):
        replay_path = game.save_history_to_json(getattr(game_params, "output_dir", None))

    return {
        "game_id": game.game_id,
        "player": player.name,
        "final_score": game.state.score,
        "steps": game.step_count,
        "result": game.game_result,
        "end_reason": game.end_reason,
        "replay_path": replay_path,
        "final_state": game.state,
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Run a headless snake game driven by an autoplay player."
    )
    try:
        default_width = _env_int("SNAKE_BOARD_WIDTH", DEFAULT_WIDTH)
        default_height = _env_int("SNAKE_BOARD_HEIGHT", DEFAULT_HEIGHT)
        default_max_steps = _env_int("SNAKE_MAX_STEPS", DEFAULT_MAX_STEPS)
    except ValueError as e:
        parser.error(str(e))

    parser.add_argument("--width", type=int, default=default_width,
                        help="Width of the board")
    parser.add_argument("--height", type=int, default=default_height,
                        help="Height of the board")
    parser.add_argument("--max-steps", dest="max_steps", type=int, default=default_max_steps,
                        help="Maximum number of steps before the game is stopped")
    parser.add_argument("--player", type=str, default="greedy", choices=AVAILABLE_VARIANTS,
                        help="Player variant driving the snake")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (and the random player)")
    parser.add_argument("--output-dir", dest="output_dir", type=str, default=None,
                        help="Directory for the replay JSON (default: $SNAKE_COMPLETED_GAMES_DIR)")
    parser.add_argument("--no-save", dest="save", action="store_false",
                        help="Do not write a replay file")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the final board")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.max_steps < 1:
        parser.error("--max-steps must be at least 1")

    try:
        result = run_simulation(args)
    except ValueError as e:
        parser.error(str(e))

    final_state = result.pop("final_state")
    if args.show_board:
        print("\n" + final_state.print_board() + "\n")

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
