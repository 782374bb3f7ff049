"""Command-line tools for Torus Snake."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

import numpy as np

from torus_snake.config import GameConfig
from torus_snake.controls import propose_direction
from torus_snake.persistence import JsonHighScoreStore
from torus_snake.session import SessionController, SessionState
from torus_snake.snake import Direction

logger = logging.getLogger(__name__)

_DEFAULT_SCORE_FILE = "highscore.json"


@dataclass
class SimulationResult:
    """Outcome of a headless autopilot run."""

    ticks: int
    score: int
    high_score: int
    length: int
    game_over: bool

    def summary(self) -> str:
        status = "game over" if self.game_over else "alive"
        return (
            f"Simulation: {self.ticks} ticks, score {self.score}, "
            f"length {self.length}, best {self.high_score} ({status})"
        )


def simulate(
    controller: SessionController,
    max_ticks: int,
    rng: np.random.Generator,
    turn_probability: float = 0.2,
) -> SimulationResult:
    """Drive *controller* with random, never-reversing turns."""
    for _ in range(max_ticks):
        if controller.state == SessionState.GAME_OVER:
            break
        if rng.random() < turn_probability:
            current = controller.direction
            choices = [d for d in Direction if propose_direction(current, d)]
            controller.propose_direction(choices[int(rng.integers(len(choices)))])
        controller.tick()

    return SimulationResult(
        ticks=controller.ticks,
        score=controller.score,
        high_score=controller.high_score,
        length=len(controller.snake),
        game_over=controller.state == SessionState.GAME_OVER,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torus-snake",
        description="Torus Snake headless simulation and score tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a game with a random autopilot.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--ticks", type=int, default=500)
    sim_p.add_argument("--grid-size", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--turn-probability", type=float, default=0.2)
    sim_p.add_argument(
        "--score-file", type=str, default=None,
        help="JSON file used to persist the high score.",
    )

    # --- highscore ---
    hs_p = sub.add_parser("highscore", help="Inspect the stored high score.")
    hs_p.add_argument("action", choices=["show", "reset"])
    hs_p.add_argument("--score-file", type=str, default=_DEFAULT_SCORE_FILE)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "grid_size": "grid_size",
        "seed": "seed",
        "score_file": "high_score_path",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)

    controller = SessionController(config)
    result = simulate(
        controller,
        max_ticks=args.ticks,
        rng=np.random.default_rng(config.seed),
        turn_probability=args.turn_probability,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_highscore(args: argparse.Namespace) -> int:
    store = JsonHighScoreStore(args.score_file)
    if args.action == "reset":
        removed = store.clear()
        print("High score reset." if removed else "No high score stored.")  # noqa: T201
        return 0
    print(store.read_high_score())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``torus-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "highscore": _run_highscore,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
