#!/usr/bin/env python3
"""Run a batch of headless autopilot snake games.

No terminal is used: every game is driven by the random autopilot with the
tick delay skipped, and each is capped at --max-ticks. Prints one line per
game and a JSON summary at the end.
"""

import argparse
import concurrent.futures
import json
import logging
import os
import random
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

# Ensure we can import the game modules from the backend root
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from config import GameConfig, load_config, setup_logging  # noqa: E402
from game import SnakeGame, run_session  # noqa: E402
from players.random_player import RandomPlayer  # noqa: E402

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def _no_wait(_seconds: float) -> None:
    return None


def run_simulation(params: argparse.Namespace, seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Run one autopilot game and return its summary.
    """
    rng = random.Random(seed)
    game = SnakeGame(
        width=params.width,
        height=params.height,
        base_speed=params.speed,
        num_apples=params.apples,
        boundary=params.boundary,
        rng=rng,
    )
    final_state = run_session(game, RandomPlayer(rng=rng), sleep=_no_wait, max_ticks=params.max_ticks)

    result = {
        "seed": seed,
        "score": final_state.score,
        "ticks": final_state.tick_number,
        "speed": final_state.speed,
        "death_reason": final_state.death_reason,
    }
    if getattr(params, "show_board", False):
        result["board"] = final_state.print_board()
    return result


def summarize(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    if not results:
        return {"games": 0, "mean_score": 0.0, "max_score": 0, "deaths": {}}

    deaths: Dict[str, int] = {}
    for result in results:
        reason = result["death_reason"] or "survived"
        deaths[reason] = deaths.get(reason, 0) + 1

    scores = [r["score"] for r in results]
    return {
        "games": len(results),
        "mean_score": sum(scores) / len(scores),
        "max_score": max(scores),
        "deaths": deaths,
    }


def build_parser(config: GameConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run headless snake games driven by the random autopilot."
    )
    parser.add_argument("--num-games", type=int, default=10,
                        help="Number of games to run (default: 10).")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Tick cap per game (default: 1000).")
    parser.add_argument("--max-workers", type=int, default=os.cpu_count() or 1,
                        help="Maximum number of parallel simulation workers (threads).")
    parser.add_argument("--seed", type=int, default=None,
                        help="Base seed; game i uses seed + i.")
    parser.add_argument("--show-board", action="store_true",
                        help="Print each final board.")

    # Game configuration arguments (mirroring main.py)
    parser.add_argument("--width", type=int, default=config.width,
                        help=f"Board width including the wall (default: {config.width}).")
    parser.add_argument("--height", type=int, default=config.height,
                        help=f"Board height including the wall (default: {config.height}).")
    parser.add_argument("--speed", type=int, default=config.base_speed,
                        help=f"Starting ticks per second (default: {config.base_speed}).")
    parser.add_argument("--apples", type=int, default=config.num_apples,
                        help=f"Apples kept on the board (default: {config.num_apples}).")
    parser.add_argument("--boundary", type=str, default=config.boundary, choices=["wrap", "solid"],
                        help=f"Boundary policy (default: {config.boundary}).")
    return parser


def validate_args(args: argparse.Namespace, config: GameConfig) -> GameConfig:
    """
    Check batch limits and merge the board settings into the configuration.

    Raises:
        ValueError: If a batch limit is below 1 or the board settings are invalid
    """
    for flag, value in (
        ("--num-games", args.num_games),
        ("--max-ticks", args.max_ticks),
        ("--max-workers", args.max_workers),
    ):
        if value < 1:
            raise ValueError(f"{flag} must be at least 1, got {value}.")

    return replace(
        config,
        width=args.width,
        height=args.height,
        base_speed=args.speed,
        num_apples=args.apples,
        boundary=args.boundary,
    ).validate()


def run(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Parse arguments, run the batch and return the summary.

    Raises:
        ValueError: If the environment or the arguments are invalid
    """
    config = load_config()
    args = build_parser(config).parse_args(argv)
    config = validate_args(args, config)
    setup_logging(config.log_level, config.log_file)

    seeds = [None if args.seed is None else args.seed + i for i in range(args.num_games)]
    results: List[Dict[str, Any]] = []

    print(f"Starting {args.num_games} games with up to {args.max_workers} workers...")
    with concurrent.futures.ThreadPoolExecutor(max_workers=args.max_workers) as executor:
        futures = [executor.submit(run_simulation, args, seed) for seed in seeds]
        for future in concurrent.futures.as_completed(futures):
            result = future.result()
            results.append(result)
            print(
                f"Game finished: score {result['score']}, ticks {result['ticks']}, "
                f"speed {result['speed']}, death {result['death_reason'] or 'none'}"
            )
            if args.show_board:
                print(result["board"])

    summary = summarize(results)
    print("\nSimulation Summary:")
    print(json.dumps(summary, indent=2))
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    try:
        run(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
