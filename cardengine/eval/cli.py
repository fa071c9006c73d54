"""Play a match between agents from a YAML config.

Usage:
    cardengine-match configs/match/tricks_3p.yaml
    cardengine-match configs/match/tricks_3p.yaml --games 50 --workers 4
    cardengine-match configs/match/tricks_3p.yaml game.hand_size=8 seed=3
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cardengine.config.display import format_config_summary
from cardengine.config.loader import load_config, split_config_path
from cardengine.eval.match import MatchConfig, run_match


def main(argv: list[str] | None = None) -> None:
    """Run a match from a config file."""
    parser = argparse.ArgumentParser(description="Play a match between card game agents")
    parser.add_argument("config", type=Path, help="Path to match config YAML")
    parser.add_argument("overrides", nargs="*", help="Hydra-style overrides (key=value)")
    parser.add_argument(
        "--games",
        type=int,
        default=None,
        help="Override number of games (default: from config)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Override number of workers (default: from config)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every search")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.config.exists():
        print(f"Error: Config file not found: {args.config}")
        sys.exit(1)

    overrides = list(args.overrides)
    if args.games is not None:
        overrides.append(f"games={args.games}")
    if args.workers is not None:
        overrides.append(f"workers={args.workers}")

    config_dir, config_name = split_config_path(str(args.config))
    config = load_config(MatchConfig, config_dir, config_name, overrides=overrides)

    print(
        format_config_summary(
            ("Game", config.game),
            *((f"Seat {i}", agent) for i, agent in enumerate(config.agents)),
        )
    )
    print()

    result = run_match(config)

    print()
    print(result.standings_table())


if __name__ == "__main__":
    main()
