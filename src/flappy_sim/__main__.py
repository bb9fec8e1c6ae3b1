"""Play the game: ``python -m flappy_sim``."""

import argparse
import logging

from .config import CONFIGS
from .engine import FlappyEngine
from .policies import POLICIES


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the side-scrolling avoider.")
    parser.add_argument("--preset", choices=sorted(CONFIGS), default="default",
                        help="Named game configuration.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for pipe gap offsets.")
    parser.add_argument("--autopilot", choices=sorted(POLICIES), default=None,
                        help="Let a scripted policy play.")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    autopilot = POLICIES[args.autopilot]() if args.autopilot else None
    engine = FlappyEngine(CONFIGS[args.preset], seed=args.seed, autopilot=autopilot)
    engine.run()


if __name__ == "__main__":
    main()
