import argparse
import logging

from core.logger import setup_logger
from core.settings import HEIGHT, WIDTH


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Feed the Freddies - throw donuts before they reach the bottom.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible game")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height in pixels")
    parser.add_argument("--compact", action="store_true", default=None,
                        help="use the faster donut regen meant for small screens")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logger(getattr(logging, args.log_level))

    # pygame window is only opened here so the simulation imports stay headless
    from core.game import Game

    Game(seed=args.seed, width=args.width, height=args.height, compact=args.compact).run()


if __name__ == "__main__":
    main()
