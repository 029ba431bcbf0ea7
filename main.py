#!/usr/bin/env python3
"""
Smarterfiring - A tiny grid arcade game

Move your character around a 5x5 grid and breathe fire at the dragons
that appear along the edges. Only dragons heading straight at you can be
hit. Score as many points as you can in two minutes.
"""

import argparse
import logging

from smarterfiring.game_state import Game


def main(argv=None):
    """Entry point for the game."""
    parser = argparse.ArgumentParser(description="Smarterfiring arcade game")
    parser.add_argument("--seed", type=int, default=None, help="seed for dragon spawns")
    parser.add_argument("--debug", action="store_true", help="log spawns and hits")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    game = Game(seed=args.seed)
    game.run()


if __name__ == "__main__":
    main()
