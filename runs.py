# -*- coding: utf-8 -*-
"""
Play random games of 2048 and report the reached tiles.
"""
import logging
from collections import Counter

import numpy as np
from tqdm import trange

from game2048 import GameConfig, GameSession

logger = logging.getLogger(__name__)


def play_random_games(
    length: int = 10, config: GameConfig | None = None, seed: int | None = None, max_moves: int = 10_000
) -> tuple[dict[int, int], int]:
    """
    Play games with a uniformly random policy.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    config : GameConfig, optional
        Parameters of the games.
    seed : int, optional
        Seed of both the policy and the tile spawns.
    max_moves : int, optional
        Moves after which an unfinished game is abandoned.

    Returns
    -------
    tuple[dict[int, int], int]
        Frequency of the largest tile of each game, and the best score.
    """
    # ##: Independent streams for the policy and the tile spawns.
    policy_seed, spawn_seed = np.random.SeedSequence(seed).spawn(2)
    rng = np.random.default_rng(policy_seed)
    env = GameSession(config=config, seed=spawn_seed)
    directions = list(GameSession.ACTIONS)
    tiles, best = [], 0

    with trange(length) as period:
        for num in period:
            env.reset()
            score, done, moves = env.score, False, 0

            # ##: Play a game.
            while not done and moves < max_moves:
                _, score, done = env.step(directions[rng.integers(len(directions))])
                moves += 1

                # ##: Log.
                period.set_description(f"Game: {num + 1}")
                period.set_postfix(score=score, max=int(np.max(env.board)))

            if not done:
                logger.warning("Game %d abandoned after %d moves", num + 1, moves)

            # ##: Save max cells.
            tiles.append(int(np.max(env.board)))
            best = max(best, score)

    return dict(Counter(tiles)), best


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play random games of 2048.")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--rows", type=int, default=4)
    parser.add_argument("--cols", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-moves", type=int, default=10_000)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    frequency, best_score = play_random_games(
        length=args.games, config=GameConfig(rows=args.rows, cols=args.cols), seed=args.seed, max_moves=args.max_moves
    )
    print(f"Max tiles: {dict(sorted(frequency.items()))}, best score: {best_score}")
