import argparse
import logging
import time

import numpy as np

from config import EPISODES, GRID_HEIGHT, GRID_WIDTH, MAX_STEPS, START_X, TURN_PROBABILITY, GameConfig
from game import Game, TickResult
from snake import Direction

DIRECTIONS = list(Direction)


def choose_direction(rng):
    # Random policy: mostly go straight, sometimes turn
    if rng.random() < TURN_PROBABILITY:
        return DIRECTIONS[rng.integers(len(DIRECTIONS))]
    return None


def play_episode(game, rng):
    result = TickResult.MOVED
    while game.is_alive:
        requested = choose_direction(rng)
        if requested is not None:
            game.change_direction(requested)
        result = game.tick()
    return result


def run_episodes(config, num_episodes=EPISODES):
    rng = np.random.default_rng(config.seed)
    scores = []
    lengths = []
    steps = []

    for episode in range(num_episodes):
        start_time = time.time()
        game = Game(config, rng=rng)
        result = play_episode(game, rng)

        scores.append(game.score)
        lengths.append(len(game.snake))
        steps.append(game.steps)
        print(f"Episode {episode + 1}/{num_episodes} - Score: {game.score}, Length: {len(game.snake)}, Steps: {game.steps}, End: {result.value}, Time: {time.time() - start_time:.3f}s")

    return scores, lengths, steps


def build_parser():
    parser = argparse.ArgumentParser(description="Headless Snake simulation")
    parser.add_argument("--episodes", type=int, default=EPISODES, help="Number of episodes to play.")
    parser.add_argument("--width", type=int, default=GRID_WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT, help="Grid height in cells.")
    parser.add_argument("--start-x", type=int, default=START_X, help="Column of the snake's tail at start (the head starts two cells to the right).")
    parser.add_argument("--start-y", type=int, default=None, help="Row of the snake at start. Defaults to the middle row.")
    parser.add_argument("--max-steps", type=int, default=MAX_STEPS, help="Steps before an episode times out.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement and the random policy.")
    parser.add_argument("--verbose", action="store_true", help="Log every state transition.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.episodes <= 0:
        parser.error("--episodes must be positive")
    try:
        config = GameConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    print(f"Running {args.episodes} episode(s) on a {config.grid_width}x{config.grid_height} grid...")
    scores, lengths, steps = run_episodes(config, args.episodes)

    print(f"Avg Score: {np.mean(scores):.2f}, Max Score: {np.max(scores)}, Avg Length: {np.mean(lengths):.2f}, Avg Steps: {np.mean(steps):.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
