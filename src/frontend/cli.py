"""
Minesweeper - command-line entry point.

Usage:
    minesweeper play [--mobile] [--size N] [--seed S] [--load FILE]
    minesweeper show FILE
    minesweeper demo [--games N] [--size N]
"""
import argparse
import logging
import random
from typing import List, Optional

from sweeper import Engine, PlatformConfig, PlatformTier, read_session

from .console import ConsoleGame
from .environment import MinesweeperEnv, RandomPlayer
from .text import render_board, render_status


def build_config(args: argparse.Namespace) -> PlatformConfig:
    """Resolve the platform tier and save options once at startup."""
    tier = PlatformTier.MOBILE if args.mobile else PlatformTier.DESKTOP
    return PlatformConfig.for_tier(tier, versioned_saves=args.versioned_saves)


def play(args: argparse.Namespace) -> int:
    """Run the interactive console game."""
    rng = random.Random(args.seed) if args.seed is not None else None
    engine = Engine(build_config(args), rng=rng)

    if args.load:
        if not engine.load(args.load):
            print(f"Could not load {args.load}")
            return 1
    elif args.size is not None:
        engine.start_custom_session(str(args.size))

    print("Minesweeper - type 'help' for commands")
    ConsoleGame(engine).run()
    return 0


def show(args: argparse.Namespace) -> int:
    """Print a saved game."""
    try:
        session = read_session(args.file)
    except (OSError, ValueError) as exc:
        print(f"Could not read {args.file}: {exc}")
        return 1

    snapshot = session.snapshot()
    print(render_board(snapshot))
    print(render_status(snapshot))
    return 0


def demo(args: argparse.Namespace) -> int:
    """Let a random player play a few games."""
    env = MinesweeperEnv(grid_size=args.size, render_mode="ansi")
    player = RandomPlayer(seed=args.seed)

    wins = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False
        info = {}
        while not done:
            action = player.select_action(env.get_action_mask())
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info.get("game_state") == "WON":
            wins += 1
        print(f"=== Game {game + 1}/{args.games}: {info.get('game_state')} ===")
        print(env.render())

    print(f"\n=== Final: {wins}/{args.games} wins ===")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--mobile", action="store_true", help="Use mobile grid sizes (3 to 8)"
    )
    play_parser.add_argument(
        "--size", type=int, default=None, help="Starting grid size"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    play_parser.add_argument(
        "--load", default=None, help="Start from a saved game"
    )
    play_parser.add_argument(
        "--versioned-saves",
        action="store_true",
        help="Write save files with a format header",
    )

    # Show command
    show_parser = subparsers.add_parser("show", help="Print a saved game")
    show_parser.add_argument("file", help="Save file to print")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Watch a random player")
    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--size", type=int, default=5, help="Grid size"
    )
    demo_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mines and moves"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "show":
        return show(args)
    if args.command == "demo":
        return demo(args)
    parser.print_help()
    return 0
