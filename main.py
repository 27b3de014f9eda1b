#!/usr/bin/env python3
"""
Minefield Detector - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S] [--delay D | --no-wait]
    python main.py evaluate [--agent {deduction,random}] [--games N]
    python main.py compare [--games N]
"""
import argparse
import logging
import time

from minefield import FieldConfig, GameOutcome, InvalidConfiguration, render_field
from detector import DeductionAgent, Evaluator, GameSession, RandomAgent


AGENTS = {
    "deduction": DeductionAgent,
    "random": RandomAgent,
}


def build_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> FieldConfig:
    """Build a field configuration, reporting bad values as usage errors."""
    try:
        return FieldConfig(
            width=args.width,
            height=args.height,
            num_mines=args.mines,
            seed=args.seed,
        )
    except InvalidConfiguration as exc:
        parser.error(str(exc))


def play(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Watch the detector play one game, turn by turn."""
    config = build_config(parser, args)
    session = GameSession(config, AGENTS[args.agent])

    print("Begin!")
    print(render_field(session.field, use_color=not args.no_color))

    while session.is_playing:
        if args.delay is not None:
            time.sleep(args.delay)
        elif not args.no_wait:
            input("Press Enter for next step!")

        result = session.step()
        how = "deduced" if result.certain else "guessed"
        print(f"Opened Row: {result.position[0]}, Col: {result.position[1]} ({how})")
        print(render_field(session.field, use_color=not args.no_color))

    if session.outcome == GameOutcome.LOST:
        print("Game Over")
    elif session.outcome == GameOutcome.WON:
        print("You Win!")
    print(
        f"Turns: {session.turns} | "
        f"Deduced: {session.agent.certain_moves} | "
        f"Guessed: {session.agent.guesses_made}"
    )


def evaluate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    config = build_config(parser, args)
    evaluator = Evaluator(config, num_games=args.games, base_seed=args.seed or 0)

    print(f"\nEvaluating {args.agent} over {args.games} games...")
    stats = evaluator.evaluate(AGENTS[args.agent])

    print(f"Results for {args.agent}:")
    print(f"  Win rate: {stats.win_rate:.1%}")
    print(f"  Avg turns: {stats.avg_turns:.1f}")
    print(f"  Avg guesses: {stats.avg_guesses:.1f}")


def compare(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Compare all agents on the same sequence of fields."""
    config = build_config(parser, args)
    evaluator = Evaluator(config, num_games=args.games, base_seed=args.seed or 0)
    results = evaluator.compare(AGENTS)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Turns':<12} {'Avg Guesses':<10}")
    print("-" * 50)

    for name, stats in results.items():
        print(
            f"{name:<20} {stats.win_rate:>10.1%} "
            f"{stats.avg_turns:>10.1f} "
            f"{stats.avg_guesses:>10.1f}"
        )


def add_field_arguments(parser: argparse.ArgumentParser) -> None:
    """Field size, mine count and seed options shared by every command."""
    parser.add_argument("--width", type=int, default=20, help="Field width")
    parser.add_argument("--height", type=int, default=20, help="Field height")
    parser.add_argument("--mines", type=int, default=50, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield Detector - watch and evaluate mine-detecting agents"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Watch one game")
    add_field_arguments(play_parser)
    play_parser.add_argument(
        "--agent", choices=sorted(AGENTS), default="deduction",
        help="Agent to watch",
    )
    play_parser.add_argument(
        "--delay", type=float, default=None,
        help="Seconds between turns instead of waiting for Enter",
    )
    play_parser.add_argument(
        "--no-wait", action="store_true", help="Play without pausing"
    )
    play_parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colours"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    add_field_arguments(eval_parser)
    eval_parser.add_argument(
        "--agent", choices=sorted(AGENTS), default="deduction",
        help="Agent to evaluate",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    add_field_arguments(compare_parser)
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        play(parser, args)
    elif args.command == "evaluate":
        evaluate(parser, args)
    elif args.command == "compare":
        compare(parser, args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
