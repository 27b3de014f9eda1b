#!/usr/bin/env python3
"""Watch the deduction agent sweep several minefields."""
import time
import os

from minefield import FieldConfig, GameOutcome, render_field
from detector import DeductionAgent, GameSession


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 20, mines: int = 50, seed=None):
    """Run demo games with visualization."""
    print(f"Field: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        game_seed = None if seed is None else seed + game
        config = FieldConfig(width=size, height=size, num_mines=mines, seed=game_seed)
        session = GameSession(config, DeductionAgent)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(render_field(session.field))
        time.sleep(delay)

        while session.is_playing:
            result = session.step()
            row, col = result.position

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Turn {result.turn} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col}) {'deduced' if result.certain else 'guessed'}\n")
            print(render_field(session.field))

            if session.outcome == GameOutcome.WON:
                wins += 1
                print(f"\n*** WIN! ***")
            elif session.outcome == GameOutcome.LOST:
                print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=20, help="Field size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: 1/8 of cells)")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the first game")
    args = parser.parse_args()

    # Default mines to 1/8 of cells (50 on the default 20x20 field)
    mines = args.mines if args.mines else args.size * args.size // 8

    demo(delay=args.delay, games=args.games, size=args.size, mines=mines, seed=args.seed)
