"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default. With --no-ui the same game runs in
the terminal: the board is printed and moves are typed as "row col".
"""

import random
from typing import Callable, Optional, Tuple

from logic.config import GameConfig
from logic.game_engine import GameEngine, RoundStatus


class ConsoleGame:
    """
    Console front-end for the game engine.

    Game flow per move:
    1. Ask the human for a cell (or let the computer choose)
    2. Apply the move and print the board
    3. Switch turn and evaluate the round
    4. On a result, print it, hand X to the other player, new round
    """

    def __init__(self, engine: GameEngine, read_input: Callable[[str], str] = input):
        """
        Initialize the console game.

        Args:
            engine: A configured game engine.
            read_input: Function used to read a line from the player.
        """
        self.engine = engine
        self.read_input = read_input

    def play(self, rounds: Optional[int] = None) -> int:
        """
        Play rounds until the user quits or the round limit is hit.

        Args:
            rounds: How many rounds to play. None means until "q".

        Returns:
            Number of rounds completed.
        """
        completed = 0
        while rounds is None or completed < rounds:
            self.engine.start_round()
            if not self._play_round():
                break
            completed += 1
            self._print_scores()
            self.engine.switch_starting_player()
        return completed

    def _play_round(self) -> bool:
        """Play one round. Returns False if the user quit."""
        self.engine.board.print_board()

        while True:
            if self.engine.is_computer_turn():
                move = self.engine.compute_computer_move()
            else:
                move = self._ask_move()
                if move is None:
                    return False

            row, col = move
            if not self.engine.apply_move(row, col):
                continue

            self.engine.board.print_board()
            self.engine.switch_turn()
            result = self.engine.evaluate_round()

            if result.status == RoundStatus.WINNER:
                print(f"\n{self.engine.get_winner_name(result.symbol)} wins!")
                return True
            if result.status == RoundStatus.DRAW:
                print("\nIt's a draw!")
                return True

    def _ask_move(self) -> Optional[Tuple[int, int]]:
        """Read "row col" from the player. Returns None on "q"."""
        name = self.engine.current_turn_name()
        symbol = self.engine.current_symbol().value

        while True:
            text = self.read_input(f"{name} ({symbol}) - enter row col, or q to quit: ").strip()
            if text.lower() in ("q", "quit"):
                return None

            parts = text.replace(",", " ").split()
            if len(parts) != 2 or not all(p.isdigit() for p in parts):
                print("Please enter two numbers between 0 and 2, e.g. '1 2'.")
                continue
            return int(parts[0]), int(parts[1])

    def _print_scores(self):
        players = self.engine.players
        print(f"Score - {players.player1_name}: {self.engine.player1_score}   "
              f"{players.player2_name}: {self.engine.player2_score}\n")


def build_engine(args) -> GameEngine:
    """Create and configure an engine from parsed command-line arguments."""
    rng = random.Random(args.seed) if args.seed is not None else None
    engine = GameEngine(GameConfig(), rng=rng)

    vs_computer = not args.two_player
    player2 = args.player2
    if player2 is None:
        player2 = GameConfig.DEFAULT_PLAYER2_NAME if vs_computer else GameConfig.DEFAULT_HUMAN_PLAYER2_NAME

    starting_x = player2 if args.player2_first else args.player1
    engine.configure_game(args.player1, player2, starting_x, vs_computer)
    return engine


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of the window"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans instead of playing the computer"
    )
    parser.add_argument(
        "--player1",
        default=GameConfig.DEFAULT_PLAYER1_NAME,
        help="Name of player 1"
    )
    parser.add_argument(
        "--player2",
        default=None,
        help="Name of player 2 (the computer unless --two-player)"
    )
    parser.add_argument(
        "--player2-first",
        action="store_true",
        help="Player 2 plays X in the first round"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    engine = build_engine(args)

    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   Tic-Tac-Toe")
        print("="*60 + "\n")
        ui = TicTacToeUI(engine=engine)
        ui.run()
        return

    print("\n" + "="*60)
    print("   Tic-Tac-Toe - Console")
    print("="*60 + "\n")

    try:
        ConsoleGame(engine).play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
