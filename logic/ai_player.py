"""
Computer player for TicTacToe.
Wins if it can, blocks if it must, otherwise plays a random empty cell.
"""

import random
from typing import Optional, Tuple

from .game_state import Board, Cell
from .win_checker import WinChecker


class ComputerPlayer:
    """
    A simple heuristic opponent.

    Priority order:
    1. Complete a line for its own symbol
    2. Block a line the opponent could complete next move
    3. Pick uniformly among the empty cells

    The random source only needs a choice(seq) method, so tests can
    pass a seeded random.Random or a stub.
    """

    def __init__(self, symbol: Cell = Cell.O, rng=None):
        """
        Initialize the computer player.

        Args:
            symbol: Symbol the computer plays (default: O).
            rng: Random source with a choice() method. A fresh
                random.Random is used if not provided.
        """
        self.symbol = symbol
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()

        # Why the last move was chosen: "win", "block" or "random"
        self.last_reason: Optional[str] = None

    def get_move(self, board: Board) -> Tuple[int, int]:
        """
        Choose a move.

        The computer always tests its own symbol first and then the
        opponent's, whichever side is to move.

        Args:
            board: Current board. It is left unchanged.

        Returns:
            (row, col) of the chosen cell.

        Raises:
            ValueError: If the board has no empty cell.
        """
        symbol = self.symbol
        empty_cells = board.empty_cells()

        if not empty_cells:
            raise ValueError("Cannot choose a move on a full board")

        move = self.find_winning_move(board, symbol)
        if move is not None:
            self.last_reason = "win"
            return move

        move = self.find_winning_move(board, symbol.opposite())
        if move is not None:
            self.last_reason = "block"
            return move

        self.last_reason = "random"
        return self.rng.choice(empty_cells)

    def find_winning_move(self, board: Board, symbol: Cell) -> Optional[Tuple[int, int]]:
        """
        Find an empty cell that completes a line for symbol.

        Each empty cell is filled in turn, tested and emptied again, so
        the board is unchanged on return.

        Returns:
            The first such (row, col) in row-major order, or None.
        """
        for row, col in board.empty_cells():
            board.set(row, col, symbol)
            try:
                if self.win_checker.is_win(board, symbol):
                    return (row, col)
            finally:
                board.set(row, col, Cell.EMPTY)
        return None
