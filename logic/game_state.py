"""
Game state for TicTacToe.
Holds the board, the round flags, the player setup and the scores.
"""

from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Cell(Enum):
    """What a board cell can hold."""
    EMPTY = ""
    X = "X"
    O = "O"

    def opposite(self) -> "Cell":
        """Get the other player's symbol."""
        if self == Cell.X:
            return Cell.O
        if self == Cell.O:
            return Cell.X
        raise ValueError("EMPTY has no opposite symbol")


class Board:
    """
    The 3x3 TicTacToe grid.

    A cell only goes back to EMPTY through clear() (or when a
    hypothetical move is reverted by the computer player).
    """

    SIZE = GameConfig.BOARD_SIZE

    def __init__(self, grid: Optional[List[List[Cell]]] = None):
        if grid is None:
            grid = [[Cell.EMPTY for _ in range(self.SIZE)] for _ in range(self.SIZE)]
        self.grid = grid

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Board":
        """
        Build a board from three strings like "XO.".

        Any character other than X or O is an empty cell.

        Args:
            rows: Three strings of three characters.

        Returns:
            A new Board.
        """
        grid = []
        for text in rows:
            grid.append([Cell(ch) if ch in ("X", "O") else Cell.EMPTY for ch in text])
        return cls(grid)

    def get(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def set(self, row: int, col: int, value: Cell):
        self.grid[row][col] = value

    def clear(self):
        """Empty every cell."""
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                self.grid[row][col] = Cell.EMPTY

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row][col] == Cell.EMPTY

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                if self.grid[row][col] == Cell.EMPTY:
                    empty.append((row, col))
        return empty

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return len(self.empty_cells()) == 0

    def copy(self) -> "Board":
        return Board([[cell for cell in row] for row in self.grid])

    def print_board(self):
        """Print the board to console."""
        print("\n    0   1   2")
        print("  +---+---+---+")
        for row in range(self.SIZE):
            marks = [self.grid[row][col].value or " " for col in range(self.SIZE)]
            print(f"{row} | " + " | ".join(marks) + " |")
            print("  +---+---+---+")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __repr__(self) -> str:
        rows = ["".join(cell.value or "." for cell in row) for row in self.grid]
        return f"Board({rows!r})"


@dataclass
class RoundState:
    """
    Flags for the round being played.
    Reset together with the board at the start of every round.
    """
    is_player_x_turn: bool = True
    is_round_over: bool = False

    def reset(self):
        self.is_player_x_turn = True
        self.is_round_over = False


@dataclass
class PlayerConfig:
    """
    Who is playing.

    current_player_x_name is always one of the two configured names;
    it alternates between them from round to round.
    """
    player1_name: str = GameConfig.DEFAULT_PLAYER1_NAME
    player2_name: str = GameConfig.DEFAULT_PLAYER2_NAME
    vs_computer: bool = GameConfig.DEFAULT_VS_COMPUTER
    current_player_x_name: str = GameConfig.DEFAULT_PLAYER1_NAME

    def other_player_name(self) -> str:
        """Name of the player not currently holding X."""
        if self.current_player_x_name == self.player1_name:
            return self.player2_name
        return self.player1_name


@dataclass
class ScoreBoard:
    """Rounds won by each player. Only reset on a new game."""
    player1_score: int = 0
    player2_score: int = 0

    def reset(self):
        self.player1_score = 0
        self.player2_score = 0


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 board
    - Whose turn it is and whether the round is over
    - The two players and who currently plays X
    - The scores across rounds
    """
    board: Board = field(default_factory=Board)
    round: RoundState = field(default_factory=RoundState)
    players: Optional[PlayerConfig] = None
    scores: ScoreBoard = field(default_factory=ScoreBoard)

    def current_symbol(self) -> Cell:
        """Symbol placed by the next move."""
        return Cell.X if self.round.is_player_x_turn else Cell.O
