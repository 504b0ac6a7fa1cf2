"""
Win checker for TicTacToe.
Finds a completed line on the board or tells that the board is full.
"""

from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass

from .game_state import Board, Cell


class LineType(Enum):
    """Direction of a winning line."""
    HORIZONTAL = "H"
    VERTICAL = "V"
    DIAGONAL = "D"


@dataclass(frozen=True)
class WinningLine:
    """
    A completed line.

    index is the row for HORIZONTAL, the column for VERTICAL, and
    0 (main, top-left to bottom-right) or 1 (anti) for DIAGONAL.
    """
    symbol: Cell
    line_type: LineType
    index: int

    def cells(self) -> List[Tuple[int, int]]:
        """The three (row, col) positions making up the line."""
        if self.line_type == LineType.HORIZONTAL:
            return [(self.index, col) for col in range(3)]
        if self.line_type == LineType.VERTICAL:
            return [(row, self.index) for row in range(3)]
        if self.index == 0:
            return [(0, 0), (1, 1), (2, 2)]
        return [(0, 2), (1, 1), (2, 0)]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Lines are scanned in a fixed order: row i then column i for
    i = 0..2, then the main diagonal, then the anti-diagonal. The first
    completed line found is the one reported.
    """

    def detect_win(self, board: Board) -> Optional[WinningLine]:
        """
        Find the first completed line.

        Args:
            board: The board to check.

        Returns:
            The WinningLine, or None if no line is held by one symbol.
        """
        for i in range(3):
            symbol = self._line_owner(board, [(i, 0), (i, 1), (i, 2)])
            if symbol is not None:
                return WinningLine(symbol, LineType.HORIZONTAL, i)

            symbol = self._line_owner(board, [(0, i), (1, i), (2, i)])
            if symbol is not None:
                return WinningLine(symbol, LineType.VERTICAL, i)

        symbol = self._line_owner(board, [(0, 0), (1, 1), (2, 2)])
        if symbol is not None:
            return WinningLine(symbol, LineType.DIAGONAL, 0)

        symbol = self._line_owner(board, [(0, 2), (1, 1), (2, 0)])
        if symbol is not None:
            return WinningLine(symbol, LineType.DIAGONAL, 1)

        return None

    def _line_owner(self, board: Board, line: List[Tuple[int, int]]) -> Optional[Cell]:
        """Symbol filling all three cells of the line, if any."""
        first = board.get(*line[0])
        if first == Cell.EMPTY:
            return None
        for row, col in line[1:]:
            if board.get(row, col) != first:
                return None
        return first

    def is_win(self, board: Board, symbol: Cell) -> bool:
        """
        Check whether a given symbol holds any complete line.

        Unlike detect_win this does not stop at a line owned by the
        other symbol.
        """
        lines = []
        for i in range(3):
            lines.append([(i, 0), (i, 1), (i, 2)])
            lines.append([(0, i), (1, i), (2, i)])
        lines.append([(0, 0), (1, 1), (2, 2)])
        lines.append([(0, 2), (1, 1), (2, 0)])

        return any(self._line_owner(board, line) == symbol for line in lines)

    def is_board_full(self, board: Board) -> bool:
        return board.is_full()
