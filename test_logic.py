"""
Tests for the TicTacToe rules: board, win checker, move validator and
computer player.

Usage:
    python test_logic.py    # Run all tests
    pytest test_logic.py
"""

import random
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.game_state import Board, Cell
from logic.win_checker import LineType, WinChecker, WinningLine
from logic.move_validator import MoveValidator
from logic.ai_player import ComputerPlayer


class StubRng:
    """Random source that always picks the last option and remembers it."""

    def __init__(self):
        self.seen = None

    def choice(self, seq):
        self.seen = list(seq)
        return seq[-1]


# ==================== BOARD ====================

def test_board_starts_empty():
    board = Board()
    assert len(board.empty_cells()) == 9
    assert not board.is_full()
    assert all(board.get(r, c) == Cell.EMPTY for r in range(3) for c in range(3))


def test_board_from_rows_and_clear():
    board = Board.from_rows(["XO.", "...", "..X"])
    assert board.get(0, 0) == Cell.X
    assert board.get(0, 1) == Cell.O
    assert board.get(2, 2) == Cell.X
    assert board.empty_cells()[0] == (0, 2)

    board.clear()
    assert board == Board()


def test_board_full_only_when_all_nine_set():
    board = Board()
    cells = [(r, c) for r in range(3) for c in range(3)]
    for i, (row, col) in enumerate(cells):
        assert not board.is_full()
        board.set(row, col, Cell.X if i % 2 == 0 else Cell.O)
    assert board.is_full()


def test_cell_opposite():
    assert Cell.X.opposite() == Cell.O
    assert Cell.O.opposite() == Cell.X
    try:
        Cell.EMPTY.opposite()
    except ValueError:
        pass
    else:
        raise AssertionError("EMPTY.opposite() should raise")


# ==================== WIN CHECKER ====================

def test_horizontal_win():
    board = Board.from_rows(["XXX", "O.O", "..."])
    assert WinChecker().detect_win(board) == WinningLine(Cell.X, LineType.HORIZONTAL, 0)


def test_vertical_win():
    board = Board.from_rows(["OX.", "OX.", "O.X"])
    assert WinChecker().detect_win(board) == WinningLine(Cell.O, LineType.VERTICAL, 0)


def test_bottom_row_and_right_column():
    checker = WinChecker()
    assert checker.detect_win(Board.from_rows(["X.X", "X..", "OOO"])) == \
        WinningLine(Cell.O, LineType.HORIZONTAL, 2)
    assert checker.detect_win(Board.from_rows([".OX", "O.X", "..X"])) == \
        WinningLine(Cell.X, LineType.VERTICAL, 2)


def test_main_diagonal_win():
    board = Board.from_rows(["XO.", ".XO", "..X"])
    assert WinChecker().detect_win(board) == WinningLine(Cell.X, LineType.DIAGONAL, 0)


def test_anti_diagonal_win():
    board = Board.from_rows(["OOX", ".X.", "X.."])
    assert WinChecker().detect_win(board) == WinningLine(Cell.X, LineType.DIAGONAL, 1)


def test_scan_order_row_before_column_of_same_index():
    # Row 0 and column 0 both complete: row 0 comes first
    board = Board.from_rows(["XXX", "X..", "X.."])
    assert WinChecker().detect_win(board) == WinningLine(Cell.X, LineType.HORIZONTAL, 0)


def test_scan_order_column_0_before_row_1():
    # Column 0 is checked (i=0) before row 1 (i=1)
    board = Board.from_rows(["X..", "XXX", "X.."])
    assert WinChecker().detect_win(board) == WinningLine(Cell.X, LineType.VERTICAL, 0)


def test_scan_order_lines_before_diagonals():
    # Column 0 and the main diagonal are both complete
    board = Board.from_rows(["X..", "XX.", "X.X"])
    assert WinChecker().detect_win(board) == WinningLine(Cell.X, LineType.VERTICAL, 0)


def test_no_winner():
    checker = WinChecker()
    assert checker.detect_win(Board()) is None
    assert checker.detect_win(Board.from_rows(["XO.", ".O.", "..X"])) is None


def test_full_board_draw():
    checker = WinChecker()
    board = Board.from_rows(["XOX", "XOO", "OXX"])
    assert checker.detect_win(board) is None
    assert checker.is_board_full(board)


def test_winning_line_cells():
    assert WinningLine(Cell.X, LineType.HORIZONTAL, 1).cells() == [(1, 0), (1, 1), (1, 2)]
    assert WinningLine(Cell.X, LineType.VERTICAL, 2).cells() == [(0, 2), (1, 2), (2, 2)]
    assert WinningLine(Cell.O, LineType.DIAGONAL, 0).cells() == [(0, 0), (1, 1), (2, 2)]
    assert WinningLine(Cell.O, LineType.DIAGONAL, 1).cells() == [(0, 2), (1, 1), (2, 0)]


def test_is_win_per_symbol():
    checker = WinChecker()
    board = Board.from_rows(["OOO", "XXX", "..."])
    assert checker.is_win(board, Cell.X)
    assert checker.is_win(board, Cell.O)
    assert not checker.is_win(Board.from_rows(["XX.", "...", "..."]), Cell.X)


def test_detect_win_matches_brute_force_on_random_boards():
    checker = WinChecker()
    rng = random.Random(1234)
    lines = []
    for i in range(3):
        lines.append([(i, 0), (i, 1), (i, 2)])
        lines.append([(0, i), (1, i), (2, i)])
    lines.append([(0, 0), (1, 1), (2, 2)])
    lines.append([(0, 2), (1, 1), (2, 0)])

    for _ in range(500):
        board = Board([[rng.choice(list(Cell)) for _ in range(3)] for _ in range(3)])
        expected = any(
            board.get(*line[0]) != Cell.EMPTY
            and all(board.get(r, c) == board.get(*line[0]) for r, c in line)
            for line in lines
        )
        assert (checker.detect_win(board) is not None) == expected


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(Board(), 1, 1)
    assert result.is_valid
    assert result.error_message is None


def test_validator_rejects_occupied_cell():
    board = Board.from_rows(["...", ".X.", "..."])
    result = MoveValidator().validate_move(board, 1, 1)
    assert not result.is_valid
    assert "occupied" in result.error_message


def test_validator_rejects_out_of_range():
    validator = MoveValidator()
    for row, col in [(3, 0), (0, 3), (-1, 0), (0, -1)]:
        result = validator.validate_move(Board(), row, col)
        assert not result.is_valid
        assert "Invalid position" in result.error_message


# ==================== COMPUTER PLAYER ====================

def test_computer_blocks_row():
    ai = ComputerPlayer(Cell.O, rng=StubRng())
    board = Board.from_rows(["XX.", "...", "..."])
    assert ai.get_move(board) == (0, 2)
    assert ai.last_reason == "block"


def test_computer_blocks_diagonal():
    ai = ComputerPlayer(Cell.O, rng=StubRng())
    board = Board.from_rows(["X..", ".X.", "..."])
    assert ai.get_move(board) == (2, 2)


def test_computer_prefers_win_over_block():
    ai = ComputerPlayer(Cell.O, rng=StubRng())
    board = Board.from_rows(["XX.", "OO.", "X.."])
    assert ai.get_move(board) == (1, 2)
    assert ai.last_reason == "win"


def test_computer_takes_first_win_in_row_major_order():
    ai = ComputerPlayer(Cell.O, rng=StubRng())
    # O can win at (0, 2) (row 0) and at (2, 0) (column 0)
    board = Board.from_rows(["OO.", "OX.", ".XX"])
    assert ai.get_move(board) == (0, 2)


def test_computer_tests_its_own_symbol_first():
    ai = ComputerPlayer(Cell.O, rng=StubRng())
    board = Board.from_rows(["XX.", "OO.", "..."])
    # O completes row 1 before blocking X at (0, 2)
    assert ai.get_move(board) == (1, 2)
    assert ai.last_reason == "win"


def test_computer_random_fallback_uses_rng():
    rng = StubRng()
    ai = ComputerPlayer(Cell.O, rng=rng)
    board = Board.from_rows(["X..", "...", "..."])
    move = ai.get_move(board)
    assert ai.last_reason == "random"
    assert rng.seen == board.empty_cells()
    assert move == (2, 2)


def test_computer_seeded_rng_is_repeatable():
    board = Board()
    first = ComputerPlayer(Cell.O, rng=random.Random(7)).get_move(board)
    second = ComputerPlayer(Cell.O, rng=random.Random(7)).get_move(board)
    assert first == second
    assert first in board.empty_cells()


def test_computer_leaves_board_unchanged():
    ai = ComputerPlayer(Cell.O, rng=StubRng())
    for rows in (["XX.", "...", "..."], ["XX.", "OO.", "X.."], ["X..", "...", "..."]):
        board = Board.from_rows(rows)
        before = board.copy()
        ai.get_move(board)
        assert board == before


def test_computer_on_full_board_fails():
    ai = ComputerPlayer(Cell.O)
    try:
        ai.get_move(Board.from_rows(["XOX", "XOO", "OXX"]))
    except ValueError:
        pass
    else:
        raise AssertionError("get_move on a full board should raise ValueError")


def test_find_winning_move_none():
    ai = ComputerPlayer(Cell.O)
    assert ai.find_winning_move(Board(), Cell.O) is None


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Logic Tests")
    print("="*60)

    tests = [(name, func) for name, func in globals().items()
             if name.startswith("test_") and callable(func)]

    failed = 0
    for name, func in tests:
        try:
            func()
            print(f"  ✓ {name}")
        except AssertionError as e:
            failed += 1
            print(f"  ✗ {name}: {e}")

    print("="*60)
    print(f"   {len(tests) - failed}/{len(tests)} passed")
    print("="*60)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
