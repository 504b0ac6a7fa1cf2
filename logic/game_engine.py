"""
Game engine for TicTacToe.
The single authority over the board, turn order, scores and the
computer's move choice. The UI (or console loop) drives it:

    engine.apply_move(row, col)   # place the mark
    ...draw the mark...
    engine.switch_turn()
    result = engine.evaluate_round()

The engine never plays the computer's move on its own. When
is_computer_turn() is true the caller asks compute_computer_move()
and applies it like any other move.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, Cell, GameState, PlayerConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker, WinningLine
from .ai_player import ComputerPlayer


class RoundStatus(Enum):
    """Where the round stands after a move."""
    ONGOING = "ongoing"
    WINNER = "winner"
    DRAW = "draw"


@dataclass(frozen=True)
class RoundResult:
    """Outcome of evaluate_round(). line is set only for WINNER."""
    status: RoundStatus
    line: Optional[WinningLine] = None

    @property
    def symbol(self) -> Optional[Cell]:
        return self.line.symbol if self.line else None


class GameEngine:
    """
    Runs a TicTacToe game: a series of rounds sharing one score board.

    Scores and players survive start_round(); only configure_game()
    (or set_default_settings()) resets them.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng=None):
        """
        Initialize the engine.

        Args:
            config: Game configuration. Uses defaults if not provided.
            rng: Random source for the computer's fallback move.
        """
        self.config = config or GameConfig()
        self.state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.computer = ComputerPlayer(Cell.O, rng=rng)

    # ==================== SETUP ====================

    def configure_game(
        self,
        player1_name: str,
        player2_name: str,
        starting_x_name: str,
        vs_computer: bool
    ):
        """
        Start a new game with the given players.

        Scores are reset and a fresh round begins. When vs_computer is
        set, player 2 is the computer.

        Args:
            player1_name: First player's name.
            player2_name: Second player's name (the computer, if any).
            starting_x_name: Which of the two plays X in the first round.
            vs_computer: Whether player 2 is the computer.

        Raises:
            ValueError: If starting_x_name is neither player's name.
        """
        if starting_x_name not in (player1_name, player2_name):
            raise ValueError(
                f"Starting player {starting_x_name!r} must be {player1_name!r} or {player2_name!r}"
            )

        self.state.players = PlayerConfig(
            player1_name=player1_name,
            player2_name=player2_name,
            vs_computer=vs_computer,
            current_player_x_name=starting_x_name,
        )
        self.state.scores.reset()
        self._log(
            f"New game: {player1_name} vs {player2_name}"
            f"{' (computer)' if vs_computer else ''}, {starting_x_name} plays X"
        )
        self.start_round()

    def set_default_settings(self):
        """Start a new game with the default players from the config."""
        self.configure_game(
            self.config.DEFAULT_PLAYER1_NAME,
            self.config.DEFAULT_PLAYER2_NAME,
            self.config.DEFAULT_PLAYER1_NAME,
            self.config.DEFAULT_VS_COMPUTER,
        )

    def start_round(self):
        """
        Clear the board and give the first move to X.

        If the computer holds X, the caller should request its move
        right away (see is_computer_turn()).
        """
        self.state.board.clear()
        self.state.round.reset()

    # ==================== MOVES ====================

    def apply_move(self, row: int, col: int) -> bool:
        """
        Place the current turn's symbol at (row, col).

        The turn is not switched and the round is not evaluated here;
        call switch_turn() and evaluate_round() afterwards.

        Returns:
            True if the mark was placed, False if the cell is taken or
            out of range (the board is left untouched).
        """
        result = self.validator.validate_move(self.state.board, row, col)
        if not result.is_valid:
            self._log(result.error_message)
            return False

        self.state.board.set(row, col, self.state.current_symbol())
        return True

    def switch_turn(self):
        self.state.round.is_player_x_turn = not self.state.round.is_player_x_turn

    def compute_computer_move(self) -> Tuple[int, int]:
        """
        Choose the computer's move.

        The computer looks for a winning O cell first, then blocks an X
        win, whichever symbol it holds this round.

        Raises:
            ValueError: If the board is full.
        """
        move = self.computer.get_move(self.state.board)
        self._log(f"Computer plays {self.state.current_symbol().value} at {move} [{self.computer.last_reason}]")
        return move

    # ==================== ROUND RESULT ====================

    def detect_win(self) -> Optional[WinningLine]:
        return self.win_checker.detect_win(self.state.board)

    def is_board_full(self) -> bool:
        return self.win_checker.is_board_full(self.state.board)

    def evaluate_round(self) -> RoundResult:
        """
        Check the board for a winner or a draw.

        On a win the round is over and the winner's score goes up by
        one. Call once per finished round.

        Returns:
            RoundResult with status ONGOING, WINNER (with the line) or DRAW.
        """
        line = self.detect_win()
        if line is not None:
            self.state.round.is_round_over = True
            winner_name = self.get_winner_name(line.symbol)
            self._add_point(winner_name)
            self._log(f"{winner_name} wins! ({line.line_type.name.lower()} {line.index})")
            return RoundResult(RoundStatus.WINNER, line)

        if self.is_board_full():
            self.state.round.is_round_over = True
            self._log("It's a draw!")
            return RoundResult(RoundStatus.DRAW)

        return RoundResult(RoundStatus.ONGOING)

    def _add_point(self, name: str):
        scores = self.state.scores
        if name == self._players().player1_name:
            scores.player1_score += 1
        else:
            scores.player2_score += 1

    # ==================== PLAYERS ====================

    def switch_starting_player(self):
        """Hand X to the other player for the next round."""
        players = self._players()
        players.current_player_x_name = players.other_player_name()

    def get_winner_name(self, symbol: Cell) -> str:
        """
        Name of the player who holds symbol this round.

        Raises:
            ValueError: If symbol is EMPTY.
        """
        if symbol == Cell.EMPTY:
            raise ValueError("EMPTY does not belong to a player")
        players = self._players()
        if symbol == Cell.X:
            return players.current_player_x_name
        return players.other_player_name()

    def get_other_player_name(self) -> str:
        return self._players().other_player_name()

    def is_computer_x(self) -> bool:
        """The computer is always player 2; true if it plays X this round."""
        players = self._players()
        return players.current_player_x_name == players.player2_name

    def is_computer_turn(self) -> bool:
        """True if the computer should move now."""
        players = self.state.players
        if players is None or not players.vs_computer or self.is_round_over:
            return False
        return self.is_player_x_turn == self.is_computer_x()

    def current_symbol(self) -> Cell:
        return self.state.current_symbol()

    def current_turn_name(self) -> str:
        """Name of the player to move."""
        return self.get_winner_name(self.current_symbol())

    def _players(self) -> PlayerConfig:
        if self.state.players is None:
            raise RuntimeError("Game is not configured. Call configure_game() first.")
        return self.state.players

    def _log(self, message: str):
        if self.config.VERBOSE:
            print(message)

    # ==================== ACCESSORS ====================

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def players(self) -> Optional[PlayerConfig]:
        return self.state.players

    @property
    def is_player_x_turn(self) -> bool:
        return self.state.round.is_player_x_turn

    @property
    def is_round_over(self) -> bool:
        return self.state.round.is_round_over

    @property
    def vs_computer(self) -> bool:
        return self.state.players is not None and self.state.players.vs_computer

    @property
    def player1_score(self) -> int:
        return self.state.scores.player1_score

    @property
    def player2_score(self) -> int:
        return self.state.scores.player2_score
