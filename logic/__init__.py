"""
Logic module for TicTacToe.
Handles the board, rules, scoring and the computer opponent.
"""

from .config import GameConfig
from .game_state import Board, Cell, GameState, PlayerConfig, RoundState, ScoreBoard
from .move_validator import MoveValidator, ValidationResult
from .win_checker import LineType, WinChecker, WinningLine
from .ai_player import ComputerPlayer
from .game_engine import GameEngine, RoundResult, RoundStatus

__version__ = "1.0.0"
