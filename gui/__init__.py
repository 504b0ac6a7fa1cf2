"""
GUI module for TicTacToe.
Tkinter window settings, mark images and the player setup form.
"""

from .config import UIConfig
from .images import MarkRenderer
