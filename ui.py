"""
TicTacToe UI
A graphical interface for the TicTacToe game using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Whose turn it is and the score
- A "New Game" form to pick players and the computer option
"""

import tkinter as tk
from tkinter import messagebox, ttk
from typing import Dict, Optional

from PIL import Image, ImageTk

from gui.config import UIConfig
from gui.images import MarkRenderer
from gui.setup_dialog import PlayerSetupDialog
from logic.config import GameConfig
from logic.game_engine import GameEngine, RoundResult, RoundStatus
from logic.game_state import Cell


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Every move, human or computer, goes through _play(): place the
    mark, draw it, switch turn, evaluate the round. The computer's
    moves are scheduled with root.after() whenever it is its turn.
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        config: Optional[UIConfig] = None,
        game_config: Optional[GameConfig] = None
    ):
        """Initialize the UI."""
        self.config = config or UIConfig()
        self.game_config = game_config or GameConfig()
        self.engine = engine or GameEngine(self.game_config)
        self.renderer = MarkRenderer(self.config)

        # Pending root.after() id for the computer's move
        self._computer_job: Optional[str] = None

        # Tk drops images that are not referenced from Python
        self._photos: Dict[object, ImageTk.PhotoImage] = {}

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.BACKGROUND)
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.BACKGROUND)
        style.configure('TLabel', background=self.config.BACKGROUND, foreground='white',
                        font=(self.config.FONT_FAMILY, 11))
        style.configure('Status.TLabel', font=(self.config.FONT_FAMILY, 12), foreground='#ffd700')
        style.configure('TButton', font=(self.config.FONT_FAMILY, 10, 'bold'))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)

        self.score_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.score_label.pack(pady=(0, 5))

        self.turn_label = ttk.Label(main_frame, text="")
        self.turn_label.pack(pady=(0, 10))

        board_frame = ttk.Frame(main_frame)
        board_frame.pack()

        self._photos["blank"] = ImageTk.PhotoImage(
            Image.new("RGBA", (self.config.CELL_SIZE_PX, self.config.CELL_SIZE_PX), (0, 0, 0, 0))
        )

        self.board_cells = []
        for row in range(3):
            row_cells = []
            for col in range(3):
                cell = tk.Button(
                    board_frame,
                    image=self._photos["blank"],
                    width=self.config.CELL_SIZE_PX,
                    height=self.config.CELL_SIZE_PX,
                    bg=self.config.CELL_BG,
                    activebackground=self.config.CELL_BG,
                    relief='ridge',
                    borderwidth=2,
                    command=lambda r=row, c=col: self._on_cell_click(r, c)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=(15, 0))

        ttk.Button(control_frame, text="New Game", width=12,
                   command=self._show_setup_dialog).pack(side=tk.LEFT, padx=5)
        ttk.Button(control_frame, text="Quit", width=12,
                   command=self._quit).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== GAME FLOW ====================

    def new_game(self, player1: str, player2: str, starting_x: str, vs_computer: bool):
        """Configure a new game (scores reset) and start its first round."""
        self._cancel_computer_move()
        self.engine.configure_game(player1, player2, starting_x, vs_computer)
        self._after_round_started()

    def start_with_defaults(self):
        self._cancel_computer_move()
        self.engine.set_default_settings()
        self._after_round_started()

    def _start_round(self):
        self._cancel_computer_move()
        self.engine.start_round()
        self._after_round_started()

    def _after_round_started(self):
        self._clear_board_display()
        self._update_labels()
        self._schedule_computer_move()

    def _on_cell_click(self, row: int, col: int):
        """Handle a click on a board cell."""
        if self.engine.is_round_over or self.engine.is_computer_turn():
            return
        self._play(row, col)

    def _play(self, row: int, col: int):
        """Apply one move and move the round forward."""
        symbol = self.engine.current_symbol()
        if not self.engine.apply_move(row, col):
            return

        self._draw_mark(row, col, symbol)
        self.engine.switch_turn()
        result = self.engine.evaluate_round()
        self._update_labels()

        if result.status == RoundStatus.ONGOING:
            self._schedule_computer_move()
        else:
            self._finish_round(result)

    def _finish_round(self, result: RoundResult):
        """Show the result, hand X to the other player and start again."""
        if result.status == RoundStatus.WINNER:
            self._highlight_line(result)
            message = f"{self.engine.get_winner_name(result.symbol)} wins!"
        else:
            message = "It's a draw!"

        self.root.update_idletasks()
        messagebox.showinfo("Round Over", message, parent=self.root)

        self.engine.switch_starting_player()
        self._start_round()

    def _schedule_computer_move(self):
        if self.engine.is_computer_turn():
            self._computer_job = self.root.after(
                self.config.COMPUTER_MOVE_DELAY_MS, self._computer_move
            )

    def _cancel_computer_move(self):
        if self._computer_job is not None:
            self.root.after_cancel(self._computer_job)
            self._computer_job = None

    def _computer_move(self):
        self._computer_job = None
        if not self.engine.is_computer_turn():
            return
        row, col = self.engine.compute_computer_move()
        self._play(row, col)

    # ==================== DRAWING ====================

    def _photo(self, key, image: Image.Image) -> ImageTk.PhotoImage:
        if key not in self._photos:
            self._photos[key] = ImageTk.PhotoImage(image)
        return self._photos[key]

    def _draw_mark(self, row: int, col: int, symbol: Cell):
        photo = self._photo(symbol, self.renderer.mark(symbol))
        self.board_cells[row][col].configure(image=photo)

    def _highlight_line(self, result: RoundResult):
        line = result.line
        for row, col in line.cells():
            key = (line.symbol, line.line_type, line.index, row, col)
            image = self.renderer.highlighted_mark(line.symbol, line.line_type, line.index, row, col)
            self.board_cells[row][col].configure(
                image=self._photo(key, image),
                bg=self.config.CELL_BG_WIN
            )

    def _clear_board_display(self):
        for row in range(3):
            for col in range(3):
                self.board_cells[row][col].configure(
                    image=self._photos["blank"],
                    bg=self.config.CELL_BG
                )

    def _update_labels(self):
        """Update turn and score labels."""
        players = self.engine.players
        if players is None:
            return

        self.score_label.configure(
            text=f"{players.player1_name}: {self.engine.player1_score}   "
                 f"{players.player2_name}: {self.engine.player2_score}"
        )
        self.turn_label.configure(
            text=f"Turn: {self.engine.current_turn_name()} ({self.engine.current_symbol().value})"
        )

    # ==================== WINDOW ====================

    def _show_setup_dialog(self):
        PlayerSetupDialog(self.root, self.new_game, self.config, self.game_config)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_computer_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """
        Run the UI main loop.

        An engine that was configured beforehand keeps its players;
        otherwise a default game is started.
        """
        if self.engine.players is None:
            self.start_with_defaults()
        else:
            self._after_round_started()
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   Tic-Tac-Toe")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
