"""
Player setup form for TicTacToe.
Asks for the two names, the computer option and who starts as X.
"""

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from logic.config import GameConfig
from .config import UIConfig


# Called with (player1_name, player2_name, starting_x_name, vs_computer)
SetupCallback = Callable[[str, str, str, bool], None]


class PlayerSetupDialog:
    """
    Modal form shown for "New Game".

    Ticking the computer box fixes the second name to the computer's;
    unticking it gives the field back with a default human name.
    """

    def __init__(
        self,
        parent: tk.Misc,
        on_ok: SetupCallback,
        ui_config: Optional[UIConfig] = None,
        game_config: Optional[GameConfig] = None
    ):
        self.ui_config = ui_config or UIConfig()
        self.game_config = game_config or GameConfig()
        self.on_ok = on_ok

        self.window = tk.Toplevel(parent)
        self.window.title(self.ui_config.SETUP_TITLE)
        self.window.resizable(False, False)
        self.window.transient(parent)

        self.name1_var = tk.StringVar(value=self.game_config.DEFAULT_PLAYER1_NAME)
        self.name2_var = tk.StringVar(value=self.game_config.DEFAULT_PLAYER2_NAME)
        self.computer_var = tk.BooleanVar(value=self.game_config.DEFAULT_VS_COMPUTER)
        self.starter_var = tk.IntVar(value=1)

        self._create_form()
        self._on_computer_toggled()

        self.window.protocol("WM_DELETE_WINDOW", self.window.destroy)
        self.window.grab_set()

    def _create_form(self):
        form = ttk.Frame(self.window, padding=15)
        form.pack(fill=tk.BOTH, expand=True)

        ttk.Label(form, text="Player 1:").grid(row=0, column=0, sticky=tk.W, pady=4)
        self.name1_entry = ttk.Entry(form, textvariable=self.name1_var, width=22)
        self.name1_entry.grid(row=0, column=1, pady=4)

        ttk.Label(form, text="Player 2:").grid(row=1, column=0, sticky=tk.W, pady=4)
        self.name2_entry = ttk.Entry(form, textvariable=self.name2_var, width=22)
        self.name2_entry.grid(row=1, column=1, pady=4)

        ttk.Checkbutton(
            form,
            text="Play against the computer",
            variable=self.computer_var,
            command=self._on_computer_toggled
        ).grid(row=2, column=0, columnspan=2, sticky=tk.W, pady=(8, 4))

        ttk.Label(form, text="Starts as X:").grid(row=3, column=0, sticky=tk.W, pady=4)
        starter_frame = ttk.Frame(form)
        starter_frame.grid(row=3, column=1, sticky=tk.W)
        ttk.Radiobutton(starter_frame, text="Player 1", value=1,
                        variable=self.starter_var).pack(side=tk.LEFT)
        ttk.Radiobutton(starter_frame, text="Player 2", value=2,
                        variable=self.starter_var).pack(side=tk.LEFT, padx=(8, 0))

        buttons = ttk.Frame(form)
        buttons.grid(row=4, column=0, columnspan=2, pady=(12, 0))
        ttk.Button(buttons, text="OK", command=self._on_ok).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons, text="Cancel", command=self.window.destroy).pack(side=tk.LEFT, padx=5)

        self.window.bind("<Return>", lambda _event: self._on_ok())
        self.window.bind("<Escape>", lambda _event: self.window.destroy())

    def _on_computer_toggled(self):
        if self.computer_var.get():
            self.name2_var.set(self.game_config.DEFAULT_PLAYER2_NAME)
            self.name2_entry.configure(state='disabled')
        else:
            self.name2_var.set(self.game_config.DEFAULT_HUMAN_PLAYER2_NAME)
            self.name2_entry.configure(state='normal')

    def _on_ok(self):
        player1 = self.name1_var.get()
        player2 = self.name2_var.get()
        starting_x = player1 if self.starter_var.get() == 1 else player2

        self.window.grab_release()
        self.window.destroy()
        self.on_ok(player1, player2, starting_x, self.computer_var.get())
