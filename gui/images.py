"""
Mark images for the TicTacToe board.
Draws X, O and the winning-line overlays with Pillow.
"""

from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from logic.game_state import Cell
from logic.win_checker import LineType
from .config import UIConfig


class MarkRenderer:
    """
    Renders the board marks as RGBA images.

    Cell images are CELL_SIZE_PX square; line overlays cover the
    whole board. Images are built once and cached.
    """

    def __init__(self, config: Optional[UIConfig] = None):
        self.config = config or UIConfig()
        self._cache: Dict[object, Image.Image] = {}

    def mark(self, symbol: Cell) -> Image.Image:
        """
        Get the image for a placed symbol.

        Raises:
            ValueError: If symbol is EMPTY.
        """
        if symbol == Cell.EMPTY:
            raise ValueError("EMPTY cells have no image")

        if symbol not in self._cache:
            if symbol == Cell.X:
                self._cache[symbol] = self._draw_x()
            else:
                self._cache[symbol] = self._draw_o()
        return self._cache[symbol]

    def winning_line(self, line_type: LineType, index: int) -> Image.Image:
        """Get the board-sized overlay for a winning line."""
        key = (line_type, index)
        if key not in self._cache:
            self._cache[key] = self._draw_line(*self.line_endpoints(line_type, index))
        return self._cache[key]

    def line_endpoints(self, line_type: LineType, index: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """
        Pixel endpoints of a winning line on the board.

        Horizontal and vertical lines run through the middle of their
        row or column; diagonal 0 goes top-left to bottom-right and
        diagonal 1 bottom-left to top-right.
        """
        size = self.config.BOARD_SIZE_PX
        cell = self.config.CELL_SIZE_PX
        pad = self.config.MARK_PADDING // 2
        middle = index * cell + cell // 2

        if line_type == LineType.HORIZONTAL:
            return (pad, middle), (size - pad, middle)
        if line_type == LineType.VERTICAL:
            return (middle, pad), (middle, size - pad)
        if index == 0:
            return (pad, pad), (size - pad, size - pad)
        return (pad, size - pad), (size - pad, pad)

    def _blank(self, size: int) -> Image.Image:
        return Image.new("RGBA", (size, size), (0, 0, 0, 0))

    def _draw_x(self) -> Image.Image:
        size = self.config.CELL_SIZE_PX
        pad = self.config.MARK_PADDING
        image = self._blank(size)
        draw = ImageDraw.Draw(image)
        draw.line([(pad, pad), (size - pad, size - pad)],
                  fill=self.config.X_COLOR, width=self.config.MARK_WIDTH)
        draw.line([(pad, size - pad), (size - pad, pad)],
                  fill=self.config.X_COLOR, width=self.config.MARK_WIDTH)
        return image

    def _draw_o(self) -> Image.Image:
        size = self.config.CELL_SIZE_PX
        pad = self.config.MARK_PADDING
        image = self._blank(size)
        draw = ImageDraw.Draw(image)
        draw.ellipse([pad, pad, size - pad, size - pad],
                     outline=self.config.O_COLOR, width=self.config.MARK_WIDTH)
        return image

    def _draw_line(self, start: Tuple[int, int], end: Tuple[int, int]) -> Image.Image:
        image = self._blank(self.config.BOARD_SIZE_PX)
        draw = ImageDraw.Draw(image)
        draw.line([start, end], fill=self.config.LINE_COLOR, width=self.config.WIN_LINE_WIDTH)
        return image

    def line_segment(self, line_type: LineType, index: int, row: int, col: int) -> Image.Image:
        """
        The part of a winning-line overlay that falls on one cell.

        Tk buttons each show their own image, so the overlay is cut
        into cell-sized pieces and composited onto the marks.
        """
        cell = self.config.CELL_SIZE_PX
        overlay = self.winning_line(line_type, index)
        return overlay.crop((col * cell, row * cell, (col + 1) * cell, (row + 1) * cell))

    def highlighted_mark(self, symbol: Cell, line_type: LineType, index: int,
                         row: int, col: int) -> Image.Image:
        """A cell's mark with its piece of the winning line drawn on top."""
        image = self.mark(symbol).copy()
        image.alpha_composite(self.line_segment(line_type, index, row, col))
        return image
