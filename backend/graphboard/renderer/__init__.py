from graphboard.renderer.board_renderer import BoardResult, render_to_board
from graphboard.renderer.svg_renderer import render_svg

__all__ = ["BoardResult", "render_to_board", "render_svg"]
