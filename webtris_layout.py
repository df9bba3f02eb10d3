# webtris_layout.py
from dataclasses import dataclass
from typing import Dict

import pygame

from webtris_board import COLS, ROWS
from webtris_config import CONFIG

BUTTONS = ("start", "pause", "reset")


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    buttons: Dict[str, pygame.Rect]


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 160

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # Start / Pause / Reset stacked under the score read-outs
    btn_w, btn_h, gap = panel_w - 24, 30, 10
    buttons = {
        name: pygame.Rect(panel_x + 12, panel_y + 140 + i * (btn_h + gap), btn_w, btn_h)
        for i, name in enumerate(BUTTONS)
    }

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        buttons=buttons,
    )
