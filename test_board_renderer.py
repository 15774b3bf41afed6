"""
Tests for the OpenCV board renderer and keyboard navigation.
"""

import numpy as np
import pytest

from logic.game_engine import GameEngine
from logic.game_state import Mode
from view.board_renderer import BoardRenderer, move_cursor, status_text, mode_text
from view.config import ViewConfig


@pytest.fixture
def renderer():
    return BoardRenderer(ViewConfig())


def cell_region(image, renderer, index):
    cell_size = renderer.config.CELL_OUTPUT_SIZE
    row, col = divmod(index, 3)
    pad = renderer.config.GRID_WIDTH + 10
    return image[
        row * cell_size + pad:(row + 1) * cell_size - pad,
        col * cell_size + pad:(col + 1) * cell_size - pad
    ]


def test_render_shape(renderer):
    image = renderer.render(GameEngine().snapshot())
    width, height = renderer.image_size

    assert image.shape == (height, width, 3)
    assert image.dtype == np.uint8


def test_marks_change_only_their_cell(renderer):
    engine = GameEngine()
    empty = renderer.render(engine.snapshot())

    engine.apply_move(4)
    with_x = renderer.render(engine.snapshot())

    assert not np.array_equal(cell_region(empty, renderer, 4), cell_region(with_x, renderer, 4))
    assert np.array_equal(cell_region(empty, renderer, 0), cell_region(with_x, renderer, 0))


def test_winning_cells_are_highlighted(renderer):
    engine = GameEngine()
    for cell in (0, 3, 1, 4, 2):
        engine.apply_move(cell)

    image = renderer.render(engine.snapshot())
    # Corner pixel of a winning cell vs a losing one
    pad = renderer.config.GRID_WIDTH + 2
    cell_size = renderer.config.CELL_OUTPUT_SIZE

    assert tuple(image[pad, pad]) == renderer.config.WIN_CELL_COLOR
    assert tuple(image[cell_size + pad, pad]) == renderer.config.CELL_COLOR


@pytest.mark.parametrize("x, y, expected", [
    (0, 0, 0),
    (149, 149, 0),
    (150, 0, 1),
    (449, 0, 2),
    (0, 300, 6),
    (225, 225, 4),
    (449, 449, 8),
    (450, 10, None),
    (10, 500, None),    # status strip
    (-1, 10, None),
])
def test_cell_at(renderer, x, y, expected):
    assert renderer.cell_at(x, y) == expected


@pytest.mark.parametrize("index, direction, expected", [
    (4, "up", 1),
    (4, "down", 7),
    (4, "left", 3),
    (4, "right", 5),
    (0, "up", 0),
    (0, "left", 0),
    (2, "right", 2),
    (3, "left", 3),
    (5, "right", 5),
    (8, "down", 8),
    (6, "down", 6),
    (4, "sideways", 4),
])
def test_move_cursor(index, direction, expected):
    assert move_cursor(index, direction) == expected


def test_status_text():
    engine = GameEngine()
    assert status_text(engine.snapshot()) == "Turn: X"

    engine.apply_move(0)
    assert status_text(engine.snapshot()) == "Turn: O"

    for cell in (3, 1, 4, 2):
        engine.apply_move(cell)
    assert status_text(engine.snapshot()) == "X wins!"


def test_mode_text():
    assert mode_text(Mode.HUMAN) == "vs Friend"
    assert mode_text(Mode.CPU) == "vs CPU"
