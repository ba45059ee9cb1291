import numpy as np
import pygame
import pytest

from life_render import (
    AGE_COLORS,
    AGE_SPAN,
    COLOR_BG,
    GridRenderer,
    age_color_idx,
    cell_quad,
    quad_to_rect,
)

def test_cell_quad_corners():
    assert cell_quad(0, 0, 50, 50) == pytest.approx((-1.0, 0.96, -0.96, 1.0))
    assert cell_quad(49, 49, 50, 50) == pytest.approx((0.96, -1.0, 1.0, -0.96))

def test_cell_quad_non_square_grid():
    left, bottom, right, top = cell_quad(1, 3, 4, 8)
    assert right - left == pytest.approx(2.0 / 8)
    assert top - bottom == pytest.approx(2.0 / 4)
    assert left == pytest.approx(-0.25)
    assert top == pytest.approx(0.5)

def test_quad_to_rect_tiles_window():
    assert quad_to_rect(cell_quad(0, 0, 50, 50), 500, 500) == pygame.Rect(0, 0, 10, 10)
    assert quad_to_rect(cell_quad(49, 49, 50, 50), 500, 500) == pygame.Rect(490, 490, 10, 10)
    assert quad_to_rect(cell_quad(2, 5, 4, 8), 800, 400) == pygame.Rect(500, 200, 100, 100)

def test_age_color_idx_range():
    n = len(AGE_COLORS)
    assert age_color_idx(0, n) == 0
    assert age_color_idx(1, n) == 0
    assert age_color_idx(AGE_SPAN + 1, n) == n - 1
    assert age_color_idx(10_000, n) == n - 1
    idxs = [age_color_idx(a, n) for a in range(1, AGE_SPAN + 2)]
    assert idxs == sorted(idxs)

def test_renderer_fills_live_cells_only():
    screen = pygame.Surface((40, 40))
    renderer = GridRenderer(screen, 4, 4)
    alive = np.zeros((4, 4), dtype=np.int8)
    age = np.zeros((4, 4), dtype=np.int32)
    alive[1, 2] = 1
    age[1, 2] = 1

    renderer.draw(alive, age)

    assert tuple(screen.get_at((25, 15)))[:3] == AGE_COLORS[0]
    assert tuple(screen.get_at((5, 5)))[:3] == COLOR_BG
    assert tuple(screen.get_at((15, 25)))[:3] == COLOR_BG
