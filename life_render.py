# life_render.py
import time
import numpy as np
import pygame

# =============================================================================
# OPTIONAL DEPENDENCIES (debug HUD)
# =============================================================================
try:
    import psutil
    HAS_PSUTIL = True
except ImportError:
    HAS_PSUTIL = False

# =============================================================================
# CONFIG
# =============================================================================
COLOR_BG = (10, 10, 15)

# newborn -> old
AGE_COLORS = [
    (0, 255, 128),
    (0, 220, 170),
    (0, 180, 220),
    (0, 120, 255),
    (120, 90, 255),
    (200, 80, 220),
    (255, 220, 0),
]
AGE_SPAN = 24  # generations until a cell reaches the last color

# =============================================================================
# Geometry
# =============================================================================
def cell_quad(row, col, rows, columns):
    """
    Normalized device coordinates of a cell, as (left, bottom, right, top).
    Columns run left to right, row 0 is the top edge.
    """
    w = 2.0 / float(columns)
    h = 2.0 / float(rows)
    left = col * w - 1.0
    right = (col + 1) * w - 1.0
    top = 1.0 - row * h
    bottom = 1.0 - (row + 1) * h
    return left, bottom, right, top

def quad_to_rect(quad, width, height) -> pygame.Rect:
    left, bottom, right, top = quad
    x0 = int(round((left + 1.0) * 0.5 * width))
    x1 = int(round((right + 1.0) * 0.5 * width))
    y0 = int(round((1.0 - top) * 0.5 * height))
    y1 = int(round((1.0 - bottom) * 0.5 * height))
    return pygame.Rect(x0, y0, max(1, x1 - x0), max(1, y1 - y0))

def age_color_idx(age: int, n: int) -> int:
    if n <= 1 or age <= 1:
        return 0
    idx = int((age - 1) * (n - 1) / AGE_SPAN)
    return min(n - 1, idx)

# =============================================================================
# Renderer
# =============================================================================
class GridRenderer:
    def __init__(self, screen, rows, columns, colors=None):
        self.screen = screen
        self.rows = rows
        self.columns = columns
        self.colors = list(colors or AGE_COLORS)
        w, h = screen.get_size()
        self.rects = [
            [quad_to_rect(cell_quad(r, c, rows, columns), w, h) for c in range(columns)]
            for r in range(rows)
        ]

    def draw(self, alive: np.ndarray, age: np.ndarray):
        self.screen.fill(COLOR_BG)
        n = len(self.colors)
        rs, cs = np.nonzero(alive)
        for r, c in zip(rs.tolist(), cs.tolist()):
            color = self.colors[age_color_idx(int(age[r, c]), n)]
            pygame.draw.rect(self.screen, color, self.rects[r][c])

# =============================================================================
# Debug HUD (optional)
# =============================================================================
class SystemStats:
    def __init__(self):
        self.have_psutil = HAS_PSUTIL
        self.last_poll = 0.0
        self.cpu = 0.0
        self.mem = 0.0
        if self.have_psutil:
            psutil.cpu_percent(interval=None)

    def poll(self, now):
        if now - self.last_poll < 1.0:
            return
        self.last_poll = now
        if self.have_psutil:
            self.cpu = float(psutil.cpu_percent(interval=None))
            self.mem = float(psutil.virtual_memory().percent)

class DebugHUD:
    def __init__(self, w, font_name="Consolas", font_size=16):
        self.w = w
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = (255, 220, 0)
        self.stats = SystemStats()

    def draw(self, screen, clock, grid, paused=False):
        self.stats.poll(time.time())

        lines = []
        lines.append("LIFE DEBUG" + ("  [paused]" if paused else ""))
        lines.append(f"FPS        : {clock.get_fps():6.1f}")
        lines.append(f"Generation : {grid.generation}")
        lines.append(f"Population : {grid.population}")
        if self.stats.have_psutil:
            lines.append(f"CPU %      : {self.stats.cpu:6.1f}")
            lines.append(f"Mem %      : {self.stats.mem:6.1f}")

        rendered = [self.font.render(s, True, self.color) for s in lines]
        max_w = max(s.get_width() for s in rendered) if rendered else 0
        x0 = self.w - max_w - 8
        y = 6
        for surf in rendered:
            screen.blit(surf, (x0, y))
            y += surf.get_height() + 2
