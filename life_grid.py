# life_grid.py
import numpy as np

# =============================================================================
# CONFIG
# =============================================================================
DEFAULT_ROWS = 50
DEFAULT_COLUMNS = 50
DEFAULT_ALIVE_PROBABILITY = 0.15

# Moore neighborhood as (d_row, d_col)
NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

PATTERNS = {
    "block": [(0, 0), (0, 1), (1, 0), (1, 1)],
    "blinker": [(0, 0), (0, 1), (0, 2)],
    "glider": [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
}

class ConfigError(ValueError):
    pass

class GridConfig:
    """
    Startup parameters for a grid. Passed to initialize(); nothing in this
    module reads the DEFAULT_* constants after construction.
    """
    def __init__(self, rows=DEFAULT_ROWS, columns=DEFAULT_COLUMNS,
                 alive_probability=DEFAULT_ALIVE_PROBABILITY, seed=None):
        self.rows = rows
        self.columns = columns
        self.alive_probability = alive_probability
        self.seed = seed

    def validate(self):
        for name in ("rows", "columns"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
                raise ConfigError(f"{name} must be an integer, got {v!r}")
            if v < 1:
                raise ConfigError(f"{name} must be >= 1, got {v}")
        p = self.alive_probability
        if isinstance(p, bool) or not isinstance(p, (int, float, np.floating)):
            raise ConfigError(f"alive_probability must be a number, got {p!r}")
        if not 0.0 <= float(p) <= 1.0:
            raise ConfigError(f"alive_probability must be within [0, 1], got {p}")
        return self

    def __repr__(self):
        return (f"GridConfig(rows={self.rows}, columns={self.columns}, "
                f"alive_probability={self.alive_probability}, seed={self.seed})")

# =============================================================================
# Grid (double buffered)
# =============================================================================
class Grid:
    def __init__(self, rows: int, columns: int):
        self.rows = int(rows)
        self.columns = int(columns)
        shape = (self.rows, self.columns)
        self.buffers = [np.zeros(shape, dtype=np.int8), np.zeros(shape, dtype=np.int8)]
        self.ages = [np.zeros(shape, dtype=np.int32), np.zeros(shape, dtype=np.int32)]
        self.cur_idx = 0
        self.generation = 0

    @classmethod
    def from_cells(cls, rows, columns, cells):
        grid = cls(rows, columns)
        for r, c in cells:
            grid.alive[r % grid.rows, c % grid.columns] = 1
        return grid

    @property
    def alive(self) -> np.ndarray:
        return self.buffers[self.cur_idx]

    @property
    def age(self) -> np.ndarray:
        return self.ages[self.cur_idx]

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self.alive))

    def is_alive(self, row, col) -> bool:
        return bool(self.alive[row, col])

    def age_at(self, row, col) -> int:
        return int(self.age[row, col])

    def live_cells(self):
        rs, cs = np.nonzero(self.alive)
        return [(int(r), int(c)) for r, c in zip(rs, cs)]

    def snapshot(self):
        """
        Read-only (alive, age) views of the current generation. Valid until
        the next step after this one: buffers are reused every other step, so
        copy the arrays to keep them longer.
        """
        alive = self.alive.view()
        age = self.age.view()
        alive.flags.writeable = False
        age.flags.writeable = False
        return alive, age

    def __repr__(self):
        return (f"Grid(rows={self.rows}, columns={self.columns}, "
                f"generation={self.generation}, population={self.population})")

def initialize(config: GridConfig) -> Grid:
    config.validate()
    grid = Grid(config.rows, config.columns)
    rng = np.random.default_rng(config.seed)
    draws = rng.random((grid.rows, grid.columns))
    grid.alive[...] = (draws < float(config.alive_probability)).astype(np.int8)
    return grid

def place_pattern(grid: Grid, name: str, row: int, col: int) -> Grid:
    for dr, dc in PATTERNS[name]:
        grid.alive[(row + dr) % grid.rows, (col + dc) % grid.columns] = 1
    return grid

# =============================================================================
# Rule
# =============================================================================
def count_live_neighbors(grid: Grid, row: int, col: int) -> int:
    g = grid.alive
    count = 0
    for dr, dc in NEIGHBOR_OFFSETS:
        # each axis wraps on its own extent
        if g[(row + dr) % grid.rows, (col + dc) % grid.columns]:
            count += 1
    return count

def step_cell(grid: Grid, row: int, col: int) -> bool:
    n = count_live_neighbors(grid, row, col)
    if grid.alive[row, col]:
        return n == 2 or n == 3
    return n == 3

def neighbor_counts(alive: np.ndarray) -> np.ndarray:
    g = alive.astype(np.int8, copy=False)
    N  = np.roll(g,  1, axis=0)
    S  = np.roll(g, -1, axis=0)
    E  = np.roll(g, -1, axis=1)
    W  = np.roll(g,  1, axis=1)
    NE = np.roll(N, -1, axis=1)
    NW = np.roll(N,  1, axis=1)
    SE = np.roll(S, -1, axis=1)
    SW = np.roll(S,  1, axis=1)
    return N + S + E + W + NE + NW + SE + SW

def step(grid: Grid) -> Grid:
    """
    Advance one generation. Next states are computed from the front buffer
    only and written into the back buffer, then the two are swapped.
    """
    g = grid.alive
    n = neighbor_counts(g)
    out_idx = 1 - grid.cur_idx

    new_g = grid.buffers[out_idx]
    new_g[...] = (((g == 1) & ((n == 2) | (n == 3))) | ((g == 0) & (n == 3))).astype(np.int8)

    new_age = grid.ages[out_idx]
    np.add(grid.age, 1, out=new_age)
    new_age[new_g == 0] = 0

    grid.cur_idx = out_idx
    grid.generation += 1
    return grid
