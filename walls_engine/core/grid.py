from typing import Optional, Tuple

class WallGrid:
    """
    Index math for a w x h board and its flat wall-segment numbering.

    Walls are numbered vertical segments first ((w+1) per row, row-major),
    then horizontal segments (w per row, h+1 rows). Every function here is
    pure; out-of-range indices are a caller error and raise IndexError.
    """
    # Direction bitmask constants
    BLANK = 0x00
    RIGHT = 0x01
    UP    = 0x02
    LEFT  = 0x04
    DOWN  = 0x08

    ALL_DIRECTIONS = LEFT | RIGHT | UP | DOWN

    # Order used by random steps and by cell_walls()
    DIRECTIONS = (LEFT, RIGHT, UP, DOWN)

    # Direction Helpers
    DX = {LEFT: -1, RIGHT: 1, UP: 0, DOWN: 0}
    DY = {LEFT: 0, RIGHT: 0, UP: -1, DOWN: 1}
    OPPOSITE = {LEFT: RIGHT, RIGHT: LEFT, UP: DOWN, DOWN: UP}
    NAMES = {LEFT: "L", RIGHT: "R", UP: "U", DOWN: "D"}

    # The six masks a solved cell may hold
    PAIRS = frozenset((
        LEFT | RIGHT, LEFT | UP, LEFT | DOWN,
        RIGHT | UP, RIGHT | DOWN, UP | DOWN,
    ))

    __slots__ = ('width', 'height', 'cell_count', 'vertical_count', 'wall_count')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cell_count = width * height
        self.vertical_count = (width + 1) * height
        self.wall_count = self.vertical_count + width * (height + 1)

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_coords(self, cell: int) -> Tuple[int, int]:
        self._check_cell(cell)
        return cell % self.width, cell // self.width

    def cell_to_wall(self, cell: int, direction: int) -> int:
        """Wall segment on the given side of a cell."""
        self._check_cell(cell)
        w, h = self.width, self.height
        x = cell % w
        y = cell // w
        if direction == self.LEFT:
            return (w + 1) * y + x
        if direction == self.RIGHT:
            return (w + 1) * y + x + 1
        if direction == self.UP:
            return (w + 1) * h + w * y + x
        if direction == self.DOWN:
            return (w + 1) * h + w * y + x + w
        raise ValueError(f"Unknown direction {direction!r}")

    def wall_to_cell(self, wall: int, direction: int) -> Optional[int]:
        """
        Cell that sees `wall` on its `direction` side, or None when that
        side of the wall is outside the grid.

        Vertical walls only answer LEFT/RIGHT, horizontal walls UP/DOWN;
        asking the other axis also yields None.
        """
        if not 0 <= wall < self.wall_count:
            raise IndexError(f"Wall {wall} out of bounds")
        if direction not in self.DX:
            raise ValueError(f"Unknown direction {direction!r}")

        w, h = self.width, self.height
        if self.is_vertical(wall):
            x = wall % (w + 1)
            y = wall // (w + 1)
            # The cell whose LEFT side is this wall sits to its right.
            if direction == self.LEFT:
                return y * w + x if x < w else None
            if direction == self.RIGHT:
                return y * w + (x - 1) if x > 0 else None
            return None

        x = (wall - self.vertical_count) % w
        y = (wall - self.vertical_count) // w
        if direction == self.UP:
            return y * w + x if y < h else None
        if direction == self.DOWN:
            return (y - 1) * w + x if y > 0 else None
        return None

    def wall_cells(self, wall: int) -> Tuple[Optional[int], Optional[int]]:
        """
        The two cells a wall separates: (left, right) for vertical walls,
        (upper, lower) for horizontal ones. Boundary sides are None.
        """
        if self.is_vertical(wall):
            return self.wall_to_cell(wall, self.RIGHT), self.wall_to_cell(wall, self.LEFT)
        return self.wall_to_cell(wall, self.DOWN), self.wall_to_cell(wall, self.UP)

    def is_vertical(self, wall: int) -> bool:
        return wall < self.vertical_count

    def is_boundary_wall(self, wall: int) -> bool:
        a, b = self.wall_cells(wall)
        return a is None or b is None

    def cell_walls(self, cell: int) -> Tuple[int, int, int, int]:
        """Wall indices around a cell, in DIRECTIONS order (L, R, U, D)."""
        return tuple(self.cell_to_wall(cell, d) for d in self.DIRECTIONS)

    def neighbor(self, cell: int, direction: int) -> Optional[int]:
        x, y = self.get_coords(cell)
        nx, ny = x + self.DX[direction], y + self.DY[direction]
        if self.in_bounds(nx, ny):
            return ny * self.width + nx
        return None

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_boundary(self, x: int, y: int) -> bool:
        return x == 0 or x == self.width - 1 or y == 0 or y == self.height - 1

    def exit_direction(self, x: int, y: int) -> int:
        """First of L, R, U, D that leads off the grid from (x, y)."""
        if x == 0:
            return self.LEFT
        if x == self.width - 1:
            return self.RIGHT
        if y == 0:
            return self.UP
        if y == self.height - 1:
            return self.DOWN
        raise ValueError(f"Cell ({x}, {y}) is not on the boundary")

    @classmethod
    def direction_between(cls, x1: int, y1: int, x2: int, y2: int) -> int:
        dx, dy = x2 - x1, y2 - y1
        for d in cls.DIRECTIONS:
            if cls.DX[d] == dx and cls.DY[d] == dy:
                return d
        raise ValueError(f"({x1}, {y1}) and ({x2}, {y2}) are not adjacent")

    @staticmethod
    def popcount(mask: int) -> int:
        return bin(mask & WallGrid.ALL_DIRECTIONS).count("1")

    def _check_cell(self, cell: int):
        if not 0 <= cell < self.cell_count:
            raise IndexError(f"Cell {cell} out of bounds")
