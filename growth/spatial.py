"""
Uniform-grid spatial index over occupants.

The canvas is cut into resolution x resolution cells laid out row by row in a
flat list, so a cell is addressed by a single integer id:

    -------------------------
    | 0 | 0 | 1 | 2 | 3 | 4 |
    | 5 | 6 | 7 | 8 | 9 | . |
    | . |   |   |   |   |   |
    -------------------------

Ids are the row-major position shifted down by one, with the first two cells
sharing id 0. Neighbour queries scan the query cell and the eight cells around
it, so an occupant whose center sits just across a cell border is still found:

    ----------------------
    |  |  |  |  |  |  |  |
    |xx|xx|xx|  |  |  |  |
    |xx|oo|xx|  |  |  |  |
    |xx|xx|xx|  |  |  |  |
    ----------------------

Only centers are indexed. An occupant whose radius is larger than a cell can be
missed when its center is two or more cells away from the query cell even though
its body reaches the query point. Pick `resolution` so typical occupant radii are
about one cell wide.
"""

import math
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from .errors import ConfigurationError, OutOfBoundsError
from .profiling import profile
from .shapes import Bounds
from .vector import Point

T = TypeVar('T')


class SpatialGrid(Generic[T]):
    def __init__(self, bounds: Bounds, resolution: int):
        if int(resolution) != resolution or resolution < 1:
            raise ConfigurationError(f"grid resolution must be a positive integer, got {resolution}")

        self.bounds = bounds.validate()
        self.resolution = int(resolution)
        self._cells: List[List[T]] = [[] for _ in range(self.resolution ** 2)]
        self._count = 0
        self._max_extent = 0.0

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    @property
    def cell_width(self) -> float:
        return self.bounds.width / self.resolution

    @property
    def cell_height(self) -> float:
        return self.bounds.height / self.resolution

    @property
    def max_extent_radius(self) -> float:
        """Largest extent radius ever inserted; never shrinks on remove."""
        return self._max_extent

    def _cell_coords(self, point: Point) -> Tuple[int, int]:
        n = self.resolution
        col = math.floor((point.x - self.bounds.x) / self.bounds.width * n)
        row = math.floor((point.y - self.bounds.y) / self.bounds.height * n)
        # Points on the right/bottom edge belong to the last column/row.
        return min(max(col, 0), n - 1), min(max(row, 0), n - 1)

    def _cell_id(self, col: int, row: int) -> int:
        return max(row * self.resolution + col - 1, 0)

    def index(self, point: Point) -> int:
        if not self.bounds.contains(point):
            raise OutOfBoundsError(point)
        return self._cell_id(*self._cell_coords(point))

    def _neighbouring_cells(self, point: Point) -> List[int]:
        col, row = self._cell_coords(point)
        n = self.resolution
        ids = []
        for r in range(row - 1, row + 2):
            if r < 0 or r >= n:
                continue
            for c in range(col - 1, col + 2):
                if c < 0 or c >= n:
                    continue
                cell_id = self._cell_id(c, r)
                if cell_id not in ids:
                    ids.append(cell_id)
        return ids

    def insert(self, occupant: T) -> int:
        """Append `occupant` to the cell of its center and return the cell id."""
        center = occupant.center()
        if not self.bounds.contains(center):
            raise OutOfBoundsError(occupant, "cannot insert outside grid bounds")

        cell_id = self._cell_id(*self._cell_coords(center))
        self._cells[cell_id].append(occupant)
        self._count += 1
        self._max_extent = max(self._max_extent, occupant.extent_radius())
        return cell_id

    def remove(self, occupant: T):
        center = occupant.center()
        if not self.bounds.contains(center):
            return

        cell = self._cells[self._cell_id(*self._cell_coords(center))]
        for i, item in enumerate(cell):
            if item == occupant:
                del cell[i]
                self._count -= 1
                return

    @profile
    def neighbors(self, occupant: T, max_distance: Optional[float] = None) -> List[T]:
        """
        Occupants in the 3x3 block of cells around the query's center, optionally
        limited to those whose center is closer than `max_distance`.
        """
        center = occupant.center()
        if not self.bounds.contains(center):
            raise OutOfBoundsError(occupant)

        found = []
        for cell_id in self._neighbouring_cells(center):
            for item in self._cells[cell_id]:
                if max_distance is None or center.distance_to(item.center()) < max_distance:
                    found.append(item)
        return found

    def cell(self, cell_id: int) -> List[T]:
        return list(self._cells[cell_id])

    def items(self) -> List[T]:
        return [item for cell in self._cells for item in cell]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items())

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"SpatialGrid({self.resolution}x{self.resolution}, {self._count} occupants)"
