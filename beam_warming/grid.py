"""
uniform periodic 1d mesh on [0, 1) and the ghost-padded cell arrays living on it
"""

import dataclasses
import numpy as np


@dataclasses.dataclass(frozen=True)
class Grid:
    """
    args:
        nx      number of cells
        ns      number of ghost cells on either side of the interior
    attributes:
        dx      cell width, domain length is fixed at 1
        x       left-edge aligned cell coordinates (nx,)
    """

    nx: int
    ns: int = 1

    def __post_init__(self):
        if isinstance(self.nx, bool) or not isinstance(self.nx, (int, np.integer)):
            raise TypeError(f"nx must be an integer, got {self.nx!r}")
        if self.nx <= 0:
            raise ValueError(f"nx must be positive, got {self.nx}")
        if self.ns < 1:
            raise ValueError(
                f"stencil half-width must be at least 1, got {self.ns}"
            )
        x = np.arange(self.nx) / self.nx  # i * dx
        x.flags.writeable = False
        object.__setattr__(self, "x", x)

    @property
    def dx(self) -> float:
        return 1.0 / self.nx

    @property
    def size(self) -> int:
        """
        length of a ghost-padded cell array
        """
        return self.nx + 2 * self.ns

    def allocate(self) -> "Field":
        return Field(self, np.zeros(self.size))


def build(nx: int, ns: int = 1) -> Grid:
    return Grid(nx=nx, ns=ns)


class Field:
    """
    cell-centered values with ns ghost cells on either side
    logical cell i lives at physical position ns + i, so ghosts are the logical
    cells -ns..-1 and nx..nx+ns-1
    """

    def __init__(self, grid: Grid, data: np.ndarray):
        if data.shape != (grid.size,):
            raise ValueError(
                f"Expected a buffer of shape ({grid.size},), got {data.shape}"
            )
        self.grid = grid
        self.data = data

    def offset(self, i: int) -> int:
        """
        args:
            i   logical cell index, -ns <= i < nx + ns
        returns:
            position of cell i in self.data
        """
        return self.grid.ns + i

    def __getitem__(self, i: int) -> float:
        return self.data[self.offset(i)]

    def __setitem__(self, i: int, value: float):
        self.data[self.offset(i)] = value

    def shifted(self, k: int) -> np.ndarray:
        """
        args:
            k   stencil shift, -ns <= k <= ns
        returns:
            view of the logical cells k..nx-1+k (nx,)
        """
        start = self.offset(k)
        return self.data[start : start + self.grid.nx]

    @property
    def interior(self) -> np.ndarray:
        return self.shifted(0)

    @interior.setter
    def interior(self, values: np.ndarray):
        self.interior[...] = values

    def sum(self) -> float:
        """
        sum over the owned cells only
        """
        return float(np.sum(self.interior))

    def copy(self) -> "Field":
        return Field(self.grid, self.data.copy())
