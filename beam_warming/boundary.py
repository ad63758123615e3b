"""
periodic boundary conditions for cell-centered and interface-centered arrays
"""

import numpy as np
from beam_warming.grid import Field


def enforce_full(field: Field):
    """
    copy the periodic image of the interior into the ghost cells
    args:
        field   Field, interior values are final
    overwrites:
        field ghost cells
    """
    nx = field.grid.nx
    for k in range(1, field.grid.ns + 1):
        field[-k] = field[nx - k]
        field[nx + k - 1] = field[k - 1]


def enforce_half(flux: np.ndarray):
    """
    close the interface array, the last interface is the image of the first
    args:
        flux    (nx + 1,), flux[1:] computed
    overwrites:
        flux[0]
    """
    flux[0] = flux[-1]
