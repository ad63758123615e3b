"""
Beam-Warming numerical flux for the linear advection equation
drho/dt + u drho/dx = 0
flux[j] lives on the interface between interior cells j - 1 and j
"""

import numpy as np
from beam_warming.boundary import enforce_half
from beam_warming.grid import Field


class BeamWarmingFlux:
    """
    second order upwind-biased flux, stable for |u * coef| <= 1
    args:
        u       constant advection velocity
        coef    dt / dx
    """

    # the u < 0 stencil reads two cells downstream of the interface
    stencil_width = 2

    def __init__(self, u: float, coef: float):
        self.u = float(u)
        self.coef = float(coef)

    @property
    def courant(self) -> float:
        return self.u * self.coef

    def __call__(self, rho: Field, flux: np.ndarray = None) -> np.ndarray:
        """
        args:
            rho     Field with up-to-date ghost cells
            flux    (nx + 1,) buffer to write into, allocated if None
        returns:
            flux    (nx + 1,)
        """
        if rho.grid.ns < self.stencil_width:
            raise ValueError(
                f"Beam-Warming needs {self.stencil_width} ghost cells, "
                f"the field has {rho.grid.ns}"
            )
        if flux is None:
            flux = np.empty(rho.grid.nx + 1)
        u, coef = self.u, self.coef
        # flux[1:] are the right interfaces of interior cells 0..nx-1
        if u >= 0:
            center, left = rho.shifted(0), rho.shifted(-1)
            flux[1:] = 0.5 * (
                u * (3 * center - left) - coef * u**2 * (center - left)
            )
        else:
            right, far_right = rho.shifted(1), rho.shifted(2)
            flux[1:] = 0.5 * (
                u * (3 * right - far_right) - coef * u**2 * (far_right - right)
            )
        enforce_half(flux)
        return flux
