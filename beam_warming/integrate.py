import numpy as np
from beam_warming.boundary import enforce_full
from beam_warming.grid import Field


class Integrator:
    """
    advance a ghost-padded field one timestep with a flux-form update
    new = old - coef * (flux[j + 1] - flux[j])
    args:
        flux_scheme     callable (Field, flux buffer) -> flux (nx + 1,)
        nx              number of cells
        coef            dt / dx
        use_rk3         use the 3-stage ssp runge-kutta update instead of euler
    """

    def __init__(self, flux_scheme, nx: int, coef: float, use_rk3: bool = False):
        self.flux_scheme = flux_scheme
        self.coef = coef
        self.use_rk3 = use_rk3
        # one interface buffer shared by every stage
        self.flux = np.zeros(nx + 1)
        self.flux_evaluation_count = 0
        if use_rk3:
            self.step = self.ssprk3_step
        else:
            self.step = self.euler_step

    def flux_difference(self, u: Field) -> np.ndarray:
        """
        args:
            u       Field with up-to-date ghost cells
        returns:
            flux[j + 1] - flux[j] for every interior cell j (nx,)
        """
        self.flux_evaluation_count += 1
        self.flux_scheme(u, self.flux)
        return self.flux[1:] - self.flux[:-1]

    @staticmethod
    def _check_buffers(old: Field, new: Field):
        if np.shares_memory(old.data, new.data):
            raise ValueError("old and new time levels must not share memory")

    def euler_step(self, old: Field, new: Field):
        """
        1st order forward euler
        overwrites:
            new, ghost cells included
        """
        self._check_buffers(old, new)
        new.interior = old.interior - self.coef * self.flux_difference(old)
        enforce_full(new)

    def ssprk3_step(self, old: Field, new: Field):
        """
        3rd order strong stability preserving runge-kutta in shu-osher form,
        each stage is stored in new
        overwrites:
            new, ghost cells included
        """
        # stage 1
        self.euler_step(old, new)
        # stage 2
        dflux = self.flux_difference(new)
        new.interior = (3.0 * old.interior + new.interior - self.coef * dflux) / 4.0
        enforce_full(new)
        # stage 3
        dflux = self.flux_difference(new)
        new.interior = (old.interior + 2.0 * (new.interior - self.coef * dflux)) / 3.0
        enforce_full(new)
