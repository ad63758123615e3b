"""
defines the AdvectionSolver class, a forward-stepping Beam-Warming finite difference
solver for
drho/dt + u drho/dx = 0
on the periodic unit interval
"""

import time
import numpy as np
from tqdm import tqdm
from beam_warming.boundary import enforce_full
from beam_warming.config import SimulationConfig
from beam_warming.flux import BeamWarmingFlux
from beam_warming.grid import Field, build
from beam_warming.initial_conditions import generate_ic
from beam_warming.integrate import Integrator


class AdvectionSolver(Integrator):
    """
    args:
        config          SimulationConfig, defaults if None
        u0              initial condition, keyword or callable function of x
        writer          callable (step, x, rho) receiving every snapshot, or None
        progress_bar    whether to print a progress bar in the loop
        verbose         whether to print (step, mass) after every step
    returns:
        self.snapshots: [{step: 0, t: 0.0, u: rho0}, ...]
    """

    def __init__(
        self,
        config: SimulationConfig = None,
        u0="square",
        writer=None,
        progress_bar: bool = False,
        verbose: bool = True,
    ):
        self.config = SimulationConfig() if config is None else config
        self.writer = writer
        self.progress_bar = progress_bar
        self.verbose = verbose

        # spatial discretization
        self.grid = build(self.config.nx, ns=BeamWarmingFlux.stencil_width)
        self.x = self.grid.x
        self.nt = self.config.nt
        self.dt = self.config.dt

        super().__init__(
            flux_scheme=BeamWarmingFlux(u=self.config.u, coef=self.config.coef),
            nx=self.grid.nx,
            coef=self.config.coef,
            use_rk3=self.config.use_rk3,
        )

        if abs(self.config.courant) > 1:
            print(
                f"WARNING: Courant number {self.config.courant} exceeds 1, expect",
                "growing oscillations.",
            )

        # initial condition
        if isinstance(u0, str):
            u0_arr = generate_ic(type=u0, x=self.x)
        elif callable(u0):
            u0_arr = np.asarray(u0(self.x), dtype="double")
        else:
            u0_arr = np.asarray(u0, dtype="double")
        if u0_arr.shape != (self.grid.nx,):
            raise ValueError(
                f"Initial condition has shape {u0_arr.shape}, "
                f"expected ({self.grid.nx},)"
            )

        # two time levels, old and new are handles into self.buffers
        self.buffers = np.zeros((2, self.grid.size))
        self.fields = (
            Field(self.grid, self.buffers[0]),
            Field(self.grid, self.buffers[1]),
        )
        self.old, self.new = 0, 1
        self.fields[self.old].interior = u0_arr
        enforce_full(self.fields[self.old])

        # timeseries
        self.step_count = 0
        self.snapshots = []
        self.mass_history = []
        self.snapshot()

    @property
    def field(self) -> Field:
        """
        the most recently completed time level
        """
        return self.fields[self.old]

    @property
    def rho(self) -> np.ndarray:
        return self.field.interior

    @property
    def t(self) -> float:
        return self.step_count * self.dt

    def swap(self):
        self.old, self.new = self.new, self.old

    def snapshot(self):
        """
        datalogging after every completed step, including step 0
        """
        mass = self.field.sum()
        self.mass_history.append(mass)
        self.snapshots.append(
            {"step": self.step_count, "t": self.t, "u": self.rho.copy()}
        )
        if self.verbose:
            print(f"{self.step_count:>6d} {mass:.8e}")
        if self.writer is not None:
            self.writer(self.step_count, self.x, self.rho.copy())

    def run(self):
        """
        step until step_count reaches nt
        overwrites:
            buffers, step_count, snapshots, mass_history
        """
        progress_bar = None
        if self.progress_bar:
            bar_format = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}]"
            progress_bar = tqdm(
                total=self.nt, initial=self.step_count, bar_format=bar_format
            )
        starting_time = time.time()
        while self.step_count < self.nt:
            self.step(self.fields[self.old], self.fields[self.new])
            self.swap()
            self.step_count += 1
            self.snapshot()
            if progress_bar is not None:
                progress_bar.update(1)
        if progress_bar is not None:
            progress_bar.close()
        self.solution_time = time.time() - starting_time
        return self

    def mass_drift(self) -> float:
        """
        largest deviation of the interior sum from its initial value, relative
        unless the initial sum is 0
        """
        history = np.asarray(self.mass_history)
        drift = np.max(np.abs(history - history[0]))
        if history[0] != 0:
            drift = drift / abs(history[0])
        return float(drift)

    def periodic_error(self, norm: str = "l1") -> float:
        """
        args:
            norm:   'l1', 'l2', or 'inf'
        returns:
            out:    norm of the difference between the last and first snapshot
        """
        approx = self.snapshots[-1]["u"]
        truth = self.snapshots[0]["u"]
        if norm == "l1":
            return np.sum(np.abs(approx - truth) * self.grid.dx)
        if norm == "l2":
            return np.sqrt(np.sum(np.power(approx - truth, 2)) * self.grid.dx)
        if norm == "inf":
            return np.max(np.abs(approx - truth))
        raise ValueError(f"Unknown norm '{norm}'")
