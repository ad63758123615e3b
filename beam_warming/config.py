"""
run parameters of a Beam-Warming advection experiment, read from a json file of
the form {"nx": 100, "nt": 200, "dt": 1.0, "use_rk3": false, "u": 0.005}
"""

import dataclasses
import json
import os
import numpy as np


@dataclasses.dataclass(frozen=True)
class SimulationConfig:
    """
    args:
        nx          number of cells
        nt          number of timesteps
        dt          timestep size
        use_rk3     whether to use ssp rk3 instead of forward euler
        u           constant advection velocity
    """

    nx: int = 100
    nt: int = 200
    dt: float = 1.0
    use_rk3: bool = False
    u: float = 0.005

    def __post_init__(self):
        for name in ("nx", "nt"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
            object.__setattr__(self, name, int(value))
        for name in ("dt", "u"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a real number, got {value!r}")
            object.__setattr__(self, name, float(value))
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if not isinstance(self.use_rk3, bool):
            raise ValueError(f"use_rk3 must be a boolean, got {self.use_rk3!r}")

    @property
    def dx(self) -> float:
        return 1.0 / self.nx

    @property
    def coef(self) -> float:
        """
        dt / dx
        """
        return self.dt / self.dx

    @property
    def courant(self) -> float:
        return self.u * self.coef

    def replace(self, **overrides) -> "SimulationConfig":
        """
        returns a copy with every override that isn't None applied
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, params: dict) -> "SimulationConfig":
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = set(params) - known
        if unknown:
            raise ValueError(f"Unknown parameters: {', '.join(sorted(unknown))}")
        return cls(**params)


def load_config(path: str = None) -> SimulationConfig:
    """
    args:
        path    json parameter file, defaults are kept if None or missing
    returns:
        SimulationConfig
    """
    if path is None or not os.path.isfile(path):
        return SimulationConfig()
    with open(path, "r") as thisfile:
        params = json.load(thisfile)
    if not isinstance(params, dict):
        raise ValueError(f"{path} does not hold a key-value mapping")
    return SimulationConfig.from_dict(params)
