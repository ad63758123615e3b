"""
writes solution snapshots to self-describing hdf5 files, one file per timestep
"""

import os
import h5py
import numpy as np


def snapshot_filename(nx: int, step: int) -> str:
    return f"beam_warming.{nx:03d}.{step:04d}.h5"


class SnapshotWriter:
    """
    args:
        directory   where snapshot files are written, created if missing
    """

    def __init__(self, directory: str = "."):
        self.directory = directory
        self.written = []
        os.makedirs(self.directory, exist_ok=True)

    def __call__(self, step: int, x: np.ndarray, rho: np.ndarray) -> str:
        """
        args:
            step    timestep index
            x       cell coordinates (nx,)
            rho     interior density (nx,)
        returns:
            path of the written file
        """
        path = os.path.join(self.directory, snapshot_filename(len(x), step))
        with h5py.File(path, "w") as f:
            f.attrs["scheme"] = "Beam-Warming"
            time = f.create_dataset(
                "time", data=np.array([step], dtype="i4"), maxshape=(None,)
            )
            time.make_scale("time")
            xs = f.create_dataset("x", data=np.asarray(x, dtype="f8"))
            xs.make_scale("x")
            rhos = f.create_dataset(
                "rho",
                data=np.asarray(rho, dtype="f8").reshape(1, -1),
                maxshape=(None, len(x)),
            )
            rhos.dims[0].attach_scale(time)
            rhos.dims[1].attach_scale(xs)
        self.written.append(path)
        return path


def read_snapshot(path: str) -> tuple:
    """
    args:
        path    file written by SnapshotWriter
    returns:
        step, x (nx,), rho (nx,)
    """
    with h5py.File(path, "r") as f:
        step = int(f["time"][0])
        x = f["x"][...]
        rho = f["rho"][0, :]
    return step, x, rho
