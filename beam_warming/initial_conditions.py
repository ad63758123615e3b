import numpy as np


def generate_ic(type: str, x: np.ndarray, **kwargs) -> np.ndarray:
    """
    args:
        type    'square', 'sinus' or 'composite'
        x       1d np array of cell coordinates (nx,)
        kwargs  passed to the profile, e.g. lower and upper for 'square'
    returns:
        initial density (nx,)
    """
    profiles = {
        "square": square,
        "sinus": sinus,
        "composite": composite,
    }
    if type not in profiles:
        raise ValueError(f"Unknown initial condition '{type}'")
    return profiles[type](x, **kwargs)


def square(x: np.ndarray, lower: float = 0.05, upper: float = 0.3) -> np.ndarray:
    """
    1 on the closed interval [lower, upper], 0 elsewhere
    """
    return np.where(np.logical_and(x >= lower, x <= upper), 1.0, 0.0)


def sinus(x: np.ndarray) -> np.ndarray:
    return np.cos(2 * np.pi * x)


def composite(x: np.ndarray) -> np.ndarray:
    # gaussian, square, triangle and ellipse side by side
    u = np.zeros(len(x))
    width = 0.0025
    beta = np.log(2) / 36 / width**2
    in_gauss = np.logical_and(x >= 0.1, x <= 0.2)
    u = np.where(
        in_gauss,
        (
            np.exp(-beta * (x - width - 0.15) ** 2)
            + np.exp(-beta * (x + width - 0.15) ** 2)
            + 4 * np.exp(-beta * (x - 0.15) ** 2)
        )
        / 6,
        u,
    )
    u = np.where(np.logical_and(x >= 0.3, x <= 0.4), 0.75, u)
    u = np.where(
        np.logical_and(x >= 0.5, x <= 0.6), 1 - np.abs(20 * (x - 0.55)), u
    )

    def ellipse(s):
        return np.sqrt(np.maximum(1 - (20 * (x - 0.75 - s)) ** 2, 0))

    in_ellipse = np.logical_and(x >= 0.7, x <= 0.8)
    u = np.where(
        in_ellipse, (ellipse(width) + ellipse(-width) + 4 * ellipse(0)) / 6, u
    )
    return u
