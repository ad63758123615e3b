import json
import os
import numpy as np
import pytest
from beam_warming.config import SimulationConfig, load_config

test_directory = "data/test_configs/"


@pytest.fixture(scope="module", autouse=True)
def cleanup(request):
    """
    Remove configs written by tests
    """
    os.makedirs(test_directory, exist_ok=True)

    def remove_test_dir():
        for f in os.listdir(test_directory):
            os.remove(os.path.join(test_directory, f))
        os.rmdir(test_directory)

    request.addfinalizer(remove_test_dir)


def write_config(name: str, params) -> str:
    path = os.path.join(test_directory, name)
    with open(path, "w") as thisfile:
        json.dump(params, thisfile)
    return path


def test_defaults():
    config = SimulationConfig()
    assert (config.nx, config.nt, config.dt, config.use_rk3, config.u) == (
        100,
        200,
        1.0,
        False,
        0.005,
    )
    assert config.dx == pytest.approx(0.01)
    assert config.coef == pytest.approx(100.0)
    assert config.courant == pytest.approx(0.5)


@pytest.mark.parametrize(
    "params",
    [
        dict(nx=0),
        dict(nx=-1),
        dict(nt=0),
        dict(nx=10.5),
        dict(nx=True),
        dict(dt=0.0),
        dict(dt=-1.0),
        dict(u="fast"),
        dict(use_rk3="yes"),
    ],
)
def test_invalid_parameters(params):
    with pytest.raises(ValueError):
        SimulationConfig(**params)


def test_integer_reals_are_cast():
    config = SimulationConfig(dt=2, u=0)
    assert isinstance(config.dt, float)
    assert isinstance(config.u, float)


def test_load_missing_file_keeps_defaults():
    assert load_config(None) == SimulationConfig()
    missing = os.path.join(test_directory, "missing.json")
    assert load_config(missing) == SimulationConfig()


def test_load_partial_file():
    path = write_config("partial.json", {"nx": 10, "use_rk3": True})
    config = load_config(path)
    assert config == SimulationConfig(nx=10, use_rk3=True)


def test_load_unknown_key():
    path = write_config("unknown.json", {"nx": 10, "courant": 0.5})
    with pytest.raises(ValueError):
        load_config(path)


def test_load_non_mapping():
    path = write_config("list.json", [10, 200])
    with pytest.raises(ValueError):
        load_config(path)


def test_load_malformed_file():
    path = os.path.join(test_directory, "broken.json")
    with open(path, "w") as thisfile:
        thisfile.write("{nx = 10")
    with pytest.raises(json.JSONDecodeError):
        load_config(path)


def test_replace_skips_none():
    config = SimulationConfig(nx=10).replace(nx=None, nt=5, u=None, use_rk3=None)
    assert config == SimulationConfig(nx=10, nt=5)


def test_numpy_integers_accepted():
    config = SimulationConfig(nx=np.int64(10), nt=np.int32(5))
    assert config == SimulationConfig(nx=10, nt=5)
    assert type(config.nx) is int
    assert type(config.nt) is int
