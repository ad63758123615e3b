from setuptools import setup, find_packages

setup(
    name="beam-warming",
    version="0.1.0",
    description="""Beam-Warming finite difference scheme for 1D periodic linear
    advection with forward euler or ssp rk3 time stepping.""",
    packages=find_packages(include=["beam_warming", "beam_warming.*"]),
    install_requires=["numpy", "matplotlib", "tqdm", "h5py"],
    extras_require={"test": ["pytest"]},
)
