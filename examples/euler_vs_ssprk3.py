from beam_warming.advection import AdvectionSolver
from beam_warming.config import SimulationConfig
from beam_warming.plotting import lineplot, mass

shared_config = dict(nx=100, nt=200, dt=1.0, u=0.005)

solutions = {}
for label, use_rk3 in [("euler", False), ("ssprk3", True)]:
    solution = AdvectionSolver(
        SimulationConfig(**shared_config, use_rk3=use_rk3), verbose=False
    )
    solution.run()
    print(f"{label}: mass drift = {solution.mass_drift():.3e}")
    print(f"L1 change = {solution.periodic_error(norm='l1')}")
    print()
    solutions[label] = solution

lineplot(solutions)
mass(solutions)
