import numpy as np
import matplotlib.pyplot as plt

colors = {
    "blue": "#1f77b4",
    "orange": "#ff7f0e",
    "green": "#2ca02c",
    "red": "#d62728",
    "purple": "#9467bd",
}

color_list = list(colors.values())


def lineplot(
    solution_dictionary_in,
    show: bool = True,
    savepath: str = None,
):
    """
    args:
        solution_dictionary_in  AdvectionSolver or {label: AdvectionSolver}
        show                    whether to open a window
        savepath                where to save the figure, not saved if None
    """
    if isinstance(solution_dictionary_in, dict):
        solution_dictionary = solution_dictionary_in.copy()
    else:
        solution_dictionary = {"data1": solution_dictionary_in}

    fig = plt.figure()
    first_solution = list(solution_dictionary.values())[0]
    # plot step 0
    plt.plot(
        first_solution.x, first_solution.snapshots[0]["u"], color="grey", label="t = 0"
    )
    # plot all curves
    for idx, (label, solution) in enumerate(solution_dictionary.items()):
        plt.plot(
            solution.x,
            solution.snapshots[-1]["u"],
            "o--",
            mfc="none",
            color=color_list[idx % len(color_list)],
            label=f"{label}, t = {solution.snapshots[-1]['t']:g}",
        )
    plt.xlabel("x")
    plt.ylabel("rho")
    plt.legend()
    if savepath is not None:
        plt.savefig(savepath, dpi=300)
    if show:
        plt.show()
    return fig


def mass(solution_dictionary_in, show: bool = True, savepath: str = None):
    """
    interior sum minus its initial value against timestep
    """
    if isinstance(solution_dictionary_in, dict):
        solution_dictionary = solution_dictionary_in.copy()
    else:
        solution_dictionary = {"data1": solution_dictionary_in}

    fig = plt.figure()
    for idx, (label, solution) in enumerate(solution_dictionary.items()):
        history = np.asarray(solution.mass_history)
        plt.plot(
            np.arange(len(history)),
            history - history[0],
            color=color_list[idx % len(color_list)],
            label=label,
        )
    plt.xlabel("step")
    plt.ylabel("sum(rho) - sum(rho0)")
    plt.legend()
    if savepath is not None:
        plt.savefig(savepath, dpi=300)
    if show:
        plt.show()
    return fig
