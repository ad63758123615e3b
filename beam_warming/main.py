import argparse
from beam_warming.advection import AdvectionSolver
from beam_warming.config import load_config
from beam_warming.data_management import SnapshotWriter


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="1D periodic advection of a square wave with Beam-Warming"
    )
    parser.add_argument("config", nargs="?", help="json parameter file")
    parser.add_argument("--nx", type=int)
    parser.add_argument("--nt", type=int)
    parser.add_argument("--dt", type=float)
    parser.add_argument("--u", type=float)
    parser.add_argument(
        "--rk3", action=argparse.BooleanOptionalAction, default=None, dest="use_rk3"
    )
    parser.add_argument("--output-dir", default=".")
    parser.add_argument("--no-output", action="store_true")
    parser.add_argument("--progress-bar", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    parser.add_argument("--plot", help="save a line plot of the last snapshot here")
    return parser.parse_args(argv)


def main(argv=None) -> AdvectionSolver:
    args = parse_args(argv)
    config = load_config(args.config).replace(
        nx=args.nx, nt=args.nt, dt=args.dt, u=args.u, use_rk3=args.use_rk3
    )
    writer = None if args.no_output else SnapshotWriter(args.output_dir)
    solution = AdvectionSolver(
        config=config,
        writer=writer,
        progress_bar=args.progress_bar,
        verbose=not args.quiet,
    )
    solution.run()
    if args.plot:
        from beam_warming.plotting import lineplot

        lineplot(solution, show=False, savepath=args.plot)
    return solution


if __name__ == "__main__":
    main()
