#!/usr/bin/env python3
"""
Main entry point for cloth simulation.

Usage:
    python main.py run --steps 300 --animate cloth.gif
    python main.py pick --start 0.5 0.5 1 --end 0.5 0.5 -1
"""

import argparse
import sys

import numpy as np

from verlet_cloth import ClothSimulator, ConfigurationError, Ray, SimConfig
from verlet_cloth.logging_config import setup_logging


def make_config(args) -> SimConfig:
    return SimConfig(
        origin=(args.left, args.top),
        width=args.width,
        height=args.height,
        warps=args.warps,
        wefts=args.wefts,
        max_error=args.max_error,
        steps=getattr(args, "steps", 0),
    )


def run_simulation(args):
    """Run the cloth for a number of frames and report where it settled."""
    print("=== Cloth Simulation ===")

    config = make_config(args)
    print(f"Config: {config.warps}x{config.wefts} grid, "
          f"{config.width:g}x{config.height:g}, max_error={config.max_error:g}")

    simulator = ClothSimulator(config)
    initial = simulator.get_positions()
    trajectory = simulator.run(record=bool(args.animate or args.plot))

    final = simulator.get_positions()
    sag = float(np.max(initial[:, 1] - final[:, 1]))
    print(f"Frames: {simulator.frame}")
    print(f"Max sag: {sag:.6g}")
    print(f"Unsatisfied edges: {simulator.cloth.unsatisfied_edges()}"
          f"/{len(simulator.cloth.edges)}")

    if trajectory is not None and len(trajectory) == 0:
        print("No frames recorded, skipping animation and plot")
        return simulator

    if args.animate:
        from verlet_cloth.visualization import animate_particles

        print("Creating animation...")
        animate_particles(trajectory, save_path=args.animate)
        print(f"Animation saved to {args.animate}")

    if args.plot:
        import matplotlib.pyplot as plt
        from verlet_cloth.visualization import plot_trajectories

        plot_trajectories(trajectory)
        plt.savefig(args.plot)
        print(f"Trajectory plot saved to {args.plot}")

    return simulator


def run_pick(args):
    """Report the cloth vertex nearest to a ray."""
    config = make_config(args)
    simulator = ClothSimulator(config)
    ray = Ray.through(args.start, args.end, bounded=args.segment)
    hit = simulator.cloth.get_closest_vertex(ray)
    print(f"Vertex: {hit.vertex.label}")
    print(f"Position: {hit.vertex.current.tolist()}")
    print(f"Ray point: {hit.point.tolist()}")
    print(f"Distance: {np.sqrt(hit.distance2):.6g}")
    return hit


def add_lattice_arguments(parser):
    parser.add_argument("--left", type=float, default=0.0, help="Origin x")
    parser.add_argument("--top", type=float, default=0.0, help="Origin y")
    parser.add_argument("--width", type=float, default=1.0, help="Cloth width")
    parser.add_argument("--height", type=float, default=1.0, help="Cloth height")
    parser.add_argument("--warps", type=int, default=15, help="Vertical threads")
    parser.add_argument("--wefts", type=int, default=15, help="Horizontal threads")
    parser.add_argument(
        "--max-error", type=float, default=0.01,
        help="Edge tolerance as a fraction of squared rest length",
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Verlet cloth simulation with ray picking"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More log output (repeatable)"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings")
    parser.add_argument("--log-file", type=str, help="Also write a debug log to this path")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # --- Simulation ---
    run_parser = subparsers.add_parser("run", help="Simulate the cloth")
    add_lattice_arguments(run_parser)
    run_parser.add_argument("--steps", type=int, default=300, help="Number of frames")
    run_parser.add_argument("--animate", type=str, help="Save an animation to this path")
    run_parser.add_argument("--plot", type=str, help="Save a trajectory plot to this path")

    # --- Picking ---
    pick_parser = subparsers.add_parser("pick", help="Find the vertex nearest a ray")
    add_lattice_arguments(pick_parser)
    pick_parser.add_argument(
        "--start", type=float, nargs=3, required=True, help="First point on the ray"
    )
    pick_parser.add_argument(
        "--end", type=float, nargs=3, required=True, help="Second point on the ray"
    )
    pick_parser.add_argument(
        "--segment", action="store_true", help="Treat the ray as a finite segment"
    )

    args = parser.parse_args(argv)
    setup_logging(-1 if args.quiet else args.verbose, log_file=args.log_file)

    try:
        if args.command == "run":
            run_simulation(args)
        elif args.command == "pick":
            run_pick(args)
        else:
            parser.print_help()
            sys.exit(1)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
