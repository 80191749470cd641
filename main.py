import argparse
import sys

import config
from report import console, print_banner, print_report
from simulation import Simulation
from visualization import save_engagement


def build_parser():
    parser = argparse.ArgumentParser(description="2-D pursuit / intercept simulation")
    parser.add_argument('--preset', choices=sorted(config.PRESETS), default=config.DEFAULT_PRESET)
    parser.add_argument('--threshold', type=float, dest='collision_threshold', help="Collision distance (m)")
    parser.add_argument('--max-ticks', type=int, dest='max_ticks')
    parser.add_argument('--reference-altitude', type=float, dest='reference_altitude')
    parser.add_argument('--blend-weight', type=float, dest='blend_weight',
                        help="0 = random jink only, 1 = height correction only")
    parser.add_argument('--gain', type=float, help="Height correction gain (deg/m)")
    parser.add_argument('--speed', type=float, dest='interceptor_speed', help="Interceptor cruise speed")
    parser.add_argument('--guidance', choices=config.GUIDANCE_MODES)
    parser.add_argument('--no-evasion', action='store_true')
    parser.add_argument('--randomize-start', action='store_true')
    parser.add_argument('--seed', type=int)
    parser.add_argument('--output', default="collision_simulation.png", help="Plot output path")
    parser.add_argument('--no-plot', action='store_true')
    parser.add_argument('--show', action='store_true', help="Open the plot window after saving")
    return parser


def params_from_args(args):
    overrides = {
        'collision_threshold': args.collision_threshold,
        'max_ticks': args.max_ticks,
        'reference_altitude': args.reference_altitude,
        'blend_weight': args.blend_weight,
        'gain': args.gain,
        'interceptor_speed': args.interceptor_speed,
        'guidance': args.guidance,
        'seed': args.seed,
    }
    if args.no_evasion:
        overrides['evasion'] = False
    if args.randomize_start:
        overrides['randomize_start'] = True
    return config.get_preset(args.preset).with_overrides(**overrides)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        params = params_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    print_banner(params, args.preset)

    # 1. Compute everything first
    sim = Simulation(params, verbose=True)
    t_data, m_data, collision = sim.run()
    print_report(collision, params, sim.tick)

    # 2. Render
    if args.no_plot:
        return 0
    try:
        save_engagement(args.output, t_data, m_data, collision, params, show=args.show)
    except OSError as e:
        console.print(f"[bold red]Could not write plot to {args.output}: {e}[/bold red]")
        return 1
    console.print(f"✅ Graph saved as '{args.output}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
