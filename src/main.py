#!/usr/bin/env python3
"""
Gumowski-Mira explorer CLI

renders iterated points of the Gumowski-Mira map and lets you rate
parameter sets interactively:
- render one parameter set (random, preset, manual or from config) to png
- explore: reroll / rate good or bad / presets / manual entry / windows
- export session ratings to csv
- animate a skip window sliding along one orbit

usage:
  python main.py render --preset 3  # single render
  python main.py render -p '{"alpha": 0.009, "sigma": 0.05, "mu": -0.801}' -k 5000
  python main.py explore --seed 7  # interactive session
  python main.py animate -w 2000 -f 20  # window animation
  python main.py presets  # list known-good parameters
"""

import argparse
import json
import os
import sys
import time
from typing import Optional

from attractors import AVAILABLE_ATTRACTORS, DEFAULT_PARAMS
from attractors.base import GumowskiParams, InvalidParameterError
from compute.cpu_backend import CPUBackend
from explorer.config import ExplorerConfig
from explorer.export import export_results
from explorer.params import (
    KNOWN_PARAMS, get_preset, make_rng, params_from_cli, parse_params, random_params
)
from explorer.pipeline import render_request
from explorer.session import ExplorerSession
from viz.animation import create_window_animation
from viz.bounds import NonRenderableError
from viz.surface import MatplotlibSurface


def create_output_dir(base_name: str) -> str:
    """create timestamped output directory"""
    timestamp = time.strftime("%Y%m%d-%H%M%S")
    output_dir = f"{base_name}_{timestamp}"
    os.makedirs(output_dir, exist_ok=True)
    return output_dir


def load_config(args) -> ExplorerConfig:
    """config file first, then command line overrides"""
    config = ExplorerConfig.from_yaml(args.config) if args.config else ExplorerConfig()
    overrides = {}
    if args.variant is not None:
        overrides['variant'] = args.variant
    if args.iterations is not None:
        overrides['iterations'] = args.iterations
    if args.skip is not None:
        overrides['skip'] = args.skip
    if args.seed is not None:
        overrides['seed'] = args.seed
    if args.output_dir is not None:
        overrides['output_dir'] = args.output_dir
    if overrides:
        data = config.to_dict()
        data.update(overrides)
        config = ExplorerConfig.from_dict(data)
    return config


def resolve_params(args, config: ExplorerConfig, rng) -> Optional[GumowskiParams]:
    """--params beats --preset beats --random beats the config file"""
    if args.params is not None:
        return parse_params(args.params, defaults=DEFAULT_PARAMS)
    if args.preset is not None:
        return get_preset(args.preset)
    if args.random:
        return random_params(rng)
    return config.params


def cmd_render(args) -> None:
    """render a single parameter set to png"""
    print("═" * 60)
    print("GUMOWSKI-MIRA RENDER")
    print("═" * 60)

    config = load_config(args)
    rng = make_rng(config.seed)
    params = resolve_params(args, config, rng) or DEFAULT_PARAMS

    print(f"variant: {config.variant}")
    print(f"parameters: {params}")
    print(f"iterations: {config.iterations} (skip {config.skip})")
    print(f"initial point: ({config.initial.x}, {config.initial.y})")
    print()

    surface = MatplotlibSurface(int(config.viewport.width), int(config.viewport.height))
    report = render_request(surface, params, config, backend=CPUBackend(verbose=True))
    print(report.summary())

    output_dir = create_output_dir(config.output_dir)
    image_file = surface.save(os.path.join(output_dir, f"gumowski_{config.variant}.png"))
    config.params = params
    config.to_yaml(os.path.join(output_dir, "config.yaml"))
    print(f"\nsaved image to: {image_file}")


def cmd_animate(args) -> None:
    """animate a skip window sliding along one orbit"""
    print("═" * 60)
    print("WINDOW ANIMATION")
    print("═" * 60)

    config = load_config(args)
    rng = make_rng(config.seed)
    params = resolve_params(args, config, rng) or DEFAULT_PARAMS

    print(f"variant: {config.variant}")
    print(f"parameters: {params}")
    print(f"orbit length: {config.iterations}, window: {args.window}, frames: {args.frames}")
    print()

    output_dir = create_output_dir(config.output_dir)
    gif_file = create_window_animation(
        config.variant, params, config.initial, config.iterations, args.window,
        output_dir, frames=args.frames, viewport=config.viewport,
        options=config.render, fps=args.fps
    )
    print(f"saved animation to: {gif_file}")


def cmd_presets(args) -> None:
    """list the known-good parameter table"""
    print(f"{'#':>3}  {'alpha':>14}  {'sigma':>14}  {'mu':>14}")
    for i, p in enumerate(KNOWN_PARAMS):
        print(f"{i:>3}  {p.alpha:>14.10f}  {p.sigma:>14.10f}  {p.mu:>14.10f}")


EXPLORE_HELP = """commands:
  g  rate good and reroll      b  rate bad and reroll
  r  reroll                    p  preset (index, empty = random)
  m  manual parameters         w  window (iterations, skip)
  e  export ratings to csv     q  quit"""


def _show(surface, session: ExplorerSession, config: ExplorerConfig, frame_file: str,
          params: Optional[GumowskiParams] = None) -> bool:
    """
    render `params` (default: the session's current ones) and make them current

    on failure the last frame and the session's current parameters stay as
    they were, so a rating always refers to what is on screen
    """
    if params is None:
        params = session.current_params
    try:
        report = render_request(surface, params, config,
                                iterations=session.iterations, skip=session.skip)
    except (NonRenderableError, InvalidParameterError) as e:
        print(f"❌ not renderable: {e}")
        return False
    session.use_params(params)
    surface.save(frame_file)
    print(f"{params}")
    print(f"  {report.summary()}")
    return True


def cmd_explore(args) -> None:
    """interactive good/bad rating session"""
    print("═" * 60)
    print("GUMOWSKI-MIRA EXPLORER")
    print("═" * 60)

    config = load_config(args)
    rng = make_rng(config.seed)
    session = ExplorerSession(iterations=config.iterations, skip=config.skip)
    first = resolve_params(args, config, rng) or random_params(rng)

    output_dir = create_output_dir(config.output_dir)
    frame_file = os.path.join(output_dir, "current.png")
    surface = MatplotlibSurface(int(config.viewport.width), int(config.viewport.height))

    print(f"variant: {config.variant}")
    print(f"current frame: {frame_file}")
    print(EXPLORE_HELP)
    print()
    _show(surface, session, config, frame_file, first)

    while True:
        try:
            command = input("\n> ").strip().lower()
        except EOFError:
            command = 'q'

        if command in ('g', 'b'):
            rating = 'good' if command == 'g' else 'bad'
            try:
                session.save_rating(rating)
            except ValueError as e:
                print(f"❌ {e}")
                continue
            counts = session.counts()
            print(f"saved as {rating} ({counts['good']} good, {counts['bad']} bad)")
            _show(surface, session, config, frame_file, random_params(rng))

        elif command == 'r':
            _show(surface, session, config, frame_file, random_params(rng))

        elif command == 'p':
            try:
                answer = input(f"preset index (0-{len(KNOWN_PARAMS) - 1}, empty = random): ").strip()
                index = int(answer) if answer else int(rng.randint(len(KNOWN_PARAMS)))
                params = get_preset(index)
            except EOFError:
                print("\npreset entry cancelled")
                continue
            except (ValueError, InvalidParameterError) as e:
                print(f"❌ {e}")
                continue
            print(f"preset {index}")
            _show(surface, session, config, frame_file, params)

        elif command == 'm':
            try:
                params = params_from_cli(session.current_params)
            except EOFError:
                print("\nmanual entry cancelled")
                continue
            _show(surface, session, config, frame_file, params)

        elif command == 'w':
            previous = (session.iterations, session.skip)
            try:
                iterations = int(input(f"iterations ({session.iterations}): ") or session.iterations)
                skip = int(input(f"skip ({session.skip}): ") or session.skip)
                session.set_window(iterations, skip)
            except EOFError:
                print("\nwindow entry cancelled")
                continue
            except ValueError as e:
                print(f"❌ {e}")
                continue
            if session.current_params is not None and not _show(surface, session, config, frame_file):
                session.set_window(*previous)

        elif command == 'e':
            if not session.saved_results:
                print("nothing to export yet")
                continue
            csv_file = export_results(session.saved_results, output_dir)
            print(f"exported {len(session.saved_results)} ratings to: {csv_file}")

        elif command == 'q':
            if session.saved_results:
                csv_file = export_results(session.saved_results, output_dir)
                print(f"exported {len(session.saved_results)} ratings to: {csv_file}")
            break

        else:
            print(EXPLORE_HELP)


def main():
    parser = argparse.ArgumentParser(description='Gumowski-Mira explorer CLI')
    subparsers = parser.add_subparsers(dest='command', help='commands')

    # shared arguments
    def add_common_args(parser):
        parser.add_argument('-c', '--config', type=str, default=None,
                           help='yaml config file')
        parser.add_argument('-V', '--variant', type=str, default=None,
                           choices=list(AVAILABLE_ATTRACTORS.keys()),
                           help='recurrence variant')
        parser.add_argument('-n', '--iterations', type=int, default=None,
                           help='total iterations of the map')
        parser.add_argument('-k', '--skip', type=int, default=None,
                           help='leading iterations to compute but not draw')
        parser.add_argument('-p', '--params', type=json.loads, default=None,
                           help='parameters as JSON, e.g. \'{"alpha": 0.1, "mu": -0.5}\'')
        parser.add_argument('--preset', type=int, default=None,
                           help='index into the known-good parameter table')
        parser.add_argument('-r', '--random', action='store_true',
                           help='sample parameters uniformly at random')
        parser.add_argument('-s', '--seed', type=int, default=None,
                           help='random seed')
        parser.add_argument('-o', '--output-dir', type=str, default=None,
                           help='output directory base name')

    render_parser = subparsers.add_parser('render', help='render one parameter set to png')
    add_common_args(render_parser)

    explore_parser = subparsers.add_parser('explore', help='interactive rating session')
    add_common_args(explore_parser)

    animate_parser = subparsers.add_parser('animate', help='animate a sliding skip window')
    add_common_args(animate_parser)
    animate_parser.add_argument('-w', '--window', type=int, default=2000,
                               help='points per frame')
    animate_parser.add_argument('-f', '--frames', type=int, default=20,
                               help='number of frames')
    animate_parser.add_argument('--fps', type=int, default=10,
                               help='frames per second for animation')

    subparsers.add_parser('presets', help='list known-good parameters')

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    commands = {
        'render': cmd_render,
        'explore': cmd_explore,
        'animate': cmd_animate,
        'presets': cmd_presets
    }

    try:
        commands[args.command](args)
    except (ValueError, OSError) as e:
        print(f"❌ {args.command} failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
