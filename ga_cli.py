#!/usr/bin/env python3
"""
Run the genetic algorithm engine from a YAML run configuration.

Command-line flags override individual fields of the run configuration;
everything else (model, GA parameters, output folder) comes from the file.
"""

import sys
import argparse
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def build_parser():
    """Create the argument parser for ga_cli.py."""
    parser = argparse.ArgumentParser(
        description="Genetic Algorithm Engine - evolve a model from a YAML run config",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 ga_cli.py examples/word_run.yaml                  # Evolve "evolution" letter by letter
  python3 ga_cli.py examples/sentence_run.yaml              # Evolve "Hello, world!"
  python3 ga_cli.py examples/word_run.yaml --target genome  # Different target word
  python3 ga_cli.py examples/word_run.yaml --seed 3 --no-plot

GA parameters default to ga_engine/ga_config.yaml; a run config can point
'ga_config' at another file and override fields under 'ga'.
        """
    )

    parser.add_argument(
        'run_config',
        help='Run configuration YAML file'
    )

    parser.add_argument(
        '--target', '-t',
        help='Override model.target'
    )

    parser.add_argument(
        '--seed', '-s',
        type=int,
        dest='random_seed',
        help='Override random_seed'
    )

    parser.add_argument(
        '--report-every', '-r',
        type=int,
        help='Print progress every N generations (overrides report_every)'
    )

    parser.add_argument(
        '--overwrite',
        action='store_true',
        default=None,
        help='Reuse an existing output directory (sets output.overwrite)'
    )

    parser.add_argument(
        '--plot',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Save fitness.png (overrides output.plot)'
    )

    return parser


def main(argv=None):
    """
    Parse arguments and run. Returns the process exit code.

    Configuration and run errors are printed rather than raised.
    """
    args = build_parser().parse_args(argv)
    overrides = {
        'target': args.target,
        'random_seed': args.random_seed,
        'report_every': args.report_every,
        'overwrite': args.overwrite,
        'plot': args.plot,
    }

    try:
        from ga_engine.cli import run_from_config
        run_from_config(args.run_config, overrides)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 1
    except (OSError, ValueError) as e:
        print(f"\nError: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
