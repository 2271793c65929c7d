"""
Command-line entry point.

Usage:
    python -m simple_ga [fitness-function]

Runs the GA with the default preset on the named fitness function
(max-ones when omitted) and prints the best individual as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from simple_ga.config import PRESET_DEFAULT
from simple_ga.evolution.params import GAParams
from simple_ga.fitness import DEFAULT_FITNESS_FUNCTION, available_fitness_functions, get_fitness_function
from simple_ga.generation.driver import evolve
from simple_ga.utils.rng_manager import RNGManager
from simple_ga.utils.validation import ValidationError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='simple-ga',
        description='Run a simple genetic algorithm on a named fitness function.',
        epilog='fitness functions: ' + ', '.join(available_fitness_functions()),
    )
    ap.add_argument('fitness_function', nargs='*', metavar='fitness-function',
                    help=f'fitness function name (default: {DEFAULT_FITNESS_FUNCTION})')
    ap.add_argument('--seed', type=int, default=None, help='seed for a reproducible run')
    ap.add_argument('--workers', type=int, default=None, help='max parallel fitness evaluations')
    ap.add_argument('--serial', action='store_true', help='evaluate fitness without a thread pool')
    ap.add_argument('--verbose', '-v', action='store_true', help='also log phase transitions')
    ap.add_argument('--quiet', '-q', action='store_true', help='only print the best individual')
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if len(args.fitness_function) > 1:
        ap.print_usage()
        return 2

    # Progress goes to stderr; stdout carries only the JSON result.
    logging.basicConfig(format='%(levelname)s: %(message)s')
    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.getLogger().setLevel(level)

    name = args.fitness_function[0] if args.fitness_function else DEFAULT_FITNESS_FUNCTION
    try:
        fitness_function = get_fitness_function(name)
        params = GAParams.from_config(
            {
                **PRESET_DEFAULT,
                'parallel_evaluation': not args.serial,
                'max_workers': args.workers,
            },
            fitness_function=fitness_function,
        )
    except ValidationError as exc:
        print(exc.message, file=sys.stderr)
        return 1

    best = evolve(params, rng_manager=RNGManager(seed=args.seed))
    print(json.dumps(best.to_dict()))
    return 0


if __name__ == '__main__':
    sys.exit(main())
