"""
Command-line interface for the flight time calculator
"""
import argparse
import logging
import math
import os
from typing import List, Optional

from .config import Config
from .core import (
    MODES,
    TimeCalculator,
    solve_triangle,
    wind_components,
)
from .errors import ConfigError


logger = logging.getLogger(__name__)

PROMPT = "Expression ('q' to quit): "


def format_number(value: float, digits: int = 1) -> str:
    """Format a navigation value with thousands grouping."""
    return f"{value:,.{digits}f}"


def print_result(calculator: TimeCalculator, mode: str = 'hhmm', fraction_digits: int = 2,
                 show_verbose: bool = True, labels=None) -> bool:
    """Print the result block for the calculator's current state.

    Returns the validity of the typed expression.
    """
    print(calculator.render(mode, fraction_digits))
    print(calculator.secondary_line(mode, fraction_digits, labels))
    if show_verbose and mode != 'verbose':
        print(calculator.render('verbose'))
    valid = calculator.is_valid
    if not valid:
        print("Invalid expression")
    return valid


def print_triangle(solve_for: str, speed: Optional[str], distance: Optional[str], time: Optional[str]) -> bool:
    result = solve_triangle(solve_for, speed=speed, distance=distance, time=time)
    if result is None:
        print(f"Cannot solve for {solve_for}: missing or invalid inputs")
        return False
    print(f"{result.label}: {format_number(result.value)} {result.unit}")
    return True


def print_wind(heading: str, direction: str, speed: str, gust: Optional[str] = None) -> bool:
    result = wind_components(heading, direction, speed, gust)
    if result is None:
        print("Cannot compute wind components: missing or invalid inputs")
        return False
    head = f"{result.headwind_label}: {format_number(abs(result.headwind))} kt"
    if result.gust_headwind is not None:
        head += f" (gust {format_number(abs(result.gust_headwind))} kt)"
    cross = f"{result.crosswind_label}: {format_number(abs(result.crosswind))} kt"
    if result.gust_crosswind is not None:
        cross += f" (gust {format_number(abs(result.gust_crosswind))} kt)"
    print(head)
    print(cross)
    print(f"Angle difference: {format_number(abs(result.delta), 0)}°")
    return True


def interactive_loop(calculator: TimeCalculator, mode: str, fraction_digits: int,
                     show_verbose: bool, labels=None) -> None:
    """Read expressions from stdin and print each result until EOF or 'q'."""
    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if line.strip().lower() in ('q', 'quit', 'exit'):
            return
        calculator.set_expression(line)
        print_result(calculator, mode, fraction_digits, show_verbose, labels)
        print("=" * 40)


def find_default_config() -> Optional[str]:
    """Look for config.yml / config.yaml in the current directory."""
    cwd = os.getcwd()
    for candidate in (os.path.join(cwd, 'config.yml'), os.path.join(cwd, 'config.yaml')):
        if os.path.exists(candidate):
            return candidate
    return None


def finite_float(value: str) -> float:
    """argparse type for adjustments: finite numbers only."""
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not math.isfinite(parsed):
        raise argparse.ArgumentTypeError(f"number must be finite: {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Add and subtract hours and minutes, e.g. 1+1:30+:45-0:15')
    parser.add_argument('expression', nargs='*', help='Duration expression; omit to start an interactive prompt')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--mode', choices=MODES, help='Primary display mode')
    parser.add_argument('--digits', dest='fraction_digits', type=int, help='Fraction digits for decimal hours')
    parser.add_argument('--add-hours', type=finite_float, default=0, help='Manual adjustment in hours (may be negative)')
    parser.add_argument('--add-minutes', type=finite_float, default=0, help='Manual adjustment in minutes (may be negative)')
    parser.add_argument('--strict', action='store_true', default=None, help='Exit with status 1 on an invalid expression')
    parser.add_argument('--log-level', type=str, help='Logging level (DEBUG, INFO, WARNING, ...)')

    verbose_group = parser.add_mutually_exclusive_group()
    verbose_group.add_argument('--verbose-text', dest='show_verbose', action='store_true', help='Also print the prose form')
    verbose_group.add_argument('--no-verbose-text', dest='show_verbose', action='store_false', help='Do not print the prose form')
    parser.set_defaults(show_verbose=None)

    nav_group = parser.add_argument_group('navigation')
    nav_group.add_argument('--solve', choices=('speed', 'distance', 'time'), help='Solve the speed/distance/time triangle')
    nav_group.add_argument('--speed', type=str, help='Ground speed in knots')
    nav_group.add_argument('--distance', type=str, help='Distance in nautical miles')
    nav_group.add_argument('--time', type=str, help='Flight time, e.g. 1:30, :45 or 1.5')
    nav_group.add_argument('--wind', nargs=3, metavar=('HEADING', 'DIRECTION', 'SPEED'),
                           help='Runway heading, wind direction and wind speed')
    nav_group.add_argument('--gust', type=str, help='Gust speed in knots (with --wind)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(config_file=args.config or find_default_config())
        config.update_from_args({
            'mode': args.mode,
            'fraction_digits': args.fraction_digits,
            'strict': args.strict,
            'show_verbose': args.show_verbose,
            'log_level': args.log_level,
        })
        config.validate()
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 2

    logging.basicConfig(level=str(config.get('log_level') or 'WARNING').upper())
    logger.debug("Configuration: %s", config.get_all())

    if args.solve or args.wind:
        ok = True
        if args.solve:
            ok = print_triangle(args.solve, args.speed, args.distance, args.time) and ok
        if args.wind:
            ok = print_wind(*args.wind, gust=args.gust) and ok
        return 0 if ok else 1

    mode = config.get('mode')
    fraction_digits = config.get('fraction_digits')
    show_verbose = config.get('show_verbose', True)
    labels = config.get('display', {}).get('labels')

    calculator = TimeCalculator()
    calculator.add_hours(args.add_hours)
    calculator.add_minutes(args.add_minutes)

    if not args.expression:
        interactive_loop(calculator, mode, fraction_digits, show_verbose, labels)
        return 0

    calculator.set_expression(' '.join(args.expression))
    valid = print_result(calculator, mode, fraction_digits, show_verbose, labels)
    if not valid and config.get('strict'):
        return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
