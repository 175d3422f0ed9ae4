import argparse
import logging
import sys
from .config.scale_config import ScaleConfig
from .scale.exceptions import InvalidBoundsError, ScaleError
from .scale.log_scale import LogScale
from .utils.csv_loader import CSVDataManager
from .utils.logging_config import setup_logging

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='logscale',
        description='Compute a logarithmic axis scale: rounded bounds, ticks and positions.'
    )
    parser.add_argument('--low', help='raw lower bound')
    parser.add_argument('--high', help='raw upper bound')
    parser.add_argument('--csv', help='CSV file to take the bounds from')
    parser.add_argument('--column', help='CSV column to take the bounds from')
    parser.add_argument('--base', type=float, default=10.0, help='logarithm base (default 10)')
    parser.add_argument('--center', type=float, help='recenter the bounds around this pivot')
    parser.add_argument('--no-unit', action='store_true', help='omit the -1 and 1 ticks')
    parser.add_argument('--value', type=float, action='append', default=[],
                        help='print the percentage position of this value (repeatable)')
    parser.add_argument('--from', dest='origin', choices=['min', 'max'], default='min',
                        help='end of the scale percentages are measured from')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    return parser

def _format_number(value: float) -> str:
    return f"{value:g}"

def main(argv=None) -> int:
    """
    Command line entry point. Prints the calculated scale for the given bounds.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.WARNING)

    if args.csv is None and (args.low is None or args.high is None):
        parser.error("either --low and --high or --csv and --column are required")
    if args.csv is not None and args.column is None:
        parser.error("--csv requires --column")

    # --- Scale construction ---
    try:
        config = ScaleConfig(base=args.base, include_unit_power=not args.no_unit, center=args.center)
        if args.csv is not None:
            scale = CSVDataManager(args.csv).get_scale(args.column, config)
        else:
            scale = LogScale(args.low, args.high, config=config)
            if config.center is not None:
                scale.center_at(config.center)
            if not scale.calculate():
                raise InvalidBoundsError(
                    f"Bounds [{args.low}, {args.high}] exceed the float range in base {config.base:g}."
                )
    except (FileNotFoundError, ScaleError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # --- Results ---
    print(f"Bounds:       [{_format_number(scale.lower_bound)}, {_format_number(scale.upper_bound)}]")
    print(f"Scale:        [{_format_number(scale.get_minimum())}, {_format_number(scale.get_maximum())}]")
    print(f"Range:        {_format_number(scale.get_range())}")
    print(f"Negative:     {scale.is_negative()}")
    print(f"Crosses zero: {scale.crosses_zero()}")
    ticks = scale.get_ticks(config.include_unit_power)
    print(f"Ticks:        {', '.join(_format_number(tick) for tick in ticks)}")

    for value in args.value:
        print(f"pct({_format_number(value)}, {args.origin}) = {scale.pct(value, args.origin):.2f}")

    return 0

def console_main():
    sys.exit(main())

if __name__ == "__main__":
    console_main()
