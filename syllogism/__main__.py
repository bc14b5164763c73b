"""
CLI entry point. Run as: python -m syllogism --demo <name>
"""

import argparse
import logging
import sys

from .core.errors import SyllogismError
from .inference.conclude import conclusion_for, match_figure
from .visualization import print_argument, print_figures
from .demos import DEMOS


def run_demo(name: str, quiet: bool = False) -> bool:
    """
    Build and resolve one demo. Returns True if the outcome is the expected one.
    """
    demo = DEMOS[name]
    major, minor = demo["make_premises"]()
    expected = demo["expected"]

    if not quiet:
        print(f"\nDemo: {name} -- {demo['description']}")

    try:
        figure = match_figure(major, minor)
        conclusion = conclusion_for(figure, major, minor)
    except SyllogismError as e:
        if not quiet:
            print(f"  [rejected] {type(e).__name__}: {e}")
        return isinstance(expected, type) and isinstance(e, expected)

    if not quiet:
        print_argument(major, minor, conclusion, figure)
    return conclusion == expected


def main(argv=None):
    parser = argparse.ArgumentParser(description="Classical syllogism inference")
    parser.add_argument("--demo", choices=list(DEMOS.keys()), default=None,
                        help="Which demo argument to resolve")
    parser.add_argument("--all",   action="store_true", help="Run every demo")
    parser.add_argument("--list",  action="store_true", help="Print the figure table")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print_figures()

    if args.all:
        names = list(DEMOS.keys())
    elif args.demo:
        names = [args.demo]
    elif args.list:
        return 0
    else:
        names = ["barbara"]

    failed = [name for name in names if not run_demo(name, quiet=args.quiet)]

    if failed:
        print(f"\nUnexpected outcome: {', '.join(failed)}")
        return 1
    if len(names) > 1:
        print(f"\nAll {len(names)} demos behaved as expected.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
