# cli.py
import argparse
import logging
import sys
from typing import Iterator, List, Optional, TextIO

from puzzle_state import SIZE, apply_moves
from solver_impl import (
    ConundrumError, InvalidArrangementError, SearchExhaustedError, Solver, SolverConfig,
)

logger = logging.getLogger(__name__)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_arrangement(stream: TextIO, out: TextIO) -> List[int]:
    """Read eight integers from `stream`, skipping tokens that are not integers."""
    print(f"Enter the values 0 to {SIZE - 1}:", file=out)
    values: List[int] = []
    for tok in _tokens(stream):
        try:
            values.append(int(tok))
        except ValueError:
            print(f"Expected an integer from 0 to {SIZE - 1}, got {tok!r}", file=out)
            continue
        if len(values) == SIZE:
            break
    return values


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="conundrum",
        description="Solve the eight-node sliding-tile conundrum with A* search.",
        epilog="Values are given in node order; 0 is the blank. "
               "Without values, they are read from standard input.",
    )
    parser.add_argument("values", nargs="*", type=int, help="tile on each node, 0..7")
    parser.add_argument("--max-expansions", type=int, default=0,
                        help="give up after expanding this many states; 0 or less disables "
                             "the budget (default: %(default)s)")
    parser.add_argument("--ancestor-only", action="store_true",
                        help="only skip states already on the current path")
    parser.add_argument("--show-path", action="store_true",
                        help="print every arrangement along the solution")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(args)


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin,
         stdout: TextIO = sys.stdout) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    values = args.values or read_arrangement(stdin, stdout)
    config = SolverConfig(
        max_expansions=args.max_expansions if args.max_expansions > 0 else None,
        use_closed_set=not args.ancestor_only,
    )

    try:
        result = Solver(config).solve(values)
    except InvalidArrangementError as e:
        print(f"Invalid input: {e}", file=stdout)
        return 2
    except SearchExhaustedError as e:
        if e.budget is not None:
            print(f"Search budget exceeded: {e}", file=stdout)
        else:
            print(f"Search exhausted: {e}", file=stdout)
        return 1
    except ConundrumError as e:
        print(f"No solution: {e}", file=stdout)
        return 1

    print("Result:", file=stdout)
    print(result.moves, file=stdout)
    if args.show_path:
        for step, state in enumerate(apply_moves(values, result.moves)):
            print(f"Step {step}: {list(state.tiles)}", file=stdout)
    logger.debug("expanded=%d generated=%d", result.expanded, result.generated)
    return 0


if __name__ == "__main__":
    sys.exit(main())
