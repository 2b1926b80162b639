#!/usr/bin/env python3
"""
qxt: convert an edge list into Ising coefficients for the isakov annealer,
or parse the annealer's output back into balanced graph bisections.

Usage:
  python qxt.py graph.txt          # writes graph.txt.isakov
  isakov ... | python qxt.py -r    # prints best bisections
  isakov ... | python qxt.py -r --graph graph.txt
"""

import argparse
import sys

from coefficients import coefficient_path, write_coefficients
from edge_list import QxtError, count_edges, load_edge_list
from solver_results import collect_solutions, format_solutions, read_readouts, to_networkx

EXIT_OK = 0
EXIT_UNKNOWN = 1
EXIT_RUNTIME = 2
EXIT_USER = 3
EXIT_NO_SOLUTIONS = 4


class UsageError(QxtError):
    pass


class QxtArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments as user errors instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = QxtArgumentParser(
        prog="qxt",
        description="Edge list to Ising coefficients, and isakov results to graph bisections",
    )
    parser.add_argument("input", nargs="?", help="Edge list file, one edge per line")
    parser.add_argument("-r", "--result", action="store_true",
                        help="Parse isakov results from standard input")
    parser.add_argument("-o", "--output", help="Coefficient file (default: INPUT.isakov)")
    parser.add_argument("--graph", metavar="EDGES",
                        help="With -r: edge list used to report cut edges per solution")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print diagnostics to stderr")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print the output path")
    return parser


def convert(args) -> int:
    graph, n = load_edge_list(args.input)
    out_path = args.output or coefficient_path(args.input)
    written = write_coefficients(graph, n, out_path)
    if args.verbose:
        print(f"{args.input}: {n} nodes, {count_edges(graph)} edges, {written} coefficients",
              file=sys.stderr)
    if not args.quiet:
        print(f"Wrote: {out_path}", file=sys.stderr)
    return EXIT_OK


def parse_result(args) -> int:
    G = None
    if args.graph:
        graph, _ = load_edge_list(args.graph)
        G = to_networkx(graph)

    found = collect_solutions(read_readouts(sys.stdin))
    if args.verbose:
        print(f"accepted {found.accepted}, discarded {found.discarded}, best energy {found.best_energy}",
              file=sys.stderr)

    if not found:
        print("No solutions found")
        return EXIT_NO_SOLUTIONS

    sys.stdout.write(format_solutions(found.sorted_solutions(), G))
    return EXIT_OK


def check_args(parser, args) -> None:
    if args.result:
        if args.input:
            parser.error("-r reads results from standard input and takes no input file")
        if args.output or args.quiet:
            parser.error("-o and -q apply to conversion only")
    elif args.graph:
        parser.error("--graph requires -r")


def main(argv=None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        check_args(parser, args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USER

    if not args.result and not args.input:
        parser.print_usage()
        return EXIT_OK

    try:
        if args.result:
            return parse_result(args)
        return convert(args)
    except QxtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USER
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME
    except BaseException:
        print("Unknown error", file=sys.stderr)
        return EXIT_UNKNOWN


if __name__ == "__main__":
    raise SystemExit(main())
