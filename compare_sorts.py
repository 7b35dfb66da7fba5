#!/usr/bin/env python3
"""
Sorting Algorithm Comparison - Main Runner
==========================================

Runs Bubble, Selection, Insertion, Merge and Quick sort over the same input,
times each one and labels the input as a best/average/worst case for it.

Usage:
    python compare_sorts.py --input "8, 3, 5, 1"
    python compare_sorts.py --length 2000 --seed 7 --html report.html
    python compare_sorts.py --shape reversed --length 500 -o results.json
    python compare_sorts.py --overview
"""

import argparse
import sys

from benchmark_core import (
    BenchmarkConfig, BenchmarkEngine, INPUT_GENERATORS,
    parse_sequence, parse_length, generate_random_sequence, fmt_ms,
    build_report, write_json_report, generate_html_report,
    print_header, print_results_table, print_result_cards, print_overview,
    Colors,
)


def resolve_input(args, config: BenchmarkConfig):
    """Pick the sequence to sort: explicit text, a named shape, or random data."""
    if args.input:
        return parse_sequence(args.input), "user input"

    rng = config.make_rng()
    n = args.length
    if args.shape:
        gen = INPUT_GENERATORS[args.shape]
        return gen.generate(n, rng, config.min_value, config.max_value), gen.description

    text = generate_random_sequence(n, config.min_value, config.max_value, rng=rng)
    return parse_sequence(text), "random data"


def run_comparison(config: BenchmarkConfig, arr, quiet: bool = False):
    """Run the engine, reporting each algorithm as it finishes."""
    engine = BenchmarkEngine(config)
    if quiet:
        return engine.run(arr)

    def progress(record, index, total):
        if record.error:
            status = f"{Colors.RED}ERROR{Colors.END}"
        elif record.correct:
            status = f"{Colors.GREEN}OK{Colors.END} ({fmt_ms(record.time_ms)})"
        else:
            status = f"{Colors.RED}INCORRECT{Colors.END}"
        print(f"  [{index + 1}/{total}] {record.algorithm:<10} {status}", flush=True)

    return engine.run(arr, on_result=progress)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Sorting Algorithm Comparison",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --input "8, 3, 5, 1"              Compare on your own numbers
  %(prog)s --length 2000 --html report.html  Random data with HTML report
  %(prog)s --shape sorted --length 500       Provoke best/worst cases
  %(prog)s --overview                        Describe the algorithms
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", "-i", type=str, help="Comma-separated integers to sort")
    source.add_argument("--shape", choices=list(INPUT_GENERATORS.keys()),
                        help="Generate input with a known arrangement")

    parser.add_argument("--length", "-n", type=parse_length, default="",
                        help="Length of generated data; empty, invalid or non-positive means 10")
    parser.add_argument("--max-length", type=int, default=BenchmarkConfig.max_length,
                        help="Largest accepted length (default: 10000)")
    parser.add_argument("--min-value", type=int, default=BenchmarkConfig.min_value,
                        help="Smallest generated value (default: 1)")
    parser.add_argument("--max-value", type=int, default=BenchmarkConfig.max_value,
                        help="Largest generated value (default: 1000)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: unseeded)")
    parser.add_argument("--no-gc-pause", action="store_true",
                        help="Leave the garbage collector running while timing")
    parser.add_argument("--overview", action="store_true", help="Describe the algorithms and exit")
    parser.add_argument("--output", "-o", type=str, help="JSON output path")
    parser.add_argument("--html", type=str, help="HTML report output path")
    parser.add_argument("--quiet", "-q", action="store_true", help="Minimal output")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.overview:
        print_overview()
        return 0

    if args.length > args.max_length:
        parser.error(f"--length {args.length} exceeds the maximum of {args.max_length}")
    if args.min_value > args.max_value:
        parser.error("--min-value must not be greater than --max-value")

    config = BenchmarkConfig(
        seed=args.seed,
        max_length=args.max_length,
        min_value=args.min_value,
        max_value=args.max_value,
        gc_between_runs=not args.no_gc_pause,
    )

    arr, source = resolve_input(args, config)
    if len(arr) > config.max_length:
        parser.error(f"input has {len(arr)} values, more than the maximum of {config.max_length}")

    if not args.quiet:
        print(f"\n{Colors.BOLD}Sorting Algorithm Comparison{Colors.END}")
        print(f"Python {sys.version.split()[0]}\n")
        print_header("Analysis")
        print(f"  n = {len(arr)}, input = {source}\n")

    results = run_comparison(config, arr, args.quiet)

    if not args.quiet:
        print()
        print_results_table(results)
        print_result_cards(results)

    if args.output:
        write_json_report(results, config, args.output)
        if not args.quiet:
            print(f"\n{Colors.GREEN}JSON report saved to {args.output}{Colors.END}")

    if args.html:
        generate_html_report(results, args.html, build_report(results, config)["metadata"])
        if not args.quiet:
            print(f"{Colors.GREEN}HTML report saved to {args.html}{Colors.END}")

    if not args.quiet:
        print(f"\n{Colors.CYAN}Comparison complete.{Colors.END}\n")

    return 0 if results.all_correct else 1


if __name__ == "__main__":
    sys.exit(main())
