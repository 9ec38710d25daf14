#!/usr/bin/env python3
"""
Answer entailment queries against a knowledge base.

USAGE:
    folentail                         # input.txt -> output.txt
    folentail problem.txt -o answers.txt
    folentail problem.txt --timeout 5 --proof
    folentail problem.json --format json
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Decide first-order entailment queries by resolution refutation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("problem", type=Path, nargs="?", help="Problem file (default: io.input from config)")
    parser.add_argument("-o", "--output", type=Path, help="Result file (default: io.output from config)")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--format", dest="format_name", help="Problem file format (kbq, json)")
    parser.add_argument("--timeout", type=float, help="Per-query time budget in seconds")
    parser.add_argument("--factoring", action="store_true", help="Enable the factoring rule")
    parser.add_argument("--proof", action="store_true", help="Print the refutation of entailed queries")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")

    args = parser.parse_args(argv)

    from folentail.engine import loop_from_config, prove
    from folentail.fileformats import get_format_handler, KBQFormat
    from folentail.utils.config import Config

    try:
        config = Config(str(args.config) if args.config else None)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.timeout is not None:
        config.update({"saturation": {"timeout": args.timeout}})
    if args.factoring:
        config.update({"saturation": {"factoring": True}})

    level = "DEBUG" if args.verbose else str(config.get("logging.level", "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    problem_path = args.problem or Path(config.get("io.input", "input.txt"))
    output_path = args.output or Path(config.get("io.output", "output.txt"))

    if not problem_path.exists():
        print(f"Error: File not found: {problem_path}", file=sys.stderr)
        return 1

    try:
        handler = get_format_handler(args.format_name, file_path=problem_path)
        problem = handler.parse_file(problem_path)
    except ValueError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Parsed {len(problem.clauses)} clauses and {len(problem.queries)} queries from '{problem_path}'")

    try:
        loop = loop_from_config(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    verdicts = []
    for query in tqdm(problem.queries, desc="queries", unit="query", disable=args.no_progress):
        proof = prove(problem.clauses, query, loop)
        verdicts.append(proof.verdict)
        if args.verbose:
            tqdm.write(f"{query!r}: {proof.status.value} after {proof.length} rounds "
                       f"({proof.state.elapsed:.3f}s)")
        if args.proof and proof.is_complete:
            tqdm.write(f"Refutation for {query!r}:\n{proof.format_refutation()}")

    results = KBQFormat()
    results.write_results(verdicts, output_path)
    sys.stdout.write(results.format_results(verdicts))
    return 0


if __name__ == "__main__":
    sys.exit(main())
