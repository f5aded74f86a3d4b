"""CLI entry point for benchmark suite."""

import argparse
import logging
import sys
from pathlib import Path

from compressbench import InvalidConfigurationError, run_benchmark

from .config import DEFAULT_LOG_LEVEL, DEFAULT_RECORD_COUNT, DEFAULT_SEED, BenchmarkConfig
from .reporter import BenchmarkReporter
from .suites import SUITES, build_configurations
from .transactions import generate_transactions, summarize_dataset

logger = logging.getLogger("benchmarks")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="gzip / zstd Compression Benchmark Suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m benchmarks                              # gzip, zstd default and zstd levels
  python -m benchmarks --suites strategies          # every zstd strategy at level 3
  python -m benchmarks --suites mixed --records 50000
  python -m benchmarks --suites all --seed 42 --quiet
        """,
    )

    parser.add_argument(
        "--records",
        type=int,
        default=DEFAULT_RECORD_COUNT,
        help=f"Number of transaction records to generate (default: {DEFAULT_RECORD_COUNT})",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Random seed for record generation (default: random)",
    )

    parser.add_argument(
        "--suites",
        nargs="+",
        choices=[*SUITES, "all"],
        default=["default"],
        help="Which configuration suites to run (default: default)",
    )

    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("benchmark_results"),
        help="Directory for output files (default: benchmark_results/)",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress console output (still writes files)",
    )

    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = BenchmarkConfig(
            output_dir=args.output_dir,
            record_count=args.records,
            seed=args.seed,
            suites=args.suites,
        )
        configurations = build_configurations(config.suites)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not configurations:
        print("ERROR: No configurations selected", file=sys.stderr)
        return 1

    if not args.quiet:
        print("Compression Benchmark Suite")
        print(f"  Records: {config.record_count}")
        print(f"  Seed: {config.seed if config.seed is not None else 'random'}")
        print(f"  Suites: {config.suites}")
        print(f"  Output: {config.output_dir}")
        print()

    dataset = generate_transactions(config.record_count, seed=config.seed)
    dataset_summary = summarize_dataset(dataset)
    logger.info(f"Generated {dataset_summary['total_records']} records")

    try:
        results = run_benchmark(dataset, configurations)
    except InvalidConfigurationError as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Benchmark run aborted")
        print(f"ERROR: Benchmark run aborted: {e}", file=sys.stderr)
        return 1

    # Generate reports
    reporter = BenchmarkReporter(config)
    summary = reporter.generate_summary(results)
    extra_data = {"dataset": dataset_summary}

    json_path = reporter.write_json(results, summary, extra_data)
    csv_path = reporter.write_csv(results)

    if not args.quiet:
        reporter.print_console_table(results)
        reporter.print_console_summary(summary, extra_data)
        print("\nResults written to:")
        print(f"  JSON: {json_path}")
        print(f"  CSV:  {csv_path}")

    if not summary.all_correct:
        logger.warning(
            f"{summary.total_configurations - summary.correct_count} configurations "
            "failed the round-trip check"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
