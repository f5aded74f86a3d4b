"""Benchmark result reporting - JSON, CSV, and console output."""

import csv
import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import numpy as np

from compressbench.models import BenchmarkResult, BenchmarkSummary

from .config import BenchmarkConfig

BYTES_PER_MB = 1024 * 1024


def to_megabytes(size_bytes: int) -> float:
    """Convert a byte count to MB for display."""
    return size_bytes / BYTES_PER_MB


class BenchmarkReporter:
    """Generate reports from benchmark results."""

    def __init__(self, config: BenchmarkConfig):
        """Initialize reporter.

        Args:
            config: Benchmark configuration
        """
        self.config = config
        self.output_dir = config.output_dir

    def generate_summary(self, results: list[BenchmarkResult]) -> BenchmarkSummary:
        """Generate summary statistics from results.

        Args:
            results: List of all benchmark results

        Returns:
            BenchmarkSummary with aggregated metrics
        """
        if not results:
            return BenchmarkSummary(
                total_configurations=0,
                correct_count=0,
                original_size=0,
                avg_compress_ms=0.0,
                p50_compress_ms=0.0,
                p95_compress_ms=0.0,
                avg_decompress_ms=0.0,
                p50_decompress_ms=0.0,
                p95_decompress_ms=0.0,
                best_ratio_label=None,
                best_ratio=None,
                fastest_compress_label=None,
                fastest_decompress_label=None,
            )

        compress_arr = np.array([r.compress_ms for r in results])
        decompress_arr = np.array([r.decompress_ms for r in results])
        ratio_arr = np.array([r.compression_ratio for r in results])

        best = results[int(np.argmin(ratio_arr))]

        return BenchmarkSummary(
            total_configurations=len(results),
            correct_count=sum(1 for r in results if r.correct),
            original_size=results[0].original_size,
            avg_compress_ms=float(np.mean(compress_arr)),
            p50_compress_ms=float(np.percentile(compress_arr, 50)),
            p95_compress_ms=float(np.percentile(compress_arr, 95)),
            avg_decompress_ms=float(np.mean(decompress_arr)),
            p50_decompress_ms=float(np.percentile(decompress_arr, 50)),
            p95_decompress_ms=float(np.percentile(decompress_arr, 95)),
            best_ratio_label=best.label,
            best_ratio=best.compression_ratio,
            fastest_compress_label=results[int(np.argmin(compress_arr))].label,
            fastest_decompress_label=results[int(np.argmin(decompress_arr))].label,
        )

    def write_json(
        self,
        results: list[BenchmarkResult],
        summary: BenchmarkSummary,
        extra_data: dict[str, Any] | None = None,
        filename: str = "results.json",
    ) -> Path:
        """Write results to JSON file.

        Args:
            results: List of benchmark results
            summary: Summary statistics
            extra_data: Additional data to include
            filename: Output filename

        Returns:
            Path to written file
        """
        output = {
            "metadata": {
                "timestamp": datetime.now(UTC).isoformat(),
                "config": {
                    "record_count": self.config.record_count,
                    "seed": self.config.seed,
                    "suites": self.config.suites,
                },
            },
            "summary": summary.to_dict(),
            "results": [r.to_dict() for r in results],
        }

        if extra_data:
            output["extra"] = extra_data

        output_path = self.output_dir / filename
        with open(output_path, "w") as f:
            json.dump(output, f, indent=2)

        return output_path

    def write_csv(
        self,
        results: list[BenchmarkResult],
        filename: str = "results.csv",
    ) -> Path:
        """Write results to CSV file.

        Args:
            results: List of benchmark results
            filename: Output filename

        Returns:
            Path to written file
        """
        output_path = self.output_dir / filename
        if not results:
            return output_path

        fieldnames = list(results[0].to_csv_row())

        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for r in results:
                writer.writerow(r.to_csv_row())

        return output_path

    def format_table(self, results: list[BenchmarkResult]) -> list[str]:
        """Format results as aligned table lines, sizes in bytes and MB."""
        headers = [
            "algo",
            "library",
            "compressMs",
            "cpuMs",
            "decompressMs",
            "sizeBytes",
            "sizeMB",
            "ratio",
            "correct",
        ]
        rows = [
            [
                r.label,
                r.library,
                f"{r.compress_ms:.2f}",
                f"{r.compress_cpu_ms:.2f}",
                f"{r.decompress_ms:.2f}",
                str(r.compressed_size),
                f"{to_megabytes(r.compressed_size):.2f}",
                f"{r.compression_ratio:.3f}",
                str(r.correct).lower(),
            ]
            for r in results
        ]

        widths = [len(h) for h in headers]
        for row in rows:
            widths = [max(w, len(cell)) for w, cell in zip(widths, row, strict=True)]

        def fmt(cells: list[str]) -> str:
            return " | ".join(cell.ljust(w) for cell, w in zip(cells, widths, strict=True))

        lines = [fmt(headers), "-+-".join("-" * w for w in widths)]
        lines.extend(fmt(row) for row in rows)
        return lines

    def print_console_table(self, results: list[BenchmarkResult]) -> None:
        """Print one row per configuration."""
        for line in self.format_table(results):
            print(line)

    def print_console_summary(
        self,
        summary: BenchmarkSummary,
        extra_data: dict[str, Any] | None = None,
    ) -> None:
        """Print summary to console.

        Args:
            summary: Summary statistics
            extra_data: Additional metrics to display
        """
        print("\n" + "=" * 60)
        print("BENCHMARK SUMMARY")
        print("=" * 60)

        print(f"\nConfigurations run: {summary.total_configurations}")
        print(f"Round-trip correct: {summary.correct_count}/{summary.total_configurations}")
        print(
            f"Serialized size: {summary.original_size} bytes "
            f"({to_megabytes(summary.original_size):.2f} MB)"
        )

        print("\n--- Compression Metrics ---")
        if summary.best_ratio is not None:
            print(f"Best ratio: {summary.best_ratio:.3f} ({summary.best_ratio_label})")
        print(f"Fastest compress: {summary.fastest_compress_label}")
        print(f"Fastest decompress: {summary.fastest_decompress_label}")

        print("\n--- Latency Metrics ---")
        print(f"Avg compress: {summary.avg_compress_ms:.2f}ms")
        print(f"P50 compress: {summary.p50_compress_ms:.2f}ms")
        print(f"P95 compress: {summary.p95_compress_ms:.2f}ms")
        print(f"Avg decompress: {summary.avg_decompress_ms:.2f}ms")
        print(f"P50 decompress: {summary.p50_decompress_ms:.2f}ms")
        print(f"P95 decompress: {summary.p95_decompress_ms:.2f}ms")

        if extra_data:
            print("\n--- Additional Metrics ---")
            for key, value in extra_data.items():
                if isinstance(value, dict):
                    print(f"\n{key}:")
                    for k, v in value.items():
                        if isinstance(v, float):
                            print(f"  {k}: {v:.3f}")
                        else:
                            print(f"  {k}: {v}")
                elif isinstance(value, float):
                    print(f"{key}: {value:.3f}")
                else:
                    print(f"{key}: {value}")

        print("\n" + "=" * 60)
