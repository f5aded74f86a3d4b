"""Compression benchmark harness.

Serializes a dataset once, then for each configuration compresses, times,
decompresses, times and checks the round-trip against the original records.
"""

import logging
import time
from collections.abc import Sequence
from typing import Any

from .codecs import create_codec, validate_configuration
from .models import BenchmarkResult, Configuration
from .serialization import JsonSerializer

logger = logging.getLogger("compressbench.harness")


class BenchmarkHarness:
    """Benchmark compression of one dataset across many configurations."""

    def __init__(self, serializer: JsonSerializer | None = None):
        """Initialize harness.

        Args:
            serializer: Dataset encoder/decoder. Uses JSON if None.
        """
        self.serializer = serializer or JsonSerializer()

    def run(
        self,
        dataset: Sequence[Any],
        configurations: Sequence[Configuration],
    ) -> list[BenchmarkResult]:
        """Run every configuration against the dataset, in order.

        Args:
            dataset: Records to compress. Not modified.
            configurations: Algorithms and parameters to benchmark

        Returns:
            One BenchmarkResult per configuration, in input order

        Raises:
            InvalidConfigurationError: If any configuration is invalid.
                Nothing is run in that case.
            Exception: Any serialization or codec error aborts the run.
        """
        for configuration in configurations:
            validate_configuration(configuration)

        payload = self.serializer.encode(dataset)
        expected = self.serializer.normalize(dataset)
        logger.info(
            f"Benchmarking {len(configurations)} configurations on "
            f"{len(dataset)} records ({len(payload)} bytes)"
        )

        results: list[BenchmarkResult] = []
        for configuration in configurations:
            try:
                result = self._run_configuration(configuration, payload, expected)
            except Exception as e:
                logger.error(f"{configuration.label} failed, aborting run: {e}")
                raise
            results.append(result)

        return results

    def _run_configuration(
        self,
        configuration: Configuration,
        payload: bytes,
        expected: list[Any],
    ) -> BenchmarkResult:
        """Run a single configuration.

        Args:
            configuration: Algorithm and parameters to use
            payload: Serialized dataset
            expected: Dataset as deserialization should rebuild it

        Returns:
            BenchmarkResult with timing, size and correctness
        """
        codec = create_codec(configuration)

        # Time the compression
        cpu_start = time.process_time()
        start = time.perf_counter()
        compressed = codec.compress(payload)
        compress_ms = (time.perf_counter() - start) * 1000
        compress_cpu_ms = (time.process_time() - cpu_start) * 1000

        # Time the decompression
        start = time.perf_counter()
        decompressed = codec.decompress(compressed)
        decompress_ms = (time.perf_counter() - start) * 1000

        correct = self.serializer.decode(decompressed) == expected
        if not correct:
            logger.warning(f"{configuration.label}: decompressed data does not match original")

        logger.debug(
            f"{configuration.label}: {len(compressed)} bytes, "
            f"compress {compress_ms:.2f}ms, decompress {decompress_ms:.2f}ms"
        )

        return BenchmarkResult(
            label=configuration.label,
            compress_ms=compress_ms,
            decompress_ms=decompress_ms,
            compressed_size=len(compressed),
            correct=correct,
            algorithm=configuration.algorithm.value,
            library=codec.library,
            original_size=len(payload),
            compress_cpu_ms=compress_cpu_ms,
            level=configuration.level,
            strategy=configuration.strategy_name,
        )


def run_benchmark(
    dataset: Sequence[Any],
    configurations: Sequence[Configuration],
    serializer: JsonSerializer | None = None,
) -> list[BenchmarkResult]:
    """Benchmark a dataset across configurations.

    Convenience wrapper around :class:`BenchmarkHarness`.
    """
    return BenchmarkHarness(serializer).run(dataset, configurations)
