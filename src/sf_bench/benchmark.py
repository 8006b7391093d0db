"""Throughput benchmark for the Snowflake generators.

Run with: python -m src.sf_bench.benchmark --threads 8 --count 100000
"""

import argparse
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from config.settings import settings
from src.sf_common.logging_config import setup_logging
from src.sf_generator.base import IdGenerator
from src.sf_generator.factory import config_from_settings, create_generator

logger = logging.getLogger(__name__)

DEFAULT_THREADS = 8
DEFAULT_IDS_PER_THREAD = 100_000
DEFAULT_MACHINE_ID = 0b111 << 7 | 0b1  # 897


@dataclass
class BenchmarkResult:
    threads: int
    total_ids: int
    elapsed_ms: float
    unique: bool | None  # None when the check was skipped

    @property
    def ids_per_ms(self) -> float:
        if self.elapsed_ms <= 0:
            return float(self.total_ids)
        return self.total_ids / self.elapsed_ms


def run_benchmark(
    generator: IdGenerator,
    *,
    threads: int,
    ids_per_thread: int,
    check_unique: bool = True,
) -> BenchmarkResult:
    """Drive one shared generator from `threads` workers, `ids_per_thread` calls each."""
    if threads < 1 or ids_per_thread < 1:
        raise ValueError("threads and ids_per_thread must be positive")

    def _task() -> list[int]:
        if check_unique:
            return [generator.next_id() for _ in range(ids_per_thread)]
        for _ in range(ids_per_thread):
            generator.next_id()
        return []

    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=threads) as executor:
        futures = [executor.submit(_task) for _ in range(threads)]
        batches = [f.result() for f in futures]
    elapsed_ms = (time.perf_counter() - start) * 1000

    total = threads * ids_per_thread
    unique = None
    if check_unique:
        seen: set[int] = set()
        for batch in batches:
            seen.update(batch)
        unique = len(seen) == total
    return BenchmarkResult(threads=threads, total_ids=total, elapsed_ms=elapsed_ms, unique=unique)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snowflake generator throughput benchmark")
    parser.add_argument("-t", "--threads", type=int, default=DEFAULT_THREADS, help="worker threads")
    parser.add_argument(
        "-n", "--count", type=int, default=DEFAULT_IDS_PER_THREAD, help="ids per thread"
    )
    parser.add_argument(
        "-m", "--machine-id", type=int, default=DEFAULT_MACHINE_ID, help="machine id"
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="benchmark the non-thread-safe generator (forces --threads 1)",
    )
    parser.add_argument(
        "--skip-unique-check", action="store_true", help="do not collect ids for the duplicate check"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="print debug logs")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(settings.LOG_LEVEL, args.verbose)

    threads = 1 if args.sequential else args.threads
    generator = create_generator(
        config_from_settings(settings), args.machine_id, thread_safe=not args.sequential
    )
    result = run_benchmark(
        generator,
        threads=threads,
        ids_per_thread=args.count,
        check_unique=not args.skip_unique_check,
    )
    logger.info(
        "%s: %d ids on %d thread(s) in %.1fms (%.1f ids/ms) unique=%s",
        type(generator).__name__,
        result.total_ids,
        result.threads,
        result.elapsed_ms,
        result.ids_per_ms,
        result.unique,
    )
    return 0 if result.unique is not False else 1


if __name__ == "__main__":
    raise SystemExit(main())
