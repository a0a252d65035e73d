"""
Accumulator Benchmark

Usage:
  python -m rsa_accum.bench [--items 100 1000] [--item-size 32] [--mode thread]
"""

import argparse
import sys
import time
from typing import List, Optional

from Crypto.Random import get_random_bytes

from .accumulator import accumulate, verify
from .config import get_settings
from .key_generator import generate_key, get_key_info
from .logging_config import get_logger, setup_logging
from .parallel import WORKER_MODES

logger = get_logger(__name__)


def make_items(count: int, size: int) -> List[bytes]:
    """Random items of a fixed size."""
    return [get_random_bytes(size) for _ in range(count)]


def run_benchmark(counts: List[int], item_size: int, mode: str, workers: Optional[int], repeat: int) -> int:
    start = time.perf_counter()
    public_key, private_key = generate_key()
    logger.info(f"Key generated in {time.perf_counter() - start:.2f}s: {get_key_info(public_key)}")

    for count in counts:
        items = make_items(count, item_size)
        best = None
        for _ in range(repeat):
            start = time.perf_counter()
            result = accumulate(private_key, items, max_workers=workers, worker_mode=mode)
            elapsed = time.perf_counter() - start
            best = elapsed if best is None else min(best, elapsed)

        value, witnesses = result.astuple()
        if len(witnesses) != count or not verify(public_key, value, witnesses[0], items[0]):
            logger.error(f"Witness 0 failed to verify for batch of {count}")
            return 1

        throughput = count * item_size / best
        print(f"Accumulate{count}\t{best:.3f}s\t{throughput / 1e3:.1f} kB/s\t({mode})")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Benchmark RSA accumulator batch accumulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m rsa_accum.bench --items 100 1000
  python -m rsa_accum.bench --items 10000 --mode process --workers 8
        """,
    )
    parser.add_argument(
        "--items",
        type=int,
        nargs="+",
        default=[100, 1000],
        help="Batch sizes to accumulate (default: 100 1000)",
    )
    parser.add_argument(
        "--item-size",
        type=int,
        default=32,
        help="Bytes per random item (default: 32)",
    )
    parser.add_argument(
        "--mode",
        choices=WORKER_MODES,
        default=settings.worker_mode,
        help=f"Worker mode (default: {settings.worker_mode})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.max_workers,
        help="Worker pool size (default: executor default)",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=1,
        help="Runs per batch size; the fastest is reported (default: 1)",
    )

    args = parser.parse_args(argv)

    if any(count <= 0 for count in args.items) or args.item_size <= 0 or args.repeat <= 0:
        parser.error("--items, --item-size and --repeat must be positive")

    setup_logging(settings)
    return run_benchmark(args.items, args.item_size, args.mode, args.workers, args.repeat)


if __name__ == "__main__":
    sys.exit(main())
