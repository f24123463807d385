"""Compare insertion times of the dynamic array and the linked list."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from dsakit.dynarray import DynamicArray
from dsakit.linkedlist import LinkedList

TEST_DATA_SIZE = 1000000
RAND_MAX = 2**31 - 1


@dataclass(frozen=True)
class InsertTiming:
    """Total and longest single-insert CPU time, in seconds."""

    total: float
    maximum: float


def generate_random_data(count: int, seed: int | None = None) -> list[int]:
    """Return count random integers between 0 and RAND_MAX."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = random.Random(seed)
    return [rng.randint(0, RAND_MAX) for _ in range(count)]


def time_inserts(insert: Callable[[Any], Any], data: Iterable[Any]) -> InsertTiming:
    """Call insert on each item, timing every call."""
    total = 0.0
    maximum = 0.0
    for item in data:
        start = time.process_time()
        insert(item)
        elapsed = time.process_time() - start
        total += elapsed
        maximum = max(maximum, elapsed)
    return InsertTiming(total, maximum)


def _report(title: str, container: str, timing: InsertTiming) -> str:
    return (
        f"For {title}:\n\n"
        f"Total amount of time to insert all data: {timing.total:.6f}\n"
        "The maximum amount of time it takes to insert any single element "
        f"into the {container}: {timing.maximum:.6f}"
    )


def main(argv: list[str] | None = None) -> int:
    """Time inserting random data into a dynamic array and a linked list."""
    parser = argparse.ArgumentParser(
        prog="benchmark",
        description="Compare insertion times of a dynamic array and a linked list.",
    )
    parser.add_argument("--size", type=int, default=TEST_DATA_SIZE, help="values to insert")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("--size must not be negative")

    data = generate_random_data(args.size, args.seed)
    array_timing = time_inserts(DynamicArray().insert, data)
    print(_report("dynamic arrays", "dynamic array", array_timing))
    print()
    list_timing = time_inserts(LinkedList().insert, data)
    print(_report("linked lists", "linked list", list_timing))
    return 0


if __name__ == "__main__":
    sys.exit(main())