#!/usr/bin/env python3
"""
console walkthrough of the seqops operators.

runs every operator over a list of integers and a list of names and logs the
results, one line per operator.

usage:
  python demo.py
  python demo.py --numbers 1 2 3 4 5 5 --other-numbers 4 5 6
  python demo.py --names alice bob charlie alice --other-names bob eve --verbose
"""

import argparse
import logging
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from seqops import S, SequenceError, default_comparer
from seqops import operators as ops

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """inputs for one demo run"""
    numbers: List[int] = field(default_factory=lambda: [1, 2, 3, 4, 5, 5])
    other_numbers: List[int] = field(default_factory=lambda: [4, 5, 6])
    names: List[str] = field(default_factory=lambda: ["Alice", "Bob", "Charlie", "Alice"])
    other_names: List[str] = field(default_factory=lambda: ["Bob", "Eve"])


def _joined(values) -> str:
    return ", ".join(str(v) for v in values)


def _single_or_error(source, predicate) -> Any:
    try:
        return ops.single(source, predicate)
    except SequenceError as e:
        return f"error: {e}"


def number_results(numbers: List[int], other: List[int]) -> List[Tuple[str, Any]]:
    return [
        ("Numbers", _joined(numbers)),
        ("All positive", ops.all_(numbers, lambda n: n > 0)),
        ("Any > 4", ops.any_(numbers, lambda n: n > 4)),
        ("Contains 3", ops.contains(numbers, 3)),
        ("Distinct ints", _joined(ops.distinct(numbers))),
        ("Element at index 2", ops.element_at(numbers, 2) if len(numbers) > 2 else "n/a"),
        ("Except (numbers - other)", _joined(ops.except_(numbers, other))),
        ("First > 2", S(numbers).to.first(lambda n: n > 2) if ops.any_(numbers, lambda n: n > 2) else "n/a"),
        ("Last even", S(numbers).to.last(lambda n: n % 2 == 0) if ops.any_(numbers, lambda n: n % 2 == 0) else "n/a"),
        ("Intersect", _joined(ops.intersect(numbers, other))),
        ("Count > 2", ops.count(numbers, lambda n: n > 2)),
        ("SequenceEqual (numbers == numbers)", ops.sequence_equal(numbers, numbers, default_comparer)),
        ("Single == 4", _single_or_error(numbers, lambda n: n == 4)),
        ("SkipWhile < 3", _joined(ops.skip_while(numbers, lambda n: n < 3))),
        ("Union", _joined(ops.union(numbers, other))),
        ("Where even", _joined(ops.where(numbers, lambda n: n % 2 == 0))),
    ]


def name_results(names: List[str], other: List[str]) -> List[Tuple[str, Any]]:
    starts_with_a = lambda s: s.startswith("A")
    has_a = S(names).to.any(starts_with_a)
    return [
        ("Names", _joined(names)),
        ("Contains 'Bob'", ops.contains(names, "Bob")),
        ("Distinct strings", _joined(ops.distinct(names))),
        ("First starting with A", ops.first(names, starts_with_a) if has_a else "n/a"),
        ("Last starting with A", ops.last(names, starts_with_a) if has_a else "n/a"),
        ("Intersect names", _joined(ops.intersect(names, other))),
        ("Except names - other", _joined(ops.except_(names, other))),
        ("Union names", _joined(ops.union(names, other))),
        ("Count length > 3", ops.count(names, lambda s: len(s) > 3)),
        ("SequenceEqual (names == names)", ops.sequence_equal(names, names, default_comparer)),
        ("Single == 'Charlie'", _single_or_error(names, lambda s: s == "Charlie")),
        ("SkipWhile length < 5", _joined(ops.skip_while(names, lambda s: len(s) < 5))),
        ("Where contains 'a'", _joined(ops.where(names, lambda s: 'a' in s or 'A' in s))),
    ]


def run_demo(config: DemoConfig) -> List[Tuple[str, Any]]:
    """log every operator result and return the logged (label, value) pairs"""
    results = number_results(config.numbers, config.other_numbers)
    results += name_results(config.names, config.other_names)
    for label, value in results:
        logger.info(f"{label}: {value}")
    return results


def create_cli_interface() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Walk through the seqops operators')
    defaults = DemoConfig()
    parser.add_argument('--numbers', type=int, nargs='*', default=defaults.numbers,
                        help='Integer sequence (default: 1 2 3 4 5 5)')
    parser.add_argument('--other-numbers', type=int, nargs='*', default=defaults.other_numbers,
                        help='Second integer sequence for set operations (default: 4 5 6)')
    parser.add_argument('--names', nargs='*', default=defaults.names,
                        help='String sequence (default: Alice Bob Charlie Alice)')
    parser.add_argument('--other-names', nargs='*', default=defaults.other_names,
                        help='Second string sequence for set operations (default: Bob Eve)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main(argv=None):
    """main entry point for the demo"""
    args = create_cli_interface().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = DemoConfig(
        numbers=args.numbers,
        other_numbers=args.other_numbers,
        names=args.names,
        other_names=args.other_names,
    )
    run_demo(config)


if __name__ == "__main__":
    main()
