#!/usr/bin/env python3
"""
pullq demo
walks a binary tree and an endless random number source through the same
combinators. neither source is part of the library: each one only provides
pull_next(), which is all a PullIterator needs.
"""

import argparse
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Optional

import numpy as np

from pullq import EXHAUSTED, Producible, PullIterator, from_mapping, iterate

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """configuration for the demo run"""
    seed: Optional[int] = None
    sample_count: int = 10
    random_max: int = 10
    step: int = 2


@dataclass
class Node:
    value: int
    left: Optional['Node'] = None
    right: Optional['Node'] = None


class PreorderWalker(Producible[Node]):
    """depth-first, left-first traversal of a binary tree"""

    def __init__(self, root: Optional[Node]):
        self._pending: Deque[Node] = deque([root] if root is not None else [])

    def pull_next(self) -> Any:
        if not self._pending:
            return EXHAUSTED
        node = self._pending.popleft()
        # right goes in first so left is visited first
        if node.right is not None:
            self._pending.appendleft(node.right)
        if node.left is not None:
            self._pending.appendleft(node.left)
        return node


class RandomIntSource(Producible[int]):
    """endless uniform integers in [0, upper)"""

    def __init__(self, upper: int, seed: Optional[int] = None):
        if upper < 1:
            raise ValueError(f"upper bound must be at least 1, got {upper}")
        self._upper = upper
        self._rng = np.random.default_rng(seed)

    def pull_next(self) -> int:
        return int(self._rng.integers(0, self._upper))


def sample_tree() -> Node:
    return Node(5,
                Node(3, Node(2), Node(4)),
                Node(9, Node(7), Node(10, None, Node(11))))


def tree_values(root: Node) -> PullIterator[int]:
    return iterate(PreorderWalker(root)).map(lambda node: node.value)


def run_demo(config: DemoConfig) -> None:
    root = sample_tree()

    print("preorder:        ", tree_values(root).collect())
    print("reversed:        ", tree_values(root).reverse().collect())
    print("greater than 5:  ", tree_values(root).filter(lambda v: v > 5).collect())
    print(f"step by {config.step}:       ", tree_values(root).step_by(config.step).collect())

    # take() first, the source never ends
    randoms = iterate(RandomIntSource(config.random_max, config.seed))
    even, odd = randoms.take(config.sample_count).partition(lambda i: i % 2 == 0)
    print("random even:     ", even.collect())
    print("random odd:      ", odd.collect())

    inventory = {'apples': 3, 'pears': 0, 'plums': 12}
    total = from_mapping(inventory).to.aggregate(lambda a, b: a + b, 0)
    print("inventory total: ", total)
    logger.debug("demo finished with config %s", config)


def create_cli_interface() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='pullq combinator demo')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the random source')
    parser.add_argument('--count', type=int, default=10, help='Random samples to take (default: 10)')
    parser.add_argument('--max', type=int, default=10, help='Exclusive upper bound for random samples (default: 10)')
    parser.add_argument('--step', type=int, default=2, help='Step for step_by (default: 2)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main():
    """main entry point for the demo"""
    args = create_cli_interface().parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = DemoConfig(
        seed=args.seed,
        sample_count=args.count,
        random_max=args.max,
        step=args.step,
    )
    run_demo(config)


if __name__ == "__main__":
    main()
