"""
🔢 Number Context
Per-run numbers, target, random source and expression evaluation
"""

import math
import operator
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from core.logger import get_logger

logger = get_logger(__name__)

NUMBER_COUNT = 6
OPERATOR_COUNT = 5

# The five fixed operator slots an operator gene can point at
OPERATOR_SLOTS: Tuple[str, ...] = ("+", "-", "*", "/", "+")


def _exact_division(left: int, right: int) -> Optional[int]:
    if right == 0 or left % right != 0:
        return None
    return left // right


_OPERATIONS: Dict[str, Callable[[int, int], Optional[int]]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _exact_division,
}


class NumberContext:
    """
    Numbers, target and random source shared by every chromosome of one run.

    One context is built per solver run; chromosomes keep a reference to it
    so that their fitness can be computed without global state.
    """

    def __init__(self, numbers: Sequence[int], target: int, seed: Optional[int] = None):
        """
        Initialize the context.

        Args:
            numbers: The six numbers available to the expression
            target: Value the expression should reach
            seed: Seed for the random generator, None for OS entropy
        """
        self.numbers: Tuple[int, ...] = ()
        self.target = 0
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.evaluation_count = 0
        self.initialize(numbers, target)

    def initialize(self, numbers: Sequence[int], target: int):
        """Reset the context for a new run."""
        numbers = tuple(numbers)
        if len(numbers) != NUMBER_COUNT:
            raise ValueError(f"Exactly {NUMBER_COUNT} numbers are required, got {len(numbers)}")
        for number in numbers:
            if isinstance(number, bool) or not isinstance(number, (int, np.integer)):
                raise ValueError(f"Numbers must be integers, got {number!r}")
        if isinstance(target, bool) or not isinstance(target, (int, np.integer)):
            raise ValueError(f"Target must be an integer, got {target!r}")

        self.numbers = tuple(int(n) for n in numbers)
        self.target = int(target)
        self.evaluation_count = 0
        logger.debug(f"Context initialized with numbers={self.numbers}, target={self.target}")

    # Random source

    def uniform_float(self) -> float:
        """Random float in [0, 1)."""
        return float(self.rng.random())

    def bounded_int(self, bound: int) -> int:
        """Random integer in [0, bound)."""
        if bound <= 0:
            raise ValueError(f"Bound must be positive, got {bound}")
        return int(self.rng.integers(bound))

    def random_number_order(self) -> List[int]:
        return [int(i) for i in self.rng.permutation(NUMBER_COUNT)]

    def random_operator_order(self) -> List[int]:
        return [int(i) for i in self.rng.permutation(OPERATOR_COUNT)]

    # Evaluation

    def evaluate(self, number_order: Sequence[int], operator_order: Sequence[int]) -> Optional[int]:
        """
        Evaluate the encoded expression strictly left to right.

        Args:
            number_order: Order in which the numbers are consumed
            operator_order: Operator slot used between consecutive numbers

        Returns:
            Optional[int]: Expression value, None when a division is not exact
        """
        value = self.numbers[number_order[0]]
        for step, slot in enumerate(operator_order):
            value = _OPERATIONS[OPERATOR_SLOTS[slot]](value, self.numbers[number_order[step + 1]])
            if value is None:
                return None
        return value

    def fitness_of(self, chromosome) -> float:
        """
        Distance between the chromosome's expression value and the target.

        Invalid expressions, and distances too large for a float, score
        infinity; 0 is an exact match.
        """
        self.evaluation_count += 1
        value = self.evaluate(chromosome.number_order, chromosome.operator_order)
        if value is None:
            return math.inf
        try:
            return float(abs(value - self.target))
        except OverflowError:
            return math.inf

    def expression_of(self, chromosome) -> str:
        """Render the chromosome as a parenthesized left-to-right expression."""
        number_order = chromosome.number_order
        text = str(self.numbers[number_order[0]])
        for step, slot in enumerate(chromosome.operator_order):
            operand = self.numbers[number_order[step + 1]]
            text = f"{text} {OPERATOR_SLOTS[slot]} {operand}"
            if step < OPERATOR_COUNT - 1:
                text = f"({text})"
        return text
