"""
🧬 Chromosome Class
Candidate solution: an order of the six numbers and of the five operator slots
"""

from typing import Any, Dict, List, Optional, Sequence

from .number_context import NUMBER_COUNT, OPERATOR_COUNT, NumberContext


class Chromosome:
    """
    Chromosome representing one candidate expression.

    The number genes are a permutation of [0, 6) and the operator genes a
    permutation of [0, 5). Fitness is computed lazily through the run's
    NumberContext and cached until a gene changes.
    """

    def __init__(
        self,
        number_order: Sequence[int],
        operator_order: Sequence[int],
        context: NumberContext
    ):
        """
        Initialize chromosome with genes.

        Args:
            number_order: Permutation of number slot indices
            operator_order: Permutation of operator slot indices
            context: Run context used for fitness evaluation
        """
        if len(number_order) != NUMBER_COUNT:
            raise ValueError(f"Expected {NUMBER_COUNT} number genes, got {len(number_order)}")
        if len(operator_order) != OPERATOR_COUNT:
            raise ValueError(f"Expected {OPERATOR_COUNT} operator genes, got {len(operator_order)}")

        self.number_order: List[int] = list(number_order)
        self.operator_order: List[int] = list(operator_order)
        self.context = context
        self._fitness: Optional[float] = None

    @classmethod
    def random(cls, context: NumberContext) -> 'Chromosome':
        """Create a chromosome with independently shuffled gene sequences."""
        return cls(context.random_number_order(), context.random_operator_order(), context)

    def duplicate(self) -> 'Chromosome':
        """Create an independent copy of the chromosome."""
        new_chromosome = Chromosome(self.number_order, self.operator_order, self.context)
        new_chromosome._fitness = self._fitness
        return new_chromosome

    def fitness(self) -> float:
        """Distance to the target, 0 for an exact match."""
        if self._fitness is None:
            self._fitness = self.context.fitness_of(self)
        return self._fitness

    def get_number_gene(self, index: int) -> int:
        return self.number_order[index]

    def set_number_gene(self, index: int, value: int):
        self.number_order[index] = value
        self._fitness = None

    def get_operator_gene(self, index: int) -> int:
        return self.operator_order[index]

    def set_operator_gene(self, index: int, value: int):
        self.operator_order[index] = value
        self._fitness = None

    def set_number_genes(self, genes: Sequence[int]):
        """Replace all number genes at once."""
        if len(genes) != NUMBER_COUNT:
            raise ValueError(f"Expected {NUMBER_COUNT} number genes, got {len(genes)}")
        self.number_order = list(genes)
        self._fitness = None

    def set_operator_genes(self, genes: Sequence[int]):
        """Replace all operator genes at once."""
        if len(genes) != OPERATOR_COUNT:
            raise ValueError(f"Expected {OPERATOR_COUNT} operator genes, got {len(genes)}")
        self.operator_order = list(genes)
        self._fitness = None

    def is_valid(self) -> bool:
        """
        Check that both gene sequences are permutations of their index ranges.

        Returns:
            bool: True if no gene is duplicated or out of range
        """
        return (
            sorted(self.number_order) == list(range(NUMBER_COUNT))
            and sorted(self.operator_order) == list(range(OPERATOR_COUNT))
        )

    def is_exact(self) -> bool:
        return self.fitness() == 0

    @property
    def value(self) -> Optional[int]:
        """Value of the encoded expression, None if it is invalid."""
        return self.context.evaluate(self.number_order, self.operator_order)

    def expression(self) -> str:
        return self.context.expression_of(self)

    def __lt__(self, other: 'Chromosome') -> bool:
        """Order by ascending fitness, lower is better."""
        return self.fitness() < other.fitness()

    def __eq__(self, other: object) -> bool:
        """Check equality based on genes."""
        if not isinstance(other, Chromosome):
            return NotImplemented
        return (
            self.number_order == other.number_order
            and self.operator_order == other.operator_order
        )

    def __hash__(self) -> int:
        return hash((tuple(self.number_order), tuple(self.operator_order)))

    def __str__(self) -> str:
        value = self.value
        value_str = "invalid" if value is None else str(value)
        return f"{self.expression()} = {value_str} (fitness={self.fitness():g})"

    def __repr__(self) -> str:
        return (f"Chromosome(numbers={self.number_order}, operators={self.operator_order}, "
                f"fitness={self.fitness():g})")

    def to_dict(self) -> Dict[str, Any]:
        """Convert chromosome to dictionary for serialization."""
        return {
            'number_order': list(self.number_order),
            'operator_order': list(self.operator_order),
            'expression': self.expression(),
            'value': self.value,
            'fitness': self.fitness()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], context: NumberContext) -> 'Chromosome':
        """Create chromosome from dictionary."""
        return cls(data['number_order'], data['operator_order'], context)
