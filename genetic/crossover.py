"""
🔀 Crossover Operator
Uniform parity-mask crossover with permutation repair
"""

from typing import List

from core.logger import get_logger
from .chromosome import Chromosome
from .number_context import NumberContext, NUMBER_COUNT, OPERATOR_COUNT
from .outcome import PassReport, attempt
from .repair import repair

logger = get_logger(__name__)


class CrossoverOperator:
    """
    Crossover over a whole population.

    Each individual except the last is, with probability crossover_prob,
    recombined with a partner drawn uniformly from the whole population.
    The partner may be the individual itself.
    """

    def __init__(self, context: NumberContext, crossover_prob: float = 0.9):
        """
        Initialize crossover operator.

        Args:
            context: Run context providing the random source
            crossover_prob: Probability that an individual is recombined
        """
        self.context = context
        self.crossover_prob = crossover_prob

    def parity_crossover(self, first: Chromosome, second: Chromosome):
        """
        Recombine two parents into the first one.

        Even gene positions come from the first parent and odd positions
        from the second; both sequences are repaired before being written
        back. The second parent is left untouched.

        Args:
            first: Parent overwritten with the offspring
            second: Read-only crossover partner
        """
        new_numbers = [
            first.get_number_gene(i) if i % 2 == 0 else second.get_number_gene(i)
            for i in range(NUMBER_COUNT)
        ]
        new_operators = [
            first.get_operator_gene(i) if i % 2 == 0 else second.get_operator_gene(i)
            for i in range(OPERATOR_COUNT)
        ]

        new_numbers = repair(new_numbers)
        new_operators = repair(new_operators)

        first.set_number_genes(new_numbers)
        first.set_operator_genes(new_operators)

    def apply(self, population: List[Chromosome]) -> PassReport:
        """
        Run one crossover pass over the population, in place.

        Args:
            population: Population to recombine

        Returns:
            PassReport: Applied, skipped and recovered steps
        """
        report = PassReport("crossover")

        def step(i: int) -> bool:
            if self.context.uniform_float() >= self.crossover_prob:
                return False
            partner = population[self.context.bounded_int(len(population))]
            self.parity_crossover(population[i], partner)
            return True

        for i in range(len(population) - 1):
            report.record(attempt(i, step))

        logger.debug(f"Crossover pass: applied={report.applied}, skipped={report.skipped}, "
                     f"recovered={report.failures}")
        return report
