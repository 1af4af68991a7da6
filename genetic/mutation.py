"""
🧬 Mutation Operator
Swap mutations that are only kept when they improve fitness
"""

from typing import List, Optional

from core.logger import get_logger
from .chromosome import Chromosome
from .number_context import NumberContext, NUMBER_COUNT, OPERATOR_COUNT
from .outcome import PassReport, attempt

logger = get_logger(__name__)


class MutationOperator:
    """
    Mutation over a whole population.

    Every individual is copied, the copy may get a number swap and/or an
    operator swap, and it replaces the original only if its fitness is
    strictly lower.
    """

    def __init__(
        self,
        context: NumberContext,
        number_mutation_prob: float = 0.2,
        operator_mutation_prob: float = 0.1
    ):
        """
        Initialize mutation operator.

        Args:
            context: Run context providing the random source
            number_mutation_prob: Probability of swapping two number genes
            operator_mutation_prob: Probability of swapping two operator genes
        """
        self.context = context
        self.number_mutation_prob = number_mutation_prob
        self.operator_mutation_prob = operator_mutation_prob

    def number_swap_mutation(self, chromosome: Chromosome):
        """Swap two randomly chosen number genes (possibly the same position)."""
        first = self.context.bounded_int(NUMBER_COUNT)
        second = self.context.bounded_int(NUMBER_COUNT)
        temp = chromosome.get_number_gene(first)
        chromosome.set_number_gene(first, chromosome.get_number_gene(second))
        chromosome.set_number_gene(second, temp)

    def operator_swap_mutation(self, chromosome: Chromosome):
        """Swap two randomly chosen operator genes (possibly the same position)."""
        first = self.context.bounded_int(OPERATOR_COUNT)
        second = self.context.bounded_int(OPERATOR_COUNT)
        temp = chromosome.get_operator_gene(first)
        chromosome.set_operator_gene(first, chromosome.get_operator_gene(second))
        chromosome.set_operator_gene(second, temp)

    def mutate(self, chromosome: Chromosome) -> Optional[Chromosome]:
        """
        Try a speculative mutation of a copy of the chromosome.

        Args:
            chromosome: Individual to mutate, never modified

        Returns:
            Optional[Chromosome]: The mutated copy if it is strictly fitter,
            otherwise None
        """
        candidate = chromosome.duplicate()
        mutated = False

        if self.context.uniform_float() < self.number_mutation_prob:
            self.number_swap_mutation(candidate)
            mutated = True

        if self.context.uniform_float() < self.operator_mutation_prob:
            self.operator_swap_mutation(candidate)
            mutated = True

        if mutated and candidate.fitness() < chromosome.fitness():
            return candidate
        return None

    def apply(self, population: List[Chromosome]) -> PassReport:
        """
        Run one mutation pass over the population, in place.

        Args:
            population: Population to mutate

        Returns:
            PassReport: Applied, skipped and recovered steps
        """
        report = PassReport("mutation")

        def step(i: int) -> bool:
            improved = self.mutate(population[i])
            if improved is None:
                return False
            population[i] = improved
            return True

        for i in range(len(population)):
            report.record(attempt(i, step))

        logger.debug(f"Mutation pass: improved={report.applied}, unchanged={report.skipped}, "
                     f"recovered={report.failures}")
        return report
