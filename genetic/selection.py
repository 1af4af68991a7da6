"""
🎯 Selection
Ascending-fitness ranking and best-ever elitism
"""

from typing import List, Optional

from .chromosome import Chromosome


class SelectionOperator:
    """
    Ranking helpers used by the generational loop.

    The population is kept sorted by ascending fitness; the best-ever
    individual is held as an independent copy outside of it.
    """

    def rank(self, population: List[Chromosome]):
        """Sort the population in place, best (lowest fitness) first. Stable."""
        population.sort()

    def exact_solution(self, population: List[Chromosome]) -> Optional[Chromosome]:
        """
        Find an individual that reaches the target exactly.

        Args:
            population: Population of chromosomes

        Returns:
            Optional[Chromosome]: First individual with fitness 0, or None
        """
        for chromosome in population:
            if chromosome.is_exact():
                return chromosome
        return None

    def elite(self, population: List[Chromosome], best: Optional[Chromosome]) -> Chromosome:
        """
        Return the best-ever individual after a generation.

        The sorted population's head replaces the current best only if it
        is strictly fitter; the returned chromosome is never shared with
        the population.

        Args:
            population: Population sorted by ascending fitness
            best: Best-ever chromosome so far, None before the first ranking
        """
        if best is None or population[0] < best:
            return population[0].duplicate()
        return best
