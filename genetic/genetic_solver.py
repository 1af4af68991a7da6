"""
🧬 Genetic Solver
Generational loop searching for an expression of six numbers closest to a target
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np

from core.config import Settings
from core.logger import get_solver_logger
from .chromosome import Chromosome
from .crossover import CrossoverOperator
from .mutation import MutationOperator
from .number_context import NumberContext
from .outcome import PassReport
from .selection import SelectionOperator

GenerationCallback = Callable[[int, List[Chromosome], Chromosome], None]


class SolverStatus(Enum):
    """Terminal state of a solver run"""
    EXACT = "exact"
    MAX_GENERATIONS = "max_generations"


@dataclass
class GenerationStats:
    generation: int
    best_fitness: float
    best_ever_fitness: float
    mean_fitness: Optional[float]
    crossover_failures: int = 0
    mutation_failures: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'generation': self.generation,
            'best_fitness': self.best_fitness,
            'best_ever_fitness': self.best_ever_fitness,
            'mean_fitness': self.mean_fitness,
            'crossover_failures': self.crossover_failures,
            'mutation_failures': self.mutation_failures
        }


@dataclass
class SolveResult:
    """Outcome of one solver run."""

    best: Chromosome
    generations: int
    elapsed_ms: float
    status: SolverStatus
    numbers: List[int]
    target: int
    history: List[GenerationStats] = field(default_factory=list)

    @property
    def is_exact(self) -> bool:
        return self.best.fitness() == 0

    @property
    def expression(self) -> str:
        return self.best.expression()

    @property
    def value(self) -> Optional[int]:
        return self.best.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            'numbers': list(self.numbers),
            'target': self.target,
            'status': self.status.value,
            'generations': self.generations,
            'elapsed_ms': self.elapsed_ms,
            'best': self.best.to_dict(),
            'history': [stats.to_dict() for stats in self.history]
        }


class GeneticSolver:
    """
    Genetic algorithm solver for the numbers game.

    The solver only holds its configuration; every call to solve() builds a
    fresh NumberContext and population, so runs never share state.
    """

    def __init__(
        self,
        population_size: int = 1000,
        max_generations: int = 1000,
        crossover_prob: float = 0.9,
        number_mutation_prob: float = 0.2,
        operator_mutation_prob: float = 0.1,
        random_seed: Optional[int] = None
    ):
        """
        Initialize Genetic Solver.

        Args:
            population_size: Number of chromosomes in population
            max_generations: Maximum number of generations
            crossover_prob: Probability that an individual is recombined
            number_mutation_prob: Probability of a number swap per individual
            operator_mutation_prob: Probability of an operator swap per individual
            random_seed: Random seed for reproducibility
        """
        if population_size < 1:
            raise ValueError(f"population_size must be at least 1, got {population_size}")
        if max_generations < 1:
            raise ValueError(f"max_generations must be at least 1, got {max_generations}")
        for name, prob in (('crossover_prob', crossover_prob),
                           ('number_mutation_prob', number_mutation_prob),
                           ('operator_mutation_prob', operator_mutation_prob)):
            if not 0.0 <= prob <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {prob}")

        self.population_size = population_size
        self.max_generations = max_generations
        self.crossover_prob = crossover_prob
        self.number_mutation_prob = number_mutation_prob
        self.operator_mutation_prob = operator_mutation_prob
        self.random_seed = random_seed

    @classmethod
    def from_settings(cls, settings: Settings) -> 'GeneticSolver':
        """Build a solver from the configuration layer."""
        return cls(
            population_size=settings.population_size,
            max_generations=settings.max_generations,
            crossover_prob=settings.crossover_prob,
            number_mutation_prob=settings.number_mutation_prob,
            operator_mutation_prob=settings.operator_mutation_prob,
            random_seed=settings.random_seed
        )

    def initialize_population(self, context: NumberContext) -> List[Chromosome]:
        """
        Initialize population with random chromosomes.

        Args:
            context: Run context

        Returns:
            List[Chromosome]: Initial population
        """
        return [Chromosome.random(context) for _ in range(self.population_size)]

    def solve(
        self,
        numbers: Sequence[int],
        target: int,
        on_generation: Optional[GenerationCallback] = None
    ) -> SolveResult:
        """
        Search for the expression closest to the target.

        Args:
            numbers: The six numbers to combine
            target: Value to reach
            on_generation: Observer called after each generation with the
                generation number, the sorted population and the best-ever
                chromosome

        Returns:
            SolveResult: Best chromosome found and run statistics
        """
        context = NumberContext(numbers, target, seed=self.random_seed)
        logger = get_solver_logger(context.numbers, context.target)

        crossover = CrossoverOperator(context, self.crossover_prob)
        mutation = MutationOperator(context, self.number_mutation_prob, self.operator_mutation_prob)
        selection = SelectionOperator()

        start_time = time.perf_counter()

        population = self.initialize_population(context)
        selection.rank(population)
        best = selection.elite(population, None)

        logger.info(f"Starting genetic search: population={self.population_size}, "
                    f"max_generations={self.max_generations}, initial best={best.fitness():g}")

        status = SolverStatus.MAX_GENERATIONS
        history: List[GenerationStats] = []
        generation = 0

        while generation < self.max_generations:
            generation += 1

            crossover_report = crossover.apply(population)
            mutation_report = mutation.apply(population)
            self._log_recovered(logger, generation, crossover_report)
            self._log_recovered(logger, generation, mutation_report)

            selection.rank(population)

            # An exact individual ends the search right away
            exact = selection.exact_solution(population)
            if exact is not None:
                best = exact.duplicate()
            else:
                previous_fitness = best.fitness()
                best = selection.elite(population, best)
                if best.fitness() < previous_fitness:
                    logger.info(f"Generation {generation}: best improved to {best.fitness():g} ({best})")

            history.append(self._generation_stats(
                generation, population, best, crossover_report, mutation_report
            ))
            logger.debug(f"Generation {generation}: population best={population[0].fitness():g}, "
                         f"best ever={best.fitness():g}")

            if on_generation is not None:
                on_generation(generation, population, best)

            if exact is not None or best.is_exact():
                status = SolverStatus.EXACT
                break

        elapsed_ms = (time.perf_counter() - start_time) * 1000.0

        logger.info(f"GENERATION: {generation} ELAPSED: {elapsed_ms:.0f} ms BEST: {best}")

        return SolveResult(
            best=best,
            generations=generation,
            elapsed_ms=elapsed_ms,
            status=status,
            numbers=list(context.numbers),
            target=context.target,
            history=history
        )

    def _generation_stats(
        self,
        generation: int,
        population: List[Chromosome],
        best: Chromosome,
        crossover_report: PassReport,
        mutation_report: PassReport
    ) -> GenerationStats:
        fitnesses = np.array([c.fitness() for c in population], dtype=np.float64)
        finite = fitnesses[np.isfinite(fitnesses)]
        return GenerationStats(
            generation=generation,
            best_fitness=float(fitnesses[0]),
            best_ever_fitness=best.fitness(),
            mean_fitness=float(np.mean(finite)) if finite.size else None,
            crossover_failures=crossover_report.failures,
            mutation_failures=mutation_report.failures
        )

    @staticmethod
    def _log_recovered(logger, generation: int, report: PassReport):
        for outcome in report.recovered:
            logger.error(
                f"Generation {generation}: {report.name} of individual {outcome.index} skipped: "
                f"{outcome.error}",
                exc_info=outcome.error
            )


def solve(numbers: Sequence[int], target: int, **solver_kwargs) -> SolveResult:
    """
    Run the genetic solver once.

    Args:
        numbers: The six numbers to combine
        target: Value to reach
        **solver_kwargs: GeneticSolver parameters

    Returns:
        SolveResult: Best chromosome found and run statistics
    """
    return GeneticSolver(**solver_kwargs).solve(numbers, target)
