"""
🧬 Genetic Algorithm Module
Genetic search for the six-number arithmetic game
"""

from .genetic_solver import GeneticSolver, SolveResult, SolverStatus, GenerationStats, solve
from .chromosome import Chromosome
from .crossover import CrossoverOperator
from .mutation import MutationOperator
from .selection import SelectionOperator
from .number_context import NumberContext, OPERATOR_SLOTS
from .outcome import PassReport, StepOutcome, StepStatus
from .repair import repair

__all__ = [
    'GeneticSolver',
    'SolveResult',
    'SolverStatus',
    'GenerationStats',
    'solve',
    'Chromosome',
    'CrossoverOperator',
    'MutationOperator',
    'SelectionOperator',
    'NumberContext',
    'OPERATOR_SLOTS',
    'PassReport',
    'StepOutcome',
    'StepStatus',
    'repair'
]
