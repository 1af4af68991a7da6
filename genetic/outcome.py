"""
📋 Step Outcomes
Result of a single crossover or mutation attempt within a population pass
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional


class StepStatus(Enum):
    """What happened to one individual during a pass"""
    APPLIED = "applied"
    SKIPPED = "skipped"
    RECOVERED = "recovered"


@dataclass
class StepOutcome:
    index: int
    status: StepStatus
    error: Optional[Exception] = None


@dataclass
class PassReport:
    """Outcomes collected over one crossover or mutation pass."""

    name: str
    applied: int = 0
    skipped: int = 0
    recovered: List[StepOutcome] = field(default_factory=list)

    def record(self, outcome: StepOutcome):
        if outcome.status is StepStatus.APPLIED:
            self.applied += 1
        elif outcome.status is StepStatus.SKIPPED:
            self.skipped += 1
        else:
            self.recovered.append(outcome)

    @property
    def failures(self) -> int:
        return len(self.recovered)


def attempt(index: int, step: Callable[[int], bool]) -> StepOutcome:
    """
    Run one step of a population pass.

    A failing step is turned into a RECOVERED outcome so that the pass can
    move on to the next individual; the population entry is left as it was.

    Args:
        index: Population index the step works on
        step: Callable returning True when it changed the population

    Returns:
        StepOutcome: Outcome of the step
    """
    try:
        changed = step(index)
    except Exception as e:
        return StepOutcome(index, StepStatus.RECOVERED, e)
    return StepOutcome(index, StepStatus.APPLIED if changed else StepStatus.SKIPPED)
