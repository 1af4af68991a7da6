"""
🩹 Gene Repair
Restores the permutation property of gene sequences broken by crossover
"""

from typing import List


def smallest_unused(used: List[bool]) -> int:
    """Return the smallest gene value not yet marked as used, -1 if none."""
    for value, is_used in enumerate(used):
        if not is_used:
            return value
    return -1


def repair(genes: List[int]) -> List[int]:
    """
    Replace duplicated genes with the smallest unused legal value.

    The sequence is scanned left to right and modified in place, so the
    result is fully determined by the input. Example:

        parent 1  : 1 0 3 4 5 2
        parent 2  : 0 1 2 5 3 4
        crossover : 1 1 3 5 5 4
        repaired  : 1 0 3 5 2 4

    The second 1 becomes 0 and the second 5 becomes 2.

    Args:
        genes: Gene sequence over [0, len(genes)) possibly holding duplicates

    Returns:
        List[int]: The same list, now a permutation of [0, len(genes))
    """
    size = len(genes)
    used = [False] * size

    for i in range(size):
        if not 0 <= genes[i] < size:
            raise ValueError(f"Gene value {genes[i]} outside of [0, {size})")
        if used[genes[i]]:
            genes[i] = smallest_unused(used)
        used[genes[i]] = True

    return genes
