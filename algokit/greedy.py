"""Greedy algorithms: activity selection, coin change, knapsack, job sequencing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class KnapsackResult:
    """How much of each item goes into the bag, and the profit it earns."""

    fractions: list[float]
    profit: float


@dataclass(frozen=True)
class JobSchedule:
    """Time slots 1..len(slots), each holding a job index or None, and the total profit."""

    slots: list[int | None]
    profit: int

    @property
    def scheduled(self) -> list[int]:
        """Indices of the scheduled jobs in slot order."""
        return [job for job in self.slots if job is not None]


def select_activities(activities: Iterable[tuple[int, int]]) -> list[int]:
    """Pick compatible activities greedily by earliest finish time.

    ``activities`` holds ``(start, end)`` pairs.  The result has one entry per
    activity: its position (1, 2, ...) in the selection, or 0 if not chosen.
    An activity is compatible when it starts strictly after the previous
    selected one ends.
    """
    acts = list(activities)
    order = sorted(range(len(acts)), key=lambda i: (acts[i][1], acts[i][0]))
    ranks = [0] * len(acts)
    rank = 0
    last_end: int | None = None
    for i in order:
        start, end = acts[i]
        if last_end is None or start > last_end:
            rank += 1
            ranks[i] = rank
            last_end = end
    return ranks


def coin_change(denominations: Iterable[int], target: int) -> list[int]:
    """Return how many coins of each denomination the greedy method uses.

    Larger denominations are used first; any amount that cannot be made is
    left over.
    """
    denoms = list(denominations)
    if any(d <= 0 for d in denoms):
        raise ValueError("denominations must be positive")
    if target < 0:
        raise ValueError("target must be non-negative")
    counts = [0] * len(denoms)
    for i in sorted(range(len(denoms)), key=lambda i: -denoms[i]):
        counts[i], target = divmod(target, denoms[i])
    return counts


def fractional_knapsack(
    items: Iterable[tuple[float, float]], capacity: float
) -> KnapsackResult:
    """Fill a bag with ``(profit, weight)`` items by best profit per weight.

    The last item that does not fit whole is taken in part.
    """
    stock = list(items)
    if any(weight <= 0 for _, weight in stock):
        raise ValueError("weights must be positive")
    order = sorted(range(len(stock)), key=lambda i: -(stock[i][0] / stock[i][1]))
    fractions = [0.0] * len(stock)
    profit = 0.0
    remaining = capacity
    for i in order:
        if remaining <= 0:
            break
        item_profit, weight = stock[i]
        if remaining / weight >= 1:
            fractions[i] = 1.0
            remaining -= weight
            profit += item_profit
        else:
            fractions[i] = remaining / weight
            remaining = 0
            profit += item_profit * fractions[i]
    return KnapsackResult(fractions, profit)


def job_sequencing(jobs: Iterable[tuple[int, int]]) -> JobSchedule:
    """Schedule unit-time ``(profit, deadline)`` jobs for the greatest profit.

    Jobs are taken by descending profit and placed in the latest free slot
    no later than their deadline.
    """
    work = list(jobs)
    horizon = max(max((deadline for _, deadline in work), default=0), 0)
    slots: list[int | None] = [None] * horizon
    total = 0
    for i in sorted(range(len(work)), key=lambda i: -work[i][0]):
        profit, deadline = work[i]
        for slot in range(min(deadline, horizon), 0, -1):
            if slots[slot - 1] is None:
                slots[slot - 1] = i
                total += profit
                break
    return JobSchedule(slots, total)