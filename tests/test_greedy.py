import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.greedy import (
    JobSchedule,
    coin_change,
    fractional_knapsack,
    job_sequencing,
    select_activities,
)

activity_lists = st.lists(
    st.tuples(st.integers(0, 50), st.integers(0, 20)).map(lambda p: (p[0], p[0] + p[1])),
    max_size=15,
)


def test_disjoint_activities_all_selected_in_order():
    assert select_activities([(1, 2), (3, 4)]) == [1, 2]


def test_empty_activities():
    assert select_activities([]) == []


@given(activity_lists)
def test_selected_activities_are_compatible(acts):
    ranks = select_activities(acts)
    chosen = sorted((r, acts[i]) for i, r in enumerate(ranks) if r)
    assert [r for r, _ in chosen] == list(range(1, len(chosen) + 1))
    for (_, (_, prev_end)), (_, (start, _)) in zip(chosen, chosen[1:]):
        assert start > prev_end
    if acts:
        assert chosen


@given(activity_lists)
def test_rejected_activities_conflict_with_a_selected_one(acts):
    ranks = select_activities(acts)
    selected = [acts[i] for i, r in enumerate(ranks) if r]
    for i, r in enumerate(ranks):
        if r == 0:
            s, e = acts[i]
            assert any(not (s > e2 or s2 > e) for s2, e2 in selected)


def test_coin_change_us_coins():
    assert coin_change([1, 5, 10, 25], 63) == [3, 0, 1, 2]


@given(
    st.lists(st.integers(1, 50), min_size=1, max_size=6),
    st.integers(0, 1000),
)
def test_coin_change_never_exceeds_target(denoms, target):
    counts = coin_change(denoms, target)
    paid = sum(c * d for c, d in zip(counts, denoms))
    assert 0 <= target - paid < min(denoms)
    if 1 in denoms:
        assert paid == target


def test_coin_change_rejects_zero_denomination():
    with pytest.raises(ValueError):
        coin_change([0, 1], 5)


def test_coin_change_rejects_negative_target():
    with pytest.raises(ValueError):
        coin_change([1], -1)


def test_fractional_knapsack_classic():
    result = fractional_knapsack([(60, 10), (100, 20), (120, 30)], 50)
    assert result.fractions[:2] == [1.0, 1.0]
    assert result.profit == pytest.approx(240)


@given(
    st.lists(
        st.tuples(st.integers(0, 100), st.integers(1, 30)), min_size=1, max_size=8
    ),
    st.integers(0, 100),
)
def test_fractional_knapsack_invariants(items, capacity):
    result = fractional_knapsack(items, capacity)
    assert all(0 <= f <= 1 for f in result.fractions)
    weight = sum(f * w for f, (_, w) in zip(result.fractions, items))
    assert weight <= capacity + 1e-9
    profit = sum(f * p for f, (p, _) in zip(result.fractions, items))
    assert result.profit == pytest.approx(profit)
    total_weight = sum(w for _, w in items)
    if total_weight <= capacity:
        assert result.fractions == [1.0] * len(items)


def test_fractional_knapsack_rejects_zero_weight():
    with pytest.raises(ValueError):
        fractional_knapsack([(1, 0)], 10)


def test_job_sequencing_example():
    schedule = job_sequencing([(100, 2), (19, 1), (27, 2), (25, 1), (15, 3)])
    assert schedule == JobSchedule([2, 0, 4], 142)


def test_job_sequencing_empty():
    schedule = job_sequencing([])
    assert schedule.slots == [] and schedule.profit == 0


@given(
    st.lists(st.tuples(st.integers(0, 100), st.integers(1, 6)), max_size=10)
)
def test_job_sequencing_invariants(jobs):
    schedule = job_sequencing(jobs)
    assert len(schedule.slots) == max((d for _, d in jobs), default=0)
    placed = schedule.scheduled
    assert len(placed) == len(set(placed))
    for slot, job in enumerate(schedule.slots, start=1):
        if job is not None:
            assert slot <= jobs[job][1]
    assert schedule.profit == sum(jobs[j][0] for j in placed)