"""Milestone planning: spread feature tasks over the tier's week slots.

The plan always has exactly ``tier.milestone_slots`` entries.  With three or
more slots the first is the fixed foundation milestone and the last the fixed
polish/demo milestone, and feature tasks are dealt round-robin across the
slots in between.  With fewer slots the foundation and polish tasks fold into
the first and last slot instead of taking a slot of their own.
"""

from __future__ import annotations

from collections.abc import Sequence

from blueprint_engine.catalog import FEATURE_DEFINITIONS, ComplexityTier, FeatureKey
from blueprint_engine.catalog.tiers import (
    COLLAPSED_FIRST_FOCUS,
    COLLAPSED_LAST_FOCUS,
    COLLAPSED_SINGLE_FOCUS,
    FEATURE_FOCUS_PREFIX,
    FOUNDATION_FOCUS,
    FOUNDATION_TASKS,
    INTEGRATION_FOCUS,
    INTEGRATION_TASK,
    POLISH_FOCUS,
    POLISH_TASKS,
)

from .errors import GenerationError
from .models import Milestone


# ---------------------------------------------------------------------------
# Week ranges
# ---------------------------------------------------------------------------

def week_ranges(weeks: int, slots: int) -> list[tuple[int, int]]:
    """Split ``weeks`` into ``slots`` inclusive ``(start, end)`` ranges.

    Each slot spans ``weeks // slots`` weeks; the last slot absorbs the
    remainder.

    Examples::

        week_ranges(4, 2) -> [(1, 2), (3, 4)]
        week_ranges(8, 3) -> [(1, 2), (3, 4), (5, 8)]
    """
    if slots < 1 or slots > weeks:
        raise GenerationError("milestones", f"cannot split {weeks} weeks into {slots} slots")

    span = weeks // slots
    ranges: list[tuple[int, int]] = []
    for index in range(slots):
        start = index * span + 1
        end = weeks if index == slots - 1 else (index + 1) * span
        ranges.append((start, end))
    return ranges


def week_label(start: int, end: int) -> str:
    """Render a week range, e.g. ``Week 1–2`` or ``Week 3``."""
    if start == end:
        return f"Week {start}"
    return f"Week {start}–{end}"


# ---------------------------------------------------------------------------
# Task distribution
# ---------------------------------------------------------------------------

def _deal_tasks(
    features: Sequence[FeatureKey],
    slot_count: int,
) -> tuple[list[list[str]], list[list[FeatureKey]]]:
    """Deal every feature task round-robin into ``slot_count`` buckets.

    Returns the task buckets and, per bucket, the features that contributed
    to it (in order of first contribution).
    """
    buckets: list[list[str]] = [[] for _ in range(slot_count)]
    contributors: list[list[FeatureKey]] = [[] for _ in range(slot_count)]

    position = 0
    for key in features:
        for task in FEATURE_DEFINITIONS[key].tasks:
            slot = position % slot_count
            buckets[slot].append(task)
            if key not in contributors[slot]:
                contributors[slot].append(key)
            position += 1

    return buckets, contributors


def _feature_focus(keys: Sequence[FeatureKey]) -> str:
    return FEATURE_FOCUS_PREFIX + ", ".join(FEATURE_DEFINITIONS[key].label for key in keys)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plan_milestones(tier: ComplexityTier, features: Sequence[FeatureKey]) -> list[Milestone]:
    """Expand a complexity tier into its ordered milestone plan.

    Args:
        tier: Complexity tier fixing the week count and slot count.
        features: Selected features in canonical catalog order.  May be
            empty; the plan still has every slot.

    Returns:
        Exactly ``tier.milestone_slots`` milestones, none with an empty
        task list.
    """
    ranges = week_ranges(tier.weeks, tier.milestone_slots)
    labels = [week_label(start, end) for start, end in ranges]
    slots = len(ranges)

    if slots == 1:
        buckets, _ = _deal_tasks(features, 1)
        return [Milestone(
            label=labels[0],
            focus=COLLAPSED_SINGLE_FOCUS,
            tasks=[*FOUNDATION_TASKS, *buckets[0], *POLISH_TASKS],
        )]

    if slots == 2:
        buckets, _ = _deal_tasks(features, 2)
        return [
            Milestone(label=labels[0], focus=COLLAPSED_FIRST_FOCUS,
                      tasks=[*FOUNDATION_TASKS, *buckets[0]]),
            Milestone(label=labels[1], focus=COLLAPSED_LAST_FOCUS,
                      tasks=[*buckets[1], *POLISH_TASKS]),
        ]

    buckets, contributors = _deal_tasks(features, slots - 2)
    milestones = [Milestone(label=labels[0], focus=FOUNDATION_FOCUS, tasks=list(FOUNDATION_TASKS))]
    for index, (tasks, keys) in enumerate(zip(buckets, contributors), start=1):
        if tasks:
            milestones.append(Milestone(label=labels[index], focus=_feature_focus(keys), tasks=tasks))
        else:
            milestones.append(Milestone(label=labels[index], focus=INTEGRATION_FOCUS,
                                        tasks=[INTEGRATION_TASK]))
    milestones.append(Milestone(label=labels[-1], focus=POLISH_FOCUS, tasks=list(POLISH_TASKS)))
    return milestones
