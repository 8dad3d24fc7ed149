"""Tests for milestone planning.

Covers:
- Week range splitting and labels
- Collapsed plans for one- and two-slot tiers
- Foundation / feature / polish plans for three or more slots
- Round-robin task dealing and task coverage
"""

from __future__ import annotations

from collections import Counter

import pytest

from blueprint_engine.catalog import (
    COMPLEXITY_TIERS,
    FEATURE_DEFINITIONS,
    FEATURE_ORDER,
    Complexity,
    ComplexityTier,
    FeatureKey,
)
from blueprint_engine.catalog.tiers import (
    COLLAPSED_FIRST_FOCUS,
    COLLAPSED_LAST_FOCUS,
    COLLAPSED_SINGLE_FOCUS,
    FOUNDATION_FOCUS,
    FOUNDATION_TASKS,
    INTEGRATION_FOCUS,
    INTEGRATION_TASK,
    POLISH_FOCUS,
    POLISH_TASKS,
)
from blueprint_engine.generator import GenerationError
from blueprint_engine.generator.milestones import plan_milestones, week_label, week_ranges


pytestmark = pytest.mark.unit

AUTH_TASKS = FEATURE_DEFINITIONS[FeatureKey.AUTHENTICATION].tasks
CRUD_TASKS = FEATURE_DEFINITIONS[FeatureKey.CRUD].tasks


def _tier(weeks: int, slots: int) -> ComplexityTier:
    return ComplexityTier(
        key=Complexity.BEGINNER,
        label="custom",
        option_label="Custom",
        description="",
        weeks=weeks,
        milestone_slots=slots,
    )


# ---------------------------------------------------------------------------
# Week ranges
# ---------------------------------------------------------------------------


class TestWeekRanges:
    @pytest.mark.parametrize(
        "weeks, slots, expected",
        [
            (4, 2, [(1, 2), (3, 4)]),
            (6, 3, [(1, 2), (3, 4), (5, 6)]),
            (8, 4, [(1, 2), (3, 4), (5, 6), (7, 8)]),
            (8, 3, [(1, 2), (3, 4), (5, 8)]),
            (3, 1, [(1, 3)]),
            (3, 3, [(1, 1), (2, 2), (3, 3)]),
        ],
    )
    def test_split(self, weeks, slots, expected):
        assert week_ranges(weeks, slots) == expected

    @pytest.mark.parametrize("weeks, slots", [(4, 0), (2, 3)])
    def test_invalid_split(self, weeks, slots):
        with pytest.raises(GenerationError) as exc_info:
            week_ranges(weeks, slots)
        assert exc_info.value.component == "milestones"

    def test_ranges_are_contiguous(self):
        ranges = week_ranges(11, 4)
        assert ranges[0][0] == 1
        assert ranges[-1][1] == 11
        for (_, end), (start, _) in zip(ranges, ranges[1:]):
            assert start == end + 1


class TestWeekLabel:
    def test_range_uses_en_dash(self):
        assert week_label(1, 2) == "Week 1–2"

    def test_single_week(self):
        assert week_label(3, 3) == "Week 3"


# ---------------------------------------------------------------------------
# Collapsed plans
# ---------------------------------------------------------------------------


class TestTwoSlotPlan:
    def test_reference_plan(self):
        plan = plan_milestones(
            COMPLEXITY_TIERS[Complexity.BEGINNER],
            [FeatureKey.AUTHENTICATION, FeatureKey.CRUD],
        )
        assert [m.label for m in plan] == ["Week 1–2", "Week 3–4"]
        assert plan[0].focus == COLLAPSED_FIRST_FOCUS
        assert plan[1].focus == COLLAPSED_LAST_FOCUS
        assert plan[0].tasks == [*FOUNDATION_TASKS, AUTH_TASKS[0], AUTH_TASKS[2], CRUD_TASKS[1]]
        assert plan[1].tasks == [AUTH_TASKS[1], CRUD_TASKS[0], CRUD_TASKS[2], *POLISH_TASKS]

    def test_no_features(self):
        plan = plan_milestones(COMPLEXITY_TIERS[Complexity.BEGINNER], [])
        assert plan[0].tasks == list(FOUNDATION_TASKS)
        assert plan[1].tasks == list(POLISH_TASKS)


class TestSingleSlotPlan:
    def test_everything_in_one_milestone(self):
        plan = plan_milestones(_tier(2, 1), [FeatureKey.CRUD])
        assert len(plan) == 1
        assert plan[0].label == "Week 1–2"
        assert plan[0].focus == COLLAPSED_SINGLE_FOCUS
        assert plan[0].tasks == [*FOUNDATION_TASKS, *CRUD_TASKS, *POLISH_TASKS]

    def test_one_week_label(self):
        plan = plan_milestones(_tier(1, 1), [FeatureKey.CRUD])
        assert plan[0].label == "Week 1"


# ---------------------------------------------------------------------------
# Full plans
# ---------------------------------------------------------------------------


class TestFullPlan:
    def test_intermediate_single_feature_slot(self):
        plan = plan_milestones(
            COMPLEXITY_TIERS[Complexity.INTERMEDIATE],
            [FeatureKey.AUTHENTICATION, FeatureKey.CRUD],
        )
        assert [m.focus for m in plan] == [
            FOUNDATION_FOCUS,
            "Feature build: Authentication & Roles, CRUD Management",
            POLISH_FOCUS,
        ]
        assert plan[1].tasks == [*AUTH_TASKS, *CRUD_TASKS]
        assert plan[0].tasks == list(FOUNDATION_TASKS)
        assert plan[2].tasks == list(POLISH_TASKS)

    def test_advanced_round_robin(self):
        plan = plan_milestones(COMPLEXITY_TIERS[Complexity.ADVANCED], [FeatureKey.CRUD])
        assert [m.label for m in plan] == ["Week 1–2", "Week 3–4", "Week 5–6", "Week 7–8"]
        assert plan[1].tasks == [CRUD_TASKS[0], CRUD_TASKS[2]]
        assert plan[2].tasks == [CRUD_TASKS[1]]
        assert plan[1].focus == plan[2].focus == "Feature build: CRUD Management"

    def test_focus_names_contributing_features(self):
        plan = plan_milestones(
            COMPLEXITY_TIERS[Complexity.ADVANCED],
            [FeatureKey.FILE_UPLOAD, FeatureKey.ANALYTICS],
        )
        # Two tasks each over two slots: every slot gets one task per feature.
        assert plan[1].focus == "Feature build: File Uploads, Analytics Dashboard"
        assert plan[2].focus == "Feature build: File Uploads, Analytics Dashboard"

    def test_empty_middle_slots_get_integration_work(self):
        plan = plan_milestones(COMPLEXITY_TIERS[Complexity.ADVANCED], [])
        assert len(plan) == 4
        for milestone in plan[1:3]:
            assert milestone.focus == INTEGRATION_FOCUS
            assert milestone.tasks == [INTEGRATION_TASK]


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------


class TestPlanInvariants:
    @pytest.mark.parametrize("complexity", list(Complexity))
    @pytest.mark.parametrize(
        "features",
        [
            [FeatureKey.CRUD],
            [FeatureKey.AUTHENTICATION, FeatureKey.CRUD],
            list(FEATURE_ORDER),
        ],
    )
    def test_every_task_scheduled_exactly_once(self, complexity, features):
        plan = plan_milestones(COMPLEXITY_TIERS[complexity], features)
        scheduled = Counter(task for milestone in plan for task in milestone.tasks)
        for key in features:
            for task in FEATURE_DEFINITIONS[key].tasks:
                assert scheduled[task] == 1, task

    @pytest.mark.parametrize("complexity", list(Complexity))
    def test_slot_count_matches_tier(self, complexity):
        tier = COMPLEXITY_TIERS[complexity]
        plan = plan_milestones(tier, list(FEATURE_ORDER))
        assert len(plan) == tier.milestone_slots
        assert all(m.tasks for m in plan)

    def test_invalid_tier_raises(self):
        with pytest.raises(GenerationError):
            plan_milestones(_tier(2, 3), [FeatureKey.CRUD])
