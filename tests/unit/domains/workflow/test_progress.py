"""
Unit tests for workflow progress calculation.
"""

import pytest

from ricebikes.domains.workflow.domain.progress import calculate_progress, round_half_up


@pytest.mark.unit
def test_round_half_up_matches_shop_rounding():
    assert round_half_up(12.5) == 13
    assert round_half_up(37.5) == 38
    assert round_half_up(62.5) == 63
    assert round_half_up(33.333) == 33
    assert round_half_up(66.667) == 67


@pytest.mark.unit
def test_progress_of_fresh_workflow(make_steps):
    steps = make_steps(completed=0)

    progress = calculate_progress(steps)

    assert progress.total_steps == 4
    assert progress.completed_steps == 0
    assert progress.progress_percentage == 0
    assert progress.current_step is steps[0]
    assert progress.is_workflow_complete is False


@pytest.mark.unit
def test_completing_first_step_gives_quarter_progress(make_steps):
    steps = make_steps(completed=1)

    progress = calculate_progress(steps)

    assert progress.completed_steps == 1
    assert progress.progress_percentage == 25
    assert progress.current_step.step_order == 2
    assert progress.current_step.step_name == "Build"


@pytest.mark.unit
def test_all_steps_completed(make_steps):
    progress = calculate_progress(make_steps(completed=4))

    assert progress.progress_percentage == 100
    assert progress.current_step is None
    assert progress.is_workflow_complete is True


@pytest.mark.unit
def test_empty_workflow():
    progress = calculate_progress([])

    assert progress.total_steps == 0
    assert progress.progress_percentage == 0
    assert progress.current_step is None
    assert progress.is_workflow_complete is False
    assert progress.steps_summary == []


@pytest.mark.unit
def test_eight_step_workflow_rounds_half_up(make_steps):
    progress = calculate_progress(make_steps(completed=1, total=8))

    assert progress.progress_percentage == 13


@pytest.mark.unit
def test_current_step_is_lowest_incomplete_order_regardless_of_input_order(make_steps):
    steps = make_steps(completed=0)
    steps[0].complete()
    steps[2].complete()

    progress = calculate_progress(list(reversed(steps)))

    assert progress.current_step.step_order == 2
    assert [s.step_order for s in progress.steps_summary] == [1, 2, 3, 4]


@pytest.mark.unit
def test_completed_count_never_decreases_while_completing(make_steps):
    steps = make_steps(completed=0)
    previous = -1

    for step in steps:
        step.complete()
        progress = calculate_progress(steps)
        assert progress.completed_steps >= previous
        previous = progress.completed_steps

    assert progress.is_workflow_complete is True


@pytest.mark.unit
def test_steps_summary_carries_completion_details(make_steps):
    steps = make_steps(completed=2)

    summary = calculate_progress(steps).steps_summary

    assert summary[0].step_id == steps[0].step_id
    assert summary[0].is_completed is True
    assert summary[0].completed_at is not None
    assert summary[3].is_completed is False
    assert summary[3].completed_at is None
