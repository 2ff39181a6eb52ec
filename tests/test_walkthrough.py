"""Tests for the scripted 3x3 solution walkthrough."""

from frogs_toads.game.grid import Grid
from frogs_toads.walkthrough import SOLUTION_3X3, SolutionWalkthrough


def test_solution_length() -> None:
    assert len(SOLUTION_3X3) == 12


def test_starts_at_step_zero() -> None:
    walkthrough = SolutionWalkthrough()
    assert walkthrough.steps == 0
    assert walkthrough.total_steps == 12
    assert not walkthrough.is_finished
    assert walkthrough.engine.grid == Grid.initial(3, 3)


def test_previous_at_start_fails() -> None:
    walkthrough = SolutionWalkthrough()
    assert not walkthrough.previous_step()
    assert walkthrough.steps == 0


def test_play_to_the_end() -> None:
    walkthrough = SolutionWalkthrough()
    for expected_steps in range(1, 13):
        assert walkthrough.next_step()
        assert walkthrough.steps == expected_steps
    assert walkthrough.is_finished
    assert walkthrough.engine.is_solved()
    assert not walkthrough.next_step()
    assert walkthrough.steps == 12


def test_rewind_to_start() -> None:
    walkthrough = SolutionWalkthrough()
    while walkthrough.next_step():
        pass
    while walkthrough.previous_step():
        pass
    assert walkthrough.steps == 0
    assert walkthrough.engine.grid == Grid.initial(3, 3)
    assert walkthrough.engine.history_depth == 0


def test_step_back_and_forth() -> None:
    walkthrough = SolutionWalkthrough()
    for _ in range(5):
        walkthrough.next_step()
    grid_at_5 = walkthrough.engine.grid

    assert walkthrough.previous_step()
    assert walkthrough.steps == 4
    assert walkthrough.next_step()
    assert walkthrough.steps == 5
    assert walkthrough.engine.grid == grid_at_5
