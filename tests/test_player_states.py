"""Tests for the pure player transition function."""

import pytest

from core.input import Control, InputState
from player.direction import Direction
from player.states import Attacking, Idle, Walking, movement_direction, transition

WINDOW = 0.4


def step(state, facing=Direction.DOWN, direction=None, attack=False, finished=False, dt=0.1):
    return transition(state, facing, direction, attack, finished, dt, WINDOW)


class TestMovementDecoding:
    """Test which direction wins when several are held."""

    def test_nothing_held(self) -> None:
        """Test no movement yields None."""
        assert movement_direction(InputState()) is None

    def test_vertical_beats_horizontal(self) -> None:
        """Test up wins over right in the same frame."""
        inputs = InputState.of(held=[Control.MOVE_RIGHT, Control.MOVE_UP])
        assert movement_direction(inputs) is Direction.UP

    def test_up_beats_down(self) -> None:
        """Test up is checked before down."""
        inputs = InputState.of(held=[Control.MOVE_DOWN, Control.MOVE_UP])
        assert movement_direction(inputs) is Direction.UP

    def test_left_beats_right(self) -> None:
        """Test left is checked before right."""
        inputs = InputState.of(held=[Control.MOVE_RIGHT, Control.MOVE_LEFT])
        assert movement_direction(inputs) is Direction.LEFT


class TestIdleAndWalking:
    """Test non-attacking transitions."""

    def test_movement_walks_and_faces(self) -> None:
        """Test a direction starts walking and turns the player."""
        result = step(Idle(Direction.DOWN), direction=Direction.LEFT)
        assert result.state == Walking(Direction.LEFT)
        assert result.facing is Direction.LEFT
        assert result.step is Direction.LEFT
        assert not result.reset_clip

    def test_release_returns_to_idle_with_facing(self) -> None:
        """Test releasing movement keeps the last facing."""
        result = step(Walking(Direction.RIGHT), facing=Direction.RIGHT)
        assert result.state == Idle(Direction.RIGHT)
        assert result.step is None

    def test_attack_beats_movement(self) -> None:
        """Test an attack press while moving swings toward the held direction."""
        result = step(Idle(Direction.DOWN), direction=Direction.UP, attack=True)
        assert result.state == Attacking(1, 0.0)
        assert result.facing is Direction.UP
        assert result.step is None
        assert result.reset_clip

    def test_attack_starts_stage_one(self) -> None:
        """Test attack from idle resets the clip."""
        result = step(Idle(Direction.UP), facing=Direction.UP, attack=True)
        assert result.state == Attacking(1, 0.0)
        assert result.facing is Direction.UP
        assert result.reset_clip
        assert result.step is None


class TestCombo:
    """Test the two-stage attack and its combo window."""

    def test_follow_up_inside_window(self) -> None:
        """Test a second press at 0.2s upgrades to stage 2."""
        result = step(Attacking(1, 0.1), attack=True, dt=0.1)
        assert result.state == Attacking(2, 0.0)
        assert result.reset_clip

    def test_follow_up_at_window_edge(self) -> None:
        """Test the window bound is inclusive."""
        result = transition(Attacking(1, 0.25), Direction.DOWN, None, True, False, 0.125, 0.375)
        assert result.state == Attacking(2, 0.0)

    def test_follow_up_after_window_ignored(self) -> None:
        """Test a late press keeps stage 1."""
        result = step(Attacking(1, 0.5), attack=True, dt=0.1)
        assert isinstance(result.state, Attacking)
        assert result.state.stage == 1

    def test_accumulates_while_swinging(self) -> None:
        """Test attack time grows by dt."""
        result = step(Attacking(1, 0.25), dt=0.125)
        assert result.state == Attacking(1, 0.375)
        assert not result.reset_clip

    def test_stage_one_ends_after_window_and_clip(self) -> None:
        """Test stage 1 ends once the clip and the window are both over."""
        result = step(Attacking(1, 0.5), facing=Direction.LEFT, finished=True, dt=0.1)
        assert result.state == Idle(Direction.LEFT)

    def test_stage_one_waits_for_window(self) -> None:
        """Test a finished clip inside the window keeps stage 1."""
        result = step(Attacking(1, 0.125), finished=True, dt=0.125)
        assert result.state == Attacking(1, 0.25)

    def test_stage_two_ends_when_clip_finishes(self) -> None:
        """Test stage 2 returns to idle regardless of the window."""
        result = step(Attacking(2, 0.0), facing=Direction.UP, finished=True, dt=0.1)
        assert result.state == Idle(Direction.UP)

    def test_stage_two_ignores_attack_press(self) -> None:
        """Test there is no third stage."""
        result = step(Attacking(2, 0.1), attack=True, dt=0.1)
        assert isinstance(result.state, Attacking)
        assert result.state.stage == 2
        assert not result.reset_clip

    def test_attacking_never_moves(self) -> None:
        """Test a held direction is ignored mid-swing."""
        result = step(Attacking(1, 0.0), direction=Direction.RIGHT, dt=0.1)
        assert result.step is None
        assert result.facing is Direction.DOWN

    def test_invalid_stage(self) -> None:
        """Test only stages 1 and 2 exist."""
        with pytest.raises(ValueError):
            Attacking(3)
