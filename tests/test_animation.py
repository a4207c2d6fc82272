"""
Unit Tests for the Animation Progress Controller

All times are passed explicitly, no real clock is involved.
"""

import pytest

from lorenzattractor.model.animation import AnimationController, AnimationPhase


@pytest.fixture
def controller():
    """1000 points revealed over 10 seconds, started at t=0."""
    return AnimationController(total=1000, speed_seconds=10.0, enabled=True, start_time=0.0)


class TestReveal:
    def test_count_is_proportional_to_elapsed_time(self, controller):
        assert controller.tick(0.0) == 0
        assert controller.tick(2.5) == 250
        assert controller.tick(5.0) == 500

    def test_count_is_floored(self, controller):
        assert controller.tick(0.0109) == 1

    def test_monotonic_while_running(self, controller):
        previous = 0
        t = 0.0
        while t < 12.0:
            count = controller.tick(t)
            assert count >= previous
            assert 0 <= count <= controller.total
            previous = count
            t += 0.37

    def test_clock_going_backwards_does_not_decrease(self, controller):
        controller.tick(4.0)
        assert controller.tick(1.0) == 400
        assert controller.tick(-5.0) == 400

    def test_slowing_down_mid_run_does_not_decrease(self, controller):
        controller.tick(5.0)
        controller.set_speed(100.0)
        assert controller.tick(5.1) == 500


class TestSaturation:
    def test_saturates_at_total(self, controller):
        assert controller.tick(10.0) == 1000
        assert controller.phase is AnimationPhase.COMPLETE

    def test_stays_at_total_until_reenabled(self, controller):
        controller.tick(15.0)
        for t in (15.1, 20.0, 100.0):
            assert controller.tick(t) == 1000

    def test_start_time_is_refreshed_on_completion(self, controller):
        controller.tick(12.0)
        assert controller.start_time == 12.0

    def test_loop_restarts_after_completion(self):
        controller = AnimationController(total=100, speed_seconds=1.0, start_time=0.0, loop=True)
        assert controller.tick(1.5) == 100
        assert controller.tick(1.6) == 0
        assert controller.phase is AnimationPhase.RUNNING
        assert controller.tick(2.1) == 50

    def test_zero_total_stays_at_zero(self):
        controller = AnimationController(total=0, speed_seconds=1.0)
        assert controller.tick(0.5) == 0
        assert controller.tick(50.0) == 0
        assert controller.points_to_draw == 0


class TestToggle:
    def test_disable_shows_everything(self, controller):
        controller.tick(3.0)
        controller.toggle(3.0)

        assert controller.phase is AnimationPhase.IDLE
        assert controller.points_to_draw == 1000

    def test_idle_tick_leaves_state_alone(self, controller):
        controller.tick(3.0)
        controller.disable()

        assert controller.tick(9.0) == 300
        assert controller.visible_count == 300

    def test_enable_restarts_from_zero(self, controller):
        controller.tick(4.0)
        controller.disable()
        controller.toggle(20.0)

        assert controller.enabled
        assert controller.visible_count == 0
        assert controller.start_time == 20.0
        assert controller.tick(21.0) == 100

    def test_reenable_while_complete_restarts(self, controller):
        controller.tick(11.0)
        controller.enable(30.0)

        assert controller.phase is AnimationPhase.RUNNING
        assert controller.visible_count == 0
        assert controller.tick(35.0) == 500

    def test_reenable_while_running_restarts(self, controller):
        controller.tick(6.0)
        controller.enable(7.0)

        assert controller.visible_count == 0
        assert controller.tick(8.0) == 100

    def test_enable_when_already_at_zero_only_resets_start_time(self):
        controller = AnimationController(total=1000, speed_seconds=10.0, enabled=False, start_time=0.0)
        controller.enable(5.0)

        assert controller.visible_count == 0
        assert controller.start_time == 5.0


class TestSpeed:
    def test_minimum_speed_is_clamped(self, controller):
        assert controller.set_speed(0.2) == 1.0
        assert controller.speed_seconds == 1.0

    def test_constructor_clamps_speed(self):
        assert AnimationController(total=10, speed_seconds=0.0).speed_seconds == 1.0

    def test_no_upper_bound(self, controller):
        assert controller.set_speed(1e6) == 1e6

    def test_adjust_speed(self, controller):
        assert controller.adjust_speed(-1.0) == 9.0
        assert controller.adjust_speed(-100.0) == 1.0
        assert controller.adjust_speed(1.0) == 2.0


def test_reset_retargets_total(controller):
    controller.tick(5.0)
    controller.reset(total=200, now=6.0)

    assert controller.total == 200
    assert controller.visible_count == 0
    assert controller.tick(16.0) == 200


def test_negative_total_is_rejected():
    with pytest.raises(ValueError):
        AnimationController(total=-1)
