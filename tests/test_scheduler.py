"""Tests for the cooperative playback scheduler, driven by a manual clock."""

import math

import pytest

from Gloss.errors import ConfigurationError
from Gloss.playback import PlaybackScheduler, SchedulerState, Timing
from Gloss.resolve import DEFAULT_DESCRIPTOR
from tests.utils.fake_host import ManualHost, RecordingRenderer


@pytest.fixture
def scheduler(small_provider, renderer, host):
    return PlaybackScheduler(small_provider, renderer, host)


def test_submit_renders_first_frame_immediately(scheduler, renderer):
    units = scheduler.submit("Hello, how are you?")
    assert units == ["hello", "how are you"]
    assert scheduler.state == SchedulerState.PLAYING
    assert renderer.frames[0][:2] == ("hello", 0.0)


def test_greeting_question_plays_word_then_phrase(scheduler, renderer, host):
    scheduler.submit("Hello, how are you?")
    host.run_until_idle()

    assert renderer.units() == ["hello", "how are you"]
    phrase_frames = [f for f in renderer.frames if f[0] == "how are you"]
    start, end = phrase_frames[0][3], phrase_frames[-1][3]
    assert phrase_frames[-1][1] == 1.0
    assert 1950 <= end - start < 1950 + host.tick_interval_ms
    assert len(renderer.idles) == 1


def test_single_phrase_plays_then_pauses_then_finishes(scheduler, renderer, host):
    """'good morning': one phrase unit for 1950ms, a 600ms pause, then done."""
    states = []
    renderer.on_idle = lambda: states.append(scheduler.state)

    assert scheduler.submit("good morning") == ["good morning"]
    host.advance(1940)
    assert scheduler.state == SchedulerState.PLAYING
    host.advance(20)
    assert scheduler.state == SchedulerState.PAUSING

    host.run_until_idle()
    last_frame_t = renderer.frames[-1][3]
    assert renderer.frames[-1][1] == 1.0
    assert 1950 <= last_frame_t < 1950 + host.tick_interval_ms
    assert renderer.idles == [last_frame_t + 600]
    assert states == [SchedulerState.DONE]
    assert scheduler.state == SchedulerState.IDLE
    assert not scheduler.is_running


def test_unknown_word_renders_default_for_full_duration(scheduler, renderer, host):
    assert scheduler.submit("xyznotaword") == ["xyznotaword"]
    host.run_until_idle()

    assert all(f[2] == DEFAULT_DESCRIPTOR for f in renderer.frames)
    partial = [f for f in renderer.frames if f[1] < 1.0]
    assert all(f[3] < 1500 for f in partial)
    assert renderer.frames[-1][1] == 1.0
    assert renderer.frames[-1][3] >= 1500


def test_resubmit_replaces_in_flight_playback(scheduler, renderer, host):
    """Only 'two' renders once it has been submitted; 'one' never fires again."""
    scheduler.submit("one")
    host.advance(100)
    one_frames = len(renderer.frames)
    assert all(f[0] == "one" for f in renderer.frames)

    scheduler.submit("two")
    assert len(host.pending()) == 1
    host.run_until_idle()

    after = renderer.frames[one_frames:]
    assert after and all(f[0] == "two" for f in after)
    assert len(renderer.idles) == 1
    assert host.max_pending == 1


def test_resubmit_during_pause_cancels_timer(scheduler, renderer, host):
    scheduler.submit("hello run")
    host.advance(1510)
    assert scheduler.state == SchedulerState.PAUSING
    assert len(host.pending("timer")) == 1

    scheduler.submit("fast")
    assert host.pending("timer") == []
    host.run_until_idle()
    assert renderer.units() == ["hello", "fast"]


def test_rapid_resubmits_keep_one_live_tick(scheduler, renderer, host):
    for text in ["a", "b", "c", "d"]:
        scheduler.submit(text)
        assert len(host.pending("tick")) == 1
        host.advance(5)
    host.run_until_idle()
    assert host.max_pending == 1
    assert renderer.units()[-1] == "d"


def test_run_fast_timing_scales_with_speed(small_provider):
    """Two words at speed 2 take about 2000ms; at speed 1 about 4000ms."""
    for speed, expected in [(2.0, 2000), (1.0, 4000)]:
        host = ManualHost(tick_interval_ms=10.0)
        renderer = RecordingRenderer(host)
        scheduler = PlaybackScheduler(small_provider, renderer, host)

        assert scheduler.submit("run fast", speed=speed) == ["run", "fast"]
        host.run_until_idle()
        assert renderer.idles == [expected]
        assert renderer.units() == ["run", "fast"]


@pytest.mark.parametrize("text", ["", "   ", "?!", None])
def test_empty_submission_renders_idle_only(scheduler, renderer, host, text):
    assert scheduler.submit(text) == []
    assert renderer.idles == [0.0]
    assert renderer.frames == []
    assert host.pending() == []
    assert scheduler.state == SchedulerState.IDLE


def test_empty_submission_while_playing_stops_playback(scheduler, renderer, host):
    scheduler.submit("hello")
    host.advance(50)
    frames = len(renderer.frames)

    assert scheduler.submit("  ") == []
    host.run_until_idle()
    assert len(renderer.frames) == frames
    assert len(renderer.idles) == 1
    assert scheduler.state == SchedulerState.IDLE


def test_cancel_stops_without_idle_render(scheduler, renderer, host):
    scheduler.submit("hello good")
    host.advance(100)
    scheduler.cancel()
    frames = len(renderer.frames)

    host.advance(10_000)
    assert len(renderer.frames) == frames
    assert renderer.idles == []
    assert host.pending() == []
    assert scheduler.state == SchedulerState.IDLE


def test_cancel_is_idempotent(scheduler, host):
    scheduler.cancel()
    scheduler.submit("hello")
    scheduler.cancel()
    scheduler.cancel()
    assert scheduler.state == SchedulerState.IDLE
    assert scheduler.queue == []
    assert host.pending() == []


def test_invalid_speed_rejected_without_disturbing_playback(scheduler, renderer, host):
    scheduler.submit("hello")
    host.advance(100)

    with pytest.raises(ConfigurationError):
        scheduler.submit("good", speed=0)
    with pytest.raises(ConfigurationError):
        scheduler.submit("good", speed=-2)

    assert scheduler.state == SchedulerState.PLAYING
    assert scheduler.queue == ["hello"]
    assert len(host.pending("tick")) == 1


@pytest.mark.parametrize("speed", [math.inf, -math.inf, math.nan])
def test_non_finite_speed_is_a_configuration_error(scheduler, renderer, host, speed):
    with pytest.raises(ConfigurationError):
        scheduler.submit("hello", speed=speed)
    assert renderer.frames == []
    assert host.pending() == []
    assert scheduler.state == SchedulerState.IDLE


def test_zero_length_units_complete_in_one_frame(small_provider, host):
    """A zero base duration plays each unit as a single finished frame."""
    renderer = RecordingRenderer(host)
    timing = Timing(base_duration_ms=0, word_pause_ms=0, phrase_pause_ms=0)
    scheduler = PlaybackScheduler(small_provider, renderer, host, timing)

    assert scheduler.submit("hello good") == ["hello", "good"]
    host.run_until_idle()

    assert [(f[0], f[1]) for f in renderer.frames] == [("hello", 1.0), ("good", 1.0)]
    assert renderer.idles == [0.0]
    assert scheduler.state == SchedulerState.IDLE


def test_progress_is_monotonic_within_a_unit(scheduler, renderer, host):
    scheduler.submit("hello")
    host.run_until_idle()
    progress = [f[1] for f in renderer.frames]
    assert progress == sorted(progress)
    assert progress[0] == 0.0 and progress[-1] == 1.0
    assert all(0.0 <= p <= 1.0 for p in progress)


def test_introspection_follows_cursor(scheduler, host):
    scheduler.submit("hello good morning thank")
    assert scheduler.queue == ["hello", "good morning", "thank"]
    assert scheduler.cursor == 0
    assert scheduler.current_item.unit == "hello"

    # Last 'hello' frame lands on the first tick at or after 1500ms
    host.advance(1504 + 500 + 1)
    assert scheduler.cursor == 1
    assert scheduler.current_item.is_phrase


def test_render_exception_propagates_and_scheduler_recovers(small_provider, host):
    renderer = RecordingRenderer(host)

    def boom(*_):
        raise RuntimeError("canvas gone")

    renderer.on_render = boom
    scheduler = PlaybackScheduler(small_provider, renderer, host)
    with pytest.raises(RuntimeError):
        scheduler.submit("hello")
    assert host.pending() == []

    scheduler.cancel()
    assert scheduler.state == SchedulerState.IDLE

    renderer.on_render = None
    scheduler.submit("hello")
    host.run_until_idle()
    assert len(renderer.idles) == 1


def test_render_exception_mid_unit_leaves_no_live_handles(small_provider, host):
    renderer = RecordingRenderer(host)
    scheduler = PlaybackScheduler(small_provider, renderer, host)
    scheduler.submit("hello")

    def boom(*_):
        raise RuntimeError("canvas gone")

    renderer.on_render = boom
    with pytest.raises(RuntimeError):
        host.advance(100)
    assert host.pending() == []

    renderer.on_render = None
    scheduler.submit("good")
    host.run_until_idle()
    assert renderer.units()[-1] == "good"


def test_renderer_may_cancel_from_inside_render(small_provider, host):
    renderer = RecordingRenderer(host)
    scheduler = PlaybackScheduler(small_provider, renderer, host)
    renderer.on_render = lambda d, p, u: scheduler.cancel() if p > 0.1 else None

    scheduler.submit("hello good")
    host.run_until_idle()

    assert renderer.units() == ["hello"]
    assert renderer.idles == []
    assert scheduler.state == SchedulerState.IDLE


def test_renderer_may_resubmit_from_idle(small_provider, host):
    renderer = RecordingRenderer(host)
    scheduler = PlaybackScheduler(small_provider, renderer, host)
    loops = []

    def again():
        if not loops:
            loops.append(1)
            scheduler.submit("good")

    renderer.on_idle = again
    scheduler.submit("hello")
    host.run_until_idle()

    assert renderer.units() == ["hello", "good"]
    assert len(renderer.idles) == 2
    assert scheduler.state == SchedulerState.IDLE


def test_custom_timing(small_provider, host):
    renderer = RecordingRenderer(host)
    timing = Timing(base_duration_ms=160, phrase_factor=2.0, word_pause_ms=40, phrase_pause_ms=80)
    scheduler = PlaybackScheduler(small_provider, renderer, host, timing)
    scheduler.submit("thank you")
    host.run_until_idle()
    assert renderer.idles == [320 + 80]
