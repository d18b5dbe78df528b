"""Tests for the frame loop, scripted source and frame context."""
from __future__ import annotations

import math
import random

import pytest

from diamond_run import (
    Action,
    Button,
    ButtonEvent,
    CursorMoved,
    Engine,
    FrameContext,
    GameConfig,
    Key,
    KeyEvent,
    ScriptedEventSource,
)

CLICK = ButtonEvent(Button.PRIMARY, Action.PRESS)


def park_ship(engine: Engine) -> None:
    ship = engine.session.ship
    ship.position = (0.0, 0.0)
    ship.target_position = (0.0, 0.0)
    ship.direction = (0.0, 1.0)


# ── ScriptedEventSource ─────────────────────────────────────────


class TestScriptedEventSource:
    def test_replays_batches_in_order(self) -> None:
        a = KeyEvent(Key.RESET, Action.PRESS)
        b = KeyEvent(Key.RESET, Action.RELEASE)
        source = ScriptedEventSource([[a], [b]])
        assert source.poll() == (a,)
        assert source.poll() == (b,)
        assert source.poll() == ()

    def test_closes_when_exhausted(self) -> None:
        source = ScriptedEventSource([[]])
        assert not source.should_close()
        source.poll()
        assert source.should_close()

    def test_stays_open_when_asked(self) -> None:
        source = ScriptedEventSource(close_when_exhausted=False)
        assert not source.should_close()
        source.close()
        assert source.should_close()

    def test_push_appends_a_frame(self) -> None:
        source = ScriptedEventSource()
        source.push(CLICK, CLICK)
        assert source.pending() == 1
        assert source.poll() == (CLICK, CLICK)


# ── FrameContext ────────────────────────────────────────────────


class TestFrameContext:
    def test_dt_follows_config_fps(self) -> None:
        engine = Engine(ScriptedEventSource(close_when_exhausted=False), GameConfig(fps=20), seed=1)
        seen: list[FrameContext] = []
        engine.on_frame(lambda session, ctx: seen.append(ctx))
        engine.step()
        engine.step()
        assert [ctx.frame_number for ctx in seen] == [1, 2]
        assert abs(seen[0].dt - 0.05) < 1e-9
        assert abs(seen[1].elapsed - 0.1) < 1e-9

    def test_start_hooks_see_frame_zero(self) -> None:
        seen: list[FrameContext] = []
        engine = Engine(ScriptedEventSource([]), seed=1)
        engine.on_start(lambda session, ctx: seen.append(ctx))
        engine.run(5)
        assert seen[0].frame_number == 0
        assert seen[0].elapsed == 0.0

    def test_context_carries_engine_rng(self) -> None:
        draws = []
        for _ in range(2):
            seen: list[random.Random] = []
            engine = Engine(ScriptedEventSource(close_when_exhausted=False), seed=3)
            engine.on_frame(lambda session, ctx: seen.append(ctx.random))
            engine.step()
            engine.step()
            assert seen[0] is seen[1]
            draws.append(seen[0].random())
        assert draws[0] == draws[1]

    def test_context_is_frozen(self) -> None:
        seen: list[FrameContext] = []
        engine = Engine(ScriptedEventSource(close_when_exhausted=False), seed=1)
        engine.on_frame(lambda session, ctx: seen.append(ctx))
        engine.step()
        with pytest.raises(AttributeError):
            seen[0].frame_number = 5  # type: ignore[misc]


# ── Engine ──────────────────────────────────────────────────────


class TestEngineStep:
    def test_same_seed_same_board(self) -> None:
        a = Engine(ScriptedEventSource(), seed=123)
        b = Engine(ScriptedEventSource(), seed=123)
        assert a.render_params() == b.render_params()
        assert a.seed == 123

    def test_default_seed_is_recorded(self) -> None:
        engine = Engine(ScriptedEventSource())
        assert isinstance(engine.seed, int)

    def test_click_turns_ship_and_is_consumed(self) -> None:
        source = ScriptedEventSource(close_when_exhausted=False)
        engine = Engine(source, seed=1)
        park_ship(engine)
        source.push(CursorMoved(799.0, 399.5, 800, 800), CLICK)
        outcome = engine.step()
        assert outcome.input_handled
        assert engine.session.ship.target_heading == pytest.approx(math.pi / 2)
        assert not engine.aggregator.snapshot().clicked

    def test_pending_click_consumed_next_frame(self) -> None:
        source = ScriptedEventSource(close_when_exhausted=False)
        engine = Engine(source, seed=1)
        engine.aggregator.apply(CLICK)
        assert engine.aggregator.snapshot().clicked
        engine.step()
        assert not engine.aggregator.snapshot().clicked

    def test_held_thrust_spans_frames(self) -> None:
        source = ScriptedEventSource(
            [[KeyEvent(Key.THRUST_FORWARD, Action.PRESS)], [], []],
        )
        engine = Engine(source, seed=1)
        park_ship(engine)
        for _ in range(3):
            engine.step()
        assert engine.session.ship.target_position[1] == pytest.approx(0.015)

    def test_reset_clears_input_flags(self) -> None:
        source = ScriptedEventSource(close_when_exhausted=False)
        engine = Engine(source, seed=1)
        engine.session.score = 2
        source.push(
            KeyEvent(Key.THRUST_FORWARD, Action.PRESS),
            KeyEvent(Key.RESET, Action.PRESS),
            CLICK,
        )
        outcome = engine.step()
        assert outcome.reset
        assert engine.session.score == 0
        snap = engine.aggregator.snapshot()
        assert not snap.reset_held
        assert not snap.forward_held
        assert not snap.clicked

    def test_recompile_key_reaches_key_hooks(self) -> None:
        seen: list[KeyEvent] = []
        source = ScriptedEventSource([[KeyEvent(Key.RECOMPILE, Action.PRESS)]])
        engine = Engine(source, seed=1)
        engine.on_key(seen.append)
        engine.step()
        assert seen == [KeyEvent(Key.RECOMPILE, Action.PRESS)]

    def test_frame_hook_sees_context(self) -> None:
        frames: list[int] = []
        engine = Engine(ScriptedEventSource(close_when_exhausted=False), seed=1)
        engine.on_frame(lambda session, ctx: frames.append(ctx.frame_number))
        engine.step()
        engine.step()
        assert frames == [1, 2]
        assert engine.frame_number == 2


class TestEngineRun:
    def test_run_stops_when_source_closes(self) -> None:
        engine = Engine(ScriptedEventSource([[], [], []]), seed=1)
        assert engine.run(10) == 3

    def test_run_respects_frame_limit(self) -> None:
        engine = Engine(ScriptedEventSource(close_when_exhausted=False), seed=1)
        assert engine.run(4) == 4

    def test_request_stop_from_hook(self) -> None:
        engine = Engine(ScriptedEventSource(close_when_exhausted=False), seed=1)

        def stop_on_second(session, ctx) -> None:
            if ctx.frame_number == 2:
                ctx.request_stop()

        engine.on_frame(stop_on_second)
        assert engine.run(10) == 2

    def test_lifecycle_hooks_run_once(self) -> None:
        calls: list[str] = []
        engine = Engine(ScriptedEventSource([[], []]), seed=1)
        engine.on_start(lambda session, ctx: calls.append("start"))
        engine.on_frame(lambda session, ctx: calls.append("frame"))
        engine.on_stop(lambda session, ctx: calls.append("stop"))
        engine.run(5)
        assert calls == ["start", "frame", "frame", "stop"]

    def test_run_forever_until_closed(self) -> None:
        engine = Engine(ScriptedEventSource([[], [], [], [], []]), seed=1)
        assert engine.run_forever(pace=False) == 5

    def test_run_forever_paced(self) -> None:
        engine = Engine(ScriptedEventSource([[], []]), GameConfig(fps=1000), seed=1)
        assert engine.run_forever() == 2

    def test_scripted_capture_game(self) -> None:
        source = ScriptedEventSource([[], []])
        engine = Engine(source, seed=4)
        park_ship(engine)
        engine.session.collectibles[2].position = (0.0, 0.1)
        engine.run(5)
        assert engine.session.score == 1
        assert engine.overlay_text() == "Score: 1"
