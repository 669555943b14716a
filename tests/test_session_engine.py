import random

import pytest

from vocab_quiz.core.models import SessionPhase, SessionSnapshot
from vocab_quiz.core.services.manual_scheduler import ManualScheduler
from vocab_quiz.core.session_engine import SessionEngine

from conftest import make_question


def assert_invariants(snapshot: SessionSnapshot) -> None:
    assert (snapshot.selected_answer is None) == (snapshot.is_correct is None)
    assert snapshot.revealing == (snapshot.selected_answer is not None and not snapshot.completed)
    expected_score = sum(
        1
        for record in snapshot.answer_records
        if record.answer == snapshot.questions[record.question_index].word
    )
    assert snapshot.score == expected_score
    assert 0 <= snapshot.current_index <= len(snapshot.questions)


# --- Scenarios ---


def test_cat_dog_walkthrough(engine, scheduler, cat_dog, snapshots):
    engine.load(cat_dog)
    state = engine.snapshot()
    assert state.phase is SessionPhase.ANSWERING
    assert state.current_index == 0
    assert sorted(state.display_options) == ["cat", "cow", "dog", "fish"]

    assert engine.select_answer("cat")
    state = engine.snapshot()
    assert state.score == 1
    assert state.revealing
    assert state.is_correct is True

    assert engine.advance()
    state = engine.snapshot()
    assert state.current_index == 1
    assert state.selected_answer is None
    assert not state.revealing

    scheduler.advance(5000)
    state = engine.snapshot()
    assert state.selected_answer == "dog"
    assert state.is_correct is True
    assert state.score == 2
    assert state.answer_records[-1].timed_out

    assert engine.advance()
    state = engine.snapshot()
    assert state.completed
    assert state.phase is SessionPhase.COMPLETED
    assert state.answers == ("cat", "dog")

    for snapshot in snapshots:
        assert_invariants(snapshot)


def test_synthesized_options_for_question_without_options(engine):
    questions = [make_question(word) for word in ("cat", "dog", "cow", "fish")]
    engine.load(questions)

    options = engine.snapshot().display_options
    assert len(options) == 4
    assert options.count("cat") == 1


# --- Answer evaluation ---


def test_wrong_answer_is_recorded_without_score(engine, cat_dog):
    engine.load(cat_dog)
    engine.select_answer("dog")

    state = engine.snapshot()
    assert state.is_correct is False
    assert state.score == 0
    assert state.answers == ("dog",)
    assert state.revealing


def test_second_answer_is_ignored(engine, cat_dog):
    engine.load(cat_dog)
    assert engine.select_answer("dog")
    assert not engine.select_answer("cat")

    state = engine.snapshot()
    assert state.selected_answer == "dog"
    assert state.score == 0
    assert len(state.answer_records) == 1


def test_operations_before_load_are_noops(engine, scheduler):
    assert not engine.select_answer("cat")
    assert not engine.advance()
    engine.reset()
    scheduler.advance(10_000)

    state = engine.snapshot()
    assert state.phase is SessionPhase.NO_QUESTION
    assert state.answer_records == ()
    assert not state.completed


def test_empty_question_list_completes_immediately(engine, scheduler):
    engine.load([])

    state = engine.snapshot()
    assert state.completed
    assert state.score == 0
    assert state.phase is SessionPhase.COMPLETED
    assert not engine.select_answer("cat")
    assert not engine.advance()
    assert scheduler.pending_count() == 0


# --- Answering countdown ---


def test_timeout_selects_correct_word(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    scheduler.advance(4900)
    state = engine.snapshot()
    assert state.phase is SessionPhase.ANSWERING
    assert state.remaining_time == pytest.approx(100)

    scheduler.advance(100)
    state = engine.snapshot()
    assert state.selected_answer == "cat"
    assert state.is_correct is True
    assert state.score == 1
    assert state.remaining_time == 0


@pytest.mark.parametrize("level", [1, 2, 3])
def test_answering_duration_scales_with_speed(engine, scheduler, cat_dog, level):
    engine.load(cat_dog)
    engine.set_speed_level(level)
    assert engine.snapshot().answer_duration_ms == level * 5000

    scheduler.advance(level * 5000 - 100)
    assert engine.snapshot().phase is SessionPhase.ANSWERING
    scheduler.advance(100)
    assert engine.snapshot().phase is SessionPhase.REVEALING


def test_speed_change_rescales_rate_without_jump(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    scheduler.advance(1000)
    assert engine.snapshot().remaining_time == pytest.approx(4000)

    engine.set_speed_level(2)
    assert engine.snapshot().remaining_time == pytest.approx(4000)
    scheduler.advance(100)
    assert engine.snapshot().remaining_time == pytest.approx(3950)

    engine.set_speed_level(3)
    scheduler.advance(300)
    assert engine.snapshot().remaining_time == pytest.approx(3850)


def test_countdown_fraction_tracks_remaining_time(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    assert engine.snapshot().countdown_fraction == 1.0
    scheduler.advance(2500)
    assert engine.snapshot().countdown_fraction == pytest.approx(0.5)


def test_display_options_stay_frozen_while_ticking(engine, scheduler, snapshots):
    engine.load([make_question(word) for word in ("cat", "dog", "cow", "fish", "owl")])
    first = engine.snapshot().display_options
    scheduler.advance(3000)

    question_zero = [s for s in snapshots if s.current_index == 0]
    assert len(question_zero) > 10
    assert all(s.display_options == first for s in question_zero)


# --- Pause ---


def test_pause_freezes_answering_countdown(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    scheduler.advance(2000)
    assert engine.toggle_pause()

    scheduler.advance(60_000)
    state = engine.snapshot()
    assert state.is_paused
    assert state.remaining_time == pytest.approx(3000)
    assert state.phase is SessionPhase.ANSWERING
    assert scheduler.pending_count() == 0

    assert not engine.toggle_pause()
    scheduler.advance(2900)
    assert engine.snapshot().phase is SessionPhase.ANSWERING
    scheduler.advance(100)
    assert engine.snapshot().phase is SessionPhase.REVEALING


def test_pause_during_reveal_restarts_full_window(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    engine.select_answer("cat")
    scheduler.advance(3000)

    engine.toggle_pause()
    scheduler.advance(10_000)
    assert engine.snapshot().current_index == 0

    engine.toggle_pause()
    scheduler.advance(4999)
    state = engine.snapshot()
    assert state.current_index == 0
    assert state.revealing

    scheduler.advance(1)
    state = engine.snapshot()
    assert state.current_index == 1
    assert state.phase is SessionPhase.ANSWERING


def test_answer_while_paused_waits_for_resume(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    engine.toggle_pause()
    assert engine.select_answer("cat")

    scheduler.advance(20_000)
    assert engine.snapshot().current_index == 0

    engine.toggle_pause()
    scheduler.advance(5000)
    assert engine.snapshot().current_index == 1


# --- Advance ---


def test_reveal_expiry_advances(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    engine.select_answer("cat")
    scheduler.advance(4999)
    assert engine.snapshot().current_index == 0

    scheduler.advance(1)
    state = engine.snapshot()
    assert state.current_index == 1
    assert state.selected_answer is None
    assert state.is_correct is None
    assert state.remaining_time == 5000


def test_manual_and_timed_advance_converge(cat_dog):
    manual_scheduler = ManualScheduler()
    manual = SessionEngine(manual_scheduler, rng=random.Random(3))
    timed_scheduler = ManualScheduler()
    timed = SessionEngine(timed_scheduler, rng=random.Random(3))

    for engine in (manual, timed):
        engine.load(cat_dog)
        engine.select_answer("cat")
    manual.advance()
    timed_scheduler.advance(5000)

    assert manual.snapshot() == timed.snapshot()


def test_skip_without_answer_moves_on(engine, cat_dog):
    engine.load(cat_dog)
    assert engine.advance()

    state = engine.snapshot()
    assert state.current_index == 1
    assert state.answer_records == ()
    assert state.score == 0


def test_advance_on_last_question_completes_once(engine, scheduler):
    engine.load([make_question("cat")])
    engine.select_answer("cat")
    scheduler.advance(5000)

    state = engine.snapshot()
    assert state.completed
    assert state.current_index == 0
    assert scheduler.pending_count() == 0

    assert not engine.advance()
    assert engine.snapshot() == state


def test_stale_reveal_timer_does_not_touch_new_quiz(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    engine.select_answer("cat")
    scheduler.advance(3000)

    engine.load([make_question(word) for word in ("owl", "bee", "ant")])
    scheduler.advance(2500)

    state = engine.snapshot()
    assert state.current_index == 0
    assert state.phase is SessionPhase.ANSWERING
    assert state.remaining_time == pytest.approx(2500)
    assert state.answer_records == ()


# --- Speed, reset, subscribers ---


def test_cycle_speed_level_wraps(engine, cat_dog):
    engine.load(cat_dog)
    assert [engine.cycle_speed_level() for _ in range(4)] == [2, 3, 1, 2]


def test_invalid_speed_level_is_ignored(engine, cat_dog):
    engine.load(cat_dog)
    assert not engine.set_speed_level(5)
    assert engine.snapshot().speed_level == 1


def test_reset_keeps_questions_and_clears_progress(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    engine.select_answer("cat")
    engine.advance()
    engine.select_answer("cat")
    engine.advance()
    assert engine.snapshot().completed

    engine.reset()
    state = engine.snapshot()
    assert state.questions == tuple(cat_dog)
    assert state.current_index == 0
    assert state.score == 0
    assert state.answer_records == ()
    assert state.phase is SessionPhase.ANSWERING

    scheduler.advance(5000)
    assert engine.snapshot().score == 1


def test_every_transition_publishes_consistent_snapshot(engine, scheduler, snapshots):
    engine.load([make_question(word) for word in ("cat", "dog", "cow")])
    engine.select_answer("dog")
    scheduler.advance(2000)
    engine.toggle_pause()
    engine.cycle_speed_level()
    engine.toggle_pause()
    scheduler.advance(20_000)
    engine.advance()
    engine.reset()

    assert len(snapshots) > 10
    for snapshot in snapshots:
        assert_invariants(snapshot)


def test_unsubscribe_stops_notifications(engine, cat_dog):
    received = []
    engine.subscribe(received.append)
    engine.load(cat_dog)
    engine.unsubscribe(received.append)
    engine.select_answer("cat")

    assert len(received) == 1


def test_shutdown_cancels_timers(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    engine.shutdown()
    scheduler.advance(20_000)

    assert scheduler.pending_count() == 0
    assert engine.snapshot().remaining_time == 5000


def test_shuffle_seed_makes_option_order_repeatable(engine):
    questions = [make_question(word) for word in ("cat", "dog", "cow", "fish", "owl", "bee")]
    engine.set_shuffle_seed(11)
    engine.load(questions)
    first = engine.snapshot().display_options

    engine.set_shuffle_seed(11)
    engine.load(questions)
    assert engine.snapshot().display_options == first


def test_shuffle_seed_survives_reset_and_reload(engine):
    questions = [make_question(word) for word in ("cat", "dog", "cow", "fish", "owl", "bee")]
    engine.set_shuffle_seed(11)

    engine.load(questions)
    first = engine.snapshot().display_options
    engine.advance()
    engine.reset()
    assert engine.snapshot().display_options == first

    engine.load(questions)
    assert engine.snapshot().display_options == first


def test_listener_sees_transitions_in_order_when_another_listener_reenters(engine, cat_dog):
    def advance_on_reveal(snapshot):
        if snapshot.phase is SessionPhase.REVEALING:
            engine.advance()

    seen = []
    engine.subscribe(advance_on_reveal)
    engine.subscribe(lambda snapshot: seen.append((snapshot.current_index, snapshot.phase)))
    engine.load(cat_dog)
    engine.select_answer("cat")

    assert seen == [
        (0, SessionPhase.ANSWERING),
        (0, SessionPhase.REVEALING),
        (1, SessionPhase.ANSWERING),
    ]
    current = engine.snapshot()
    assert seen[-1] == (current.current_index, current.phase)


def test_pause_keeps_partial_tick(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    for _ in range(50):
        scheduler.advance(60)
        engine.toggle_pause()
        engine.toggle_pause()

    # 3000 ms of unpaused time is 30 ticks.
    assert engine.snapshot().remaining_time == pytest.approx(2000)


def test_long_pause_carries_partial_tick(engine, scheduler, cat_dog):
    engine.load(cat_dog)
    scheduler.advance(1060)
    engine.toggle_pause()
    scheduler.advance(60_000)
    engine.toggle_pause()

    scheduler.advance(39)
    assert engine.snapshot().remaining_time == pytest.approx(4000)
    scheduler.advance(1)
    assert engine.snapshot().remaining_time == pytest.approx(3900)
    scheduler.advance(100)
    assert engine.snapshot().remaining_time == pytest.approx(3800)


def test_answer_without_current_question_is_dropped(engine):
    engine._apply_answer("cat", timed_out=True)

    state = engine.snapshot()
    assert state.answer_records == ()
    assert state.selected_answer is None
