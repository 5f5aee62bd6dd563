"""
Tests for the game driver helpers that talk to ScoreTracker.
"""

import pygame

from main import (
    DEFAULT_FPS,
    GAME_OVER,
    PAUSED,
    PLAYING_GAME,
    WAITING_FOR_START,
    end_session,
    format_multiplier,
    handle_key,
    hud_lines,
    parse_fps,
)
from score_tracker import ScoreTracker


class TestParseFps:
    def test_default(self):
        assert parse_fps([]) == DEFAULT_FPS

    def test_override(self):
        assert parse_fps(["--fps=60"]) == 60

    def test_invalid_values_ignored(self):
        assert parse_fps(["--fps=fast"]) == DEFAULT_FPS
        assert parse_fps(["--fps=0"]) == DEFAULT_FPS


class TestHud:
    def test_no_bonus_text_without_multiplier(self):
        assert format_multiplier(ScoreTracker()) == ""

    def test_bonus_text(self):
        tracker = ScoreTracker()
        tracker.set_multiplier(3)
        assert format_multiplier(tracker) == "x3 (5.0s)"

    def test_expired_timer_not_shown_negative(self):
        tracker = ScoreTracker()
        tracker.set_active(True)
        tracker.set_multiplier()
        tracker.update(6.0)
        assert format_multiplier(tracker) == "x2 (0.0s)"

    def test_waiting_screen(self):
        lines = hud_lines(ScoreTracker(), WAITING_FOR_START, 60.0)
        assert lines[0] == "Press SPACE"

    def test_playing_screen(self):
        tracker = ScoreTracker()
        tracker.add_score(12)
        tracker.set_multiplier()
        lines = hud_lines(tracker, PLAYING_GAME, 41.2)
        assert lines == ["Score: 12", "Time: 42", "Bonus x2 (5.0s)"]

    def test_paused_screen(self):
        lines = hud_lines(ScoreTracker(), PAUSED, 10.0)
        assert lines[-1] == "PAUSED"

    def test_game_over_screen(self):
        tracker = ScoreTracker()
        tracker.add_score(99)
        assert hud_lines(tracker, GAME_OVER, 0.0)[0] == "Final Score: 99"


class TestHandleKey:
    def test_space_starts_session(self):
        tracker = ScoreTracker()
        tracker.add_score(5)
        state = handle_key(pygame.K_SPACE, WAITING_FOR_START, tracker)
        assert state == PLAYING_GAME
        assert tracker.active
        assert tracker.score == 0

    def test_pause_and_resume(self):
        tracker = ScoreTracker()
        state = handle_key(pygame.K_SPACE, WAITING_FOR_START, tracker)
        state = handle_key(pygame.K_p, state, tracker)
        assert state == PAUSED
        assert not tracker.active
        state = handle_key(pygame.K_p, state, tracker)
        assert state == PLAYING_GAME
        assert tracker.active

    def test_bonus_pickup(self):
        tracker = ScoreTracker()
        state = handle_key(pygame.K_SPACE, WAITING_FOR_START, tracker)
        handle_key(pygame.K_b, state, tracker)
        assert tracker.multiplier == 2
        handle_key(pygame.K_4, state, tracker)
        assert tracker.multiplier == 4

    def test_no_bonus_while_paused(self):
        tracker = ScoreTracker()
        handle_key(pygame.K_b, PAUSED, tracker)
        assert not tracker.has_multiplier

    def test_space_ignored_while_playing(self):
        tracker = ScoreTracker()
        tracker.add_score(3)
        assert handle_key(pygame.K_SPACE, PLAYING_GAME, tracker) == PLAYING_GAME
        assert tracker.score == 3

    def test_end_session_deactivates(self):
        tracker = ScoreTracker()
        tracker.set_active(True)
        assert end_session(tracker) == GAME_OVER
        assert not tracker.active
