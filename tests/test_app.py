"""
Tests for the pygame front end: event dispatch and command line parsing.
"""
from unittest.mock import MagicMock

import pygame
import pytest

from snake_game.app import KEY_TO_DIR, handle_event, parse_args
from snake_game.grid import Direction

UPDATE = pygame.USEREVENT + 1


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestHandleEvent:
    def test_arrow_keys_turn_the_snake(self):
        game = MagicMock()
        assert handle_event(game, keydown(pygame.K_UP), UPDATE) is True
        game.press.assert_called_once_with(Direction.UP)

    def test_only_the_four_arrows_are_mapped(self):
        assert set(KEY_TO_DIR.values()) == set(Direction)
        assert len(KEY_TO_DIR) == 4

    def test_other_keys_are_ignored(self):
        game = MagicMock()
        assert handle_event(game, keydown(pygame.K_a), UPDATE) is True
        game.press.assert_not_called()
        game.update.assert_not_called()

    def test_update_event_ticks_the_game(self):
        game = MagicMock()
        assert handle_event(game, pygame.event.Event(UPDATE), UPDATE) is True
        game.update.assert_called_once_with()

    def test_escape_quits(self):
        assert handle_event(MagicMock(), keydown(pygame.K_ESCAPE), UPDATE) is False

    def test_window_close_quits(self):
        assert handle_event(MagicMock(), pygame.event.Event(pygame.QUIT), UPDATE) is False


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert (args.width, args.height) == (600, 400)
        assert args.ups == 10
        assert args.fps == 60
        assert args.seed is None
        assert args.log_level == "INFO"

    def test_overrides(self):
        args = parse_args(["--seed", "7", "--ups", "15", "--log-level", "DEBUG"])
        assert args.seed == 7
        assert args.ups == 15
        assert args.log_level == "DEBUG"

    def test_rejects_zero_update_rate(self):
        with pytest.raises(SystemExit):
            parse_args(["--ups", "0"])

    def test_accepts_the_fastest_timer_rate(self):
        assert parse_args(["--ups", "1000"]).ups == 1000

    def test_rejects_rate_faster_than_the_timer(self):
        """Above 1000/s the millisecond timer interval would round to 0 and stop."""
        with pytest.raises(SystemExit):
            parse_args(["--ups", "2000"])
