from unittest import mock

import pygame
import pytest

from pixi.app import main


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_main_runs_until_window_closed(headless):
    frames = [[], [pygame.event.Event(pygame.QUIT)]]

    def fake_events():
        return frames.pop(0) if frames else [pygame.event.Event(pygame.QUIT)]

    with mock.patch("pygame.event.get", side_effect=fake_events), mock.patch(
        "pygame.display.set_caption"
    ) as caption:
        assert main([]) == 0
    caption.assert_called_once_with("Pixi Game Engine")
    assert frames == []


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2