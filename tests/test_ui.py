"""Tests for key mapping and bubble geometry (no display needed)."""

import string

import pygame
import pytest
from wordpulse.growth import Growable
from wordpulse.types import BACKSPACE, QUIT
from wordpulse.ui.keys import LETTER_KEYS, drain_key_events, key_to_input
from wordpulse.ui.render import bubble_rect


def test_exactly_26_letters_mapped():
    assert sorted(LETTER_KEYS.values()) == list(string.ascii_lowercase)


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_letter_keys(ch):
    assert key_to_input(getattr(pygame, f"K_{ch}")) == ch


def test_backspace_maps_to_sentinel():
    assert key_to_input(pygame.K_BACKSPACE) == BACKSPACE


@pytest.mark.parametrize(
    "key", [pygame.K_0, pygame.K_SPACE, pygame.K_RETURN, pygame.K_LSHIFT, pygame.K_F1]
)
def test_other_keys_map_to_none(key):
    assert key_to_input(key) is None


def test_drain_key_events():
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_c),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
    ]
    assert drain_key_events(events) == ["c", None, "a"]


@pytest.mark.parametrize(
    "event",
    [
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ],
)
def test_drain_key_events_quit(event):
    keys = drain_key_events([
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c),
        event,
    ])
    assert keys == ["c", QUIT]


def test_bubble_rect_is_centred_on_anchor():
    rect = bubble_rect(Growable.centred(40.0), cx=100, cy=200)
    assert rect.size == (40, 40)
    assert rect.center == (100, 200)


def test_bubble_rect_follows_growth():
    g = Growable.centred(10.0)
    before = bubble_rect(g, cx=100, cy=100)
    g.size += 20.0
    g.offset += 10.0
    after = bubble_rect(g, cx=100, cy=100)
    assert after.width == before.width + 20
    assert after.topleft == (before.left - 10, before.top - 10)
