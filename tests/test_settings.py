import pytest

from gravdash.controls import Action
from gravdash.events import EventQueue, EventType
from gravdash.keyboard import Key, Keyboard
from gravdash.settings import Colour, Setting, Settings


@pytest.fixture
def keyboard():
    return Keyboard()


@pytest.fixture
def events():
    return EventQueue()


@pytest.fixture
def settings(keyboard, events):
    return Settings(keyboard, events)


def test_defaults(settings):
    assert settings.get(Setting.SCALE) == 6
    assert settings.get(Setting.LEFT) == Key.A
    assert settings.get(Setting.P2_SPECIAL) == Key.RSHIFT
    assert settings.player_colour(1) == Colour.BLUE
    assert settings.player_colour(2) == Colour.GREEN


def test_save_load_round_trip(keyboard, events, settings):
    settings.set(Setting.MUSIC, 3)
    settings.set(Setting.JUMP, Key.K)
    settings.set(Setting.COLOUR_HELP, 1)
    data = settings.save()

    other = Settings(keyboard, EventQueue())
    other.load(data)
    assert all(other.get(s) == settings.get(s) for s in Setting)
    assert other.save() == data


def test_save_layout(settings):
    data = settings.save()
    assert data["video"]["scale"] == settings.get(Setting.SCALE)
    assert data["multiplayer"]["p2Controls"]["jump"] == settings.get(Setting.P2_JUMP)


def test_load_accepts_booleans(settings):
    data = settings.save()
    data["video"]["fullscreen"] = True
    settings.load(data)
    assert settings.get(Setting.FULLSCREEN) == 1


def test_load_missing_key_raises(settings):
    data = settings.save()
    del data["audio"]["sfx"]
    with pytest.raises(ValueError):
        settings.load(data)


def test_load_wrong_type_raises(settings):
    data = settings.save()
    data["video"]["scale"] = "big"
    with pytest.raises(ValueError):
        settings.load(data)


def test_setting_same_value_pushes_nothing(settings, events):
    settings.set(Setting.FULLSCREEN, settings.get(Setting.FULLSCREEN))
    assert len(events) == 0


def test_fullscreen_requests_window_update(settings, events):
    settings.set(Setting.FULLSCREEN, 1)
    assert [e.type for e in events] == [EventType.UPDATE_WINDOW]


def test_scale_with_auto_scale_pushes_nothing(settings, events):
    settings.set(Setting.SCALE, settings.get(Setting.SCALE) + 1)
    assert len(events) == 0


def test_scale_without_auto_scale_requests_update(settings, events):
    settings.set(Setting.AUTO_SCALE, 0)
    assert len(events) == 1
    settings.set(Setting.SCALE, settings.get(Setting.SCALE) + 1)
    assert [e.type for e in events] == [EventType.UPDATE_WINDOW, EventType.UPDATE_WINDOW]


def test_effective_scale(settings):
    settings.auto_scale_value = 4
    assert settings.scale() == 4
    settings.set(Setting.AUTO_SCALE, 0)
    assert settings.scale() == settings.get(Setting.SCALE)
    settings.set(Setting.FULLSCREEN, 1)
    assert settings.scale() == 8


def test_rebinding_updates_controls(settings, keyboard):
    settings.set(Setting.JUMP, Key.K)
    keyboard.add_key_press(Key.K)
    assert settings.is_action_on_initial_click(Action.JUMP)
    assert settings.is_action_held(Action.JUMP)


def test_second_player_controls(settings, keyboard):
    keyboard.add_key_press(Key.UP)
    assert settings.is_action_held(Action.JUMP, 1)
    assert settings.is_action_clicked(Action.JUMP, 1)
    assert not settings.is_action_held(Action.JUMP, 0)


def test_colour_help_switches_colours(settings):
    base = Colour(settings.get(Setting.COLOUR))
    assert settings.target_colour() == base
    assert settings.player_colour(0) == base
    settings.set(Setting.COLOUR_HELP, 1)
    assert settings.target_colour() == Colour(settings.get(Setting.ACC_TARGET_COL))
    assert settings.saw_colour() == Colour(settings.get(Setting.ACC_SAW_COL))
    assert settings.time_colour() == Colour(settings.get(Setting.ACC_TIME_COL))
    assert settings.world_colour() == Colour(settings.get(Setting.ACC_WORLD_COL))
    assert settings.player_colour(0) == Colour(settings.get(Setting.ACC_PLAYER_COL))


def test_load_defaults_resets(settings):
    settings.set(Setting.SFX, 2)
    settings.load_defaults()
    assert settings.get(Setting.SFX) == 10