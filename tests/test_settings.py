import json
import pathlib

import pytest

from keyhook.events import KeyEvent, describe
from keyhook.keyboard_consts import Modifier, VirtualKey
from keyhook.keytable import key_text
from keyhook.settings import LABELS, Settings, settings_converter


def test_for_test():
    settings = Settings.for_test()
    assert settings.labels == LABELS
    assert settings.log_level == "DEBUG"


def test_save_and_load(tmp_path: pathlib.Path):
    path = tmp_path / "settings.json"
    settings = Settings.for_test()
    settings.set_label("enter", "Return")
    settings.save(path)

    raw = json.loads(path.read_text())
    assert "_path" not in raw
    assert raw["labels"]["enter"] == "Return"

    loaded = Settings.load(path)
    assert loaded.labels == settings.labels
    assert loaded.log_level == "DEBUG"
    assert loaded._path == path


def test_load_defaults(tmp_path: pathlib.Path):
    path = tmp_path / "settings.json"
    path.write_text("{}")
    settings = Settings.load(path)
    assert settings.labels == {}
    assert settings.log_level == "INFO"


def test_load_normalizes_log_level(tmp_path: pathlib.Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"labels": {}, "log_level": "warning"}))
    assert Settings.load(path).log_level == "WARNING"


def test_load_rejects_bad_log_level(tmp_path: pathlib.Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"labels": {}, "log_level": "chatty"}))
    with pytest.raises(ValueError):
        Settings.load(path)


def test_labels_feed_the_resolver():
    settings = Settings.for_test()
    settings.set_label("numpad", "Keypad")
    settings.set_label("shift", "⇧")
    assert key_text(VirtualKey.VK_NUMPAD7, settings.labels) == "Keypad 7"
    event = KeyEvent.pressed(VirtualKey.VK_NUMPAD7, 1, modifiers=Modifier.SHIFT)
    assert "modifiers=⇧," in describe(event, labels=settings.labels)


def test_structure_fills_defaults():
    first = settings_converter.structure({"_path": "a.json", "log_level": "error"}, Settings)
    second = settings_converter.structure({"_path": "b.json"}, Settings)
    assert first._path == pathlib.Path("a.json")
    assert first.log_level == "ERROR"
    assert second.log_level == "INFO"
    first.set_label("enter", "Return")
    assert second.labels == {}
