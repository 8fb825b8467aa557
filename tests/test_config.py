import json

import pytest

from guitar_dashboard.core.config import ConfigManager
from guitar_dashboard.errors import ParseError
from guitar_dashboard.fretboard import STANDARD_TUNING
from guitar_dashboard.note_types import Key, Note, Scale, ScaleType


@pytest.fixture
def config_dir(tmp_path):
    return tmp_path / "config"


def test_defaults_are_written(config_dir):
    manager = ConfigManager(str(config_dir))
    assert (config_dir / "fretboard.json").exists()
    assert (config_dir / "display.json").exists()
    assert manager.get_config("fretboard")["fret_count"] == 12


def test_default_settings(config_dir):
    settings = ConfigManager(str(config_dir)).fretboard_settings()
    assert settings.tuning == STANDARD_TUNING
    assert settings.scale == Scale(Key.C, ScaleType.MAJOR)
    assert settings.reference_pitch == 440.0
    assert settings.default_octave == 4
    assert settings.use_flats is False
    assert settings.show_markers is True


def test_update_persists_between_instances(config_dir):
    manager = ConfigManager(str(config_dir))
    assert manager.update_config("fretboard", {"key": "Eb", "scale": "minor pentatonic"})

    settings = ConfigManager(str(config_dir)).fretboard_settings()
    assert settings.key == Key.D_SHARP
    assert settings.scale_type == ScaleType.MINOR_PENTATONIC


def test_update_unknown_config(config_dir):
    manager = ConfigManager(str(config_dir))
    assert manager.update_config("audio", {"volume": 1}) is False
    assert manager.reset_config("audio") is False


def test_reset_config(config_dir):
    manager = ConfigManager(str(config_dir))
    manager.update_config("fretboard", {"fret_count": 24})
    assert manager.reset_config("fretboard")
    assert manager.get_config("fretboard")["fret_count"] == 12
    with open(config_dir / "fretboard.json") as f:
        assert json.load(f)["fret_count"] == 12


def test_get_config_returns_copy(config_dir):
    manager = ConfigManager(str(config_dir))
    config = manager.get_config("display")
    config["use_flats"] = True
    assert manager.get_config("display")["use_flats"] is False


def test_missing_keys_filled_from_defaults(config_dir):
    config_dir.mkdir(parents=True)
    with open(config_dir / "fretboard.json", "w") as f:
        json.dump({"key": "G"}, f)

    settings = ConfigManager(str(config_dir)).fretboard_settings()
    assert settings.key == Key.G
    assert settings.fret_count == 12


def test_corrupt_file_falls_back_to_defaults(config_dir):
    config_dir.mkdir(parents=True)
    (config_dir / "fretboard.json").write_text("{not json")

    settings = ConfigManager(str(config_dir)).fretboard_settings()
    assert settings.key == Key.C


def test_explicit_tuning_list(config_dir):
    manager = ConfigManager(str(config_dir))
    manager.update_config("fretboard", {"tuning": ["D2", "A2", "D3", "G", "B", "E4"], "default_octave": 3})

    settings = manager.fretboard_settings()
    assert settings.tuning[0] == Note(Key.D, 2)
    assert settings.tuning[3] == Note(Key.G, 3)
    assert settings.tuning[4] == Note(Key.B, 3)


def test_named_tuning(config_dir):
    manager = ConfigManager(str(config_dir))
    manager.update_config("fretboard", {"tuning": "open_g"})
    assert manager.fretboard_settings().tuning[1] == Note(Key.G, 2)


@pytest.mark.parametrize(
    "updates",
    [
        {"key": "H"},
        {"scale": "bebop"},
        {"tuning": "ukulele"},
        {"tuning": ["E2", "Q3"]},
        {"fret_count": "twelve"},
        {"reference_pitch": "a440"},
        {"default_octave": None},
        {"tuning": 5},
        {"tuning": {"low": "E2"}},
    ],
)
def test_invalid_values_raise(config_dir, updates):
    manager = ConfigManager(str(config_dir))
    manager.update_config("fretboard", updates)
    with pytest.raises(ParseError):
        manager.fretboard_settings()


def test_invalid_numeric_value_chains_cause(config_dir):
    manager = ConfigManager(str(config_dir))
    manager.update_config("fretboard", {"fret_count": "twelve"})
    with pytest.raises(ParseError, match="fret_count") as excinfo:
        manager.fretboard_settings()
    assert isinstance(excinfo.value.__cause__, ValueError)
