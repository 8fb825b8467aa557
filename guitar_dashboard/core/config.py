"""Configuration management for Guitar Dashboard components."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple
import json
import os
from pathlib import Path

from ..errors import ParseError
from ..fretboard import get_tuning
from ..logging_config import get_logger
from ..note_types import Key, Note, Scale, ScaleType
from ..note_utils import parse_key, parse_note
from ..scales import parse_scale_type

logger = get_logger(__name__)


@dataclass(frozen=True)
class FretboardSettings:
    """Typed snapshot of the fretboard configuration, passed to the core as plain values."""

    tuning: Tuple[Note, ...]
    key: Key
    scale_type: ScaleType
    fret_count: int
    reference_pitch: float
    default_octave: int
    use_flats: bool
    show_markers: bool

    @property
    def scale(self) -> Scale:
        return Scale(self.key, self.scale_type)


class ConfigManager:
    """Configuration manager for Guitar Dashboard components."""

    def __init__(self, config_dir: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Directory to store configuration files, or None to use default
        """
        if config_dir is None:
            # Use ~/.config/guitar_dashboard by default
            home = os.path.expanduser("~")
            config_dir = os.path.join(home, ".config", "guitar_dashboard")

        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        # Default configurations
        self.default_configs = {
            "fretboard": {
                "tuning": "standard",
                "fret_count": 12,
                "reference_pitch": 440.0,
                "default_octave": 4,
                "key": "C",
                "scale": "major",
            },
            "display": {
                "use_flats": False,
                "show_markers": True,
            },
        }

        # Load existing configurations or create default ones
        self.configs = {}
        for config_name, default_config in self.default_configs.items():
            self.configs[config_name] = self.load_config(config_name, default_config)

    def load_config(self, name: str, default_config: Dict[str, Any]) -> Dict[str, Any]:
        """Load configuration from file or create default.

        Args:
            name: Configuration name
            default_config: Default configuration to use if file doesn't exist

        Returns:
            Configuration dictionary
        """
        config_file = self.config_dir / f"{name}.json"

        if config_file.exists():
            try:
                with open(config_file, "r") as f:
                    config = json.load(f)
                if not isinstance(config, dict):
                    raise ValueError("top-level JSON value is not an object")
                logger.info(f"Loaded configuration from {config_file}")

                # Ensure all default keys are present
                for key, value in default_config.items():
                    if key not in config:
                        config[key] = value

                return config
            except (OSError, ValueError) as e:
                logger.error(f"Error loading configuration from {config_file}: {e}")
                return default_config.copy()
        else:
            # Create default configuration
            config = default_config.copy()
            self.save_config(name, config)
            return config

    def save_config(self, name: str, config: Dict[str, Any]) -> bool:
        """Save configuration to file.

        Args:
            name: Configuration name
            config: Configuration dictionary

        Returns:
            True if saved successfully, False otherwise
        """
        config_file = self.config_dir / f"{name}.json"

        try:
            with open(config_file, "w") as f:
                json.dump(config, f, indent=2)
            logger.info(f"Saved configuration to {config_file}")
            return True
        except (OSError, TypeError) as e:
            logger.error(f"Error saving configuration to {config_file}: {e}")
            return False

    def get_config(self, name: str) -> Dict[str, Any]:
        """Get configuration by name.

        Args:
            name: Configuration name

        Returns:
            Configuration dictionary
        """
        return self.configs.get(name, {}).copy()

    def update_config(self, name: str, updates: Dict[str, Any]) -> bool:
        """Update configuration and save to file.

        Args:
            name: Configuration name
            updates: Dictionary of updates to apply

        Returns:
            True if updated and saved successfully, False otherwise
        """
        if name not in self.configs:
            logger.error(f"Unknown configuration: {name}")
            return False

        self.configs[name].update(updates)
        return self.save_config(name, self.configs[name])

    def reset_config(self, name: str) -> bool:
        """Reset configuration to default.

        Args:
            name: Configuration name

        Returns:
            True if reset successfully, False otherwise
        """
        if name not in self.default_configs:
            logger.error(f"Unknown configuration: {name}")
            return False

        self.configs[name] = self.default_configs[name].copy()
        return self.save_config(name, self.configs[name])

    def fretboard_settings(self) -> FretboardSettings:
        """Build typed fretboard settings from the loaded configuration.

        Raises:
            ParseError: If a key, scale, tuning, note or numeric value is invalid
        """
        fretboard = self.get_config("fretboard")
        display = self.get_config("display")

        default_octave = _convert(fretboard["default_octave"], int, "default_octave")
        tuning_value = fretboard["tuning"]
        if isinstance(tuning_value, str):
            tuning = get_tuning(tuning_value)
        elif isinstance(tuning_value, (list, tuple)):
            # Explicit list of open-string notes, lowest string first
            tuning = tuple(parse_note(text, default_octave) for text in tuning_value)
        else:
            raise ParseError(f"Invalid tuning value: {tuning_value!r}")

        return FretboardSettings(
            tuning=tuning,
            key=parse_key(fretboard["key"]),
            scale_type=parse_scale_type(fretboard["scale"]),
            fret_count=_convert(fretboard["fret_count"], int, "fret_count"),
            reference_pitch=_convert(fretboard["reference_pitch"], float, "reference_pitch"),
            default_octave=default_octave,
            use_flats=bool(display["use_flats"]),
            show_markers=bool(display["show_markers"]),
        )


def _convert(value: Any, converter: Callable[[Any], Any], field: str) -> Any:
    try:
        return converter(value)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid {field} value: {value!r}") from e
