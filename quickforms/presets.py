"""
Dialog Presets

Loads declarative dialog definitions from YAML so applications can keep
titles, messages and window options out of code:

    dialogs:
      delete_file:
        type: confirm
        title: Delete
        message: Delete this file?
        confirm_text: Delete
        deny_text: Keep
        window:
          startPosition: CenterScreen
          hideInTaskbar: false
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .api import ask_confirmation, prompt_for_input, show_notification
from .errors import InvalidConfiguration, PresetParseError
from .logging import logger
from .models import WindowOptions


class PresetType(str, Enum):
    """Which dialog a preset shows."""
    NOTIFY = "notify"
    PROMPT = "prompt"
    CONFIRM = "confirm"


# Keys allowed per preset type, besides type/title/message/window
_TYPE_KEYS = {
    PresetType.NOTIFY: {"button_text"},
    PresetType.PROMPT: {"button_text"},
    PresetType.CONFIRM: {"confirm_text", "deny_text"},
}

_COMMON_KEYS = {"type", "title", "message", "window"}


@dataclass(frozen=True)
class DialogPreset:
    """A single named dialog definition."""
    name: str
    type: PresetType
    title: str
    message: str = ""
    button_text: str = "OK"
    confirm_text: str = "Yes"
    deny_text: str = "No"
    window: WindowOptions = field(default_factory=WindowOptions)


@dataclass
class PresetCatalog:
    """All presets loaded from one source."""
    dialogs: Dict[str, DialogPreset] = field(default_factory=dict)
    source: str = "<unknown>"

    def get(self, name: str) -> DialogPreset:
        try:
            return self.dialogs[name]
        except KeyError:
            raise InvalidConfiguration(
                f"no preset named {name!r} in {self.source}", field="preset"
            )

    def names(self) -> list:
        return sorted(self.dialogs)


class PresetParser:
    """
    Parser for YAML dialog preset files.
    """

    @classmethod
    def load(cls, path: Union[str, Path]) -> PresetCatalog:
        """
        Load and parse a YAML preset file.

        Args:
            path: Path to the YAML file

        Returns:
            Validated PresetCatalog

        Raises:
            PresetParseError: If parsing or validation fails
        """
        path = Path(path)
        if not path.exists():
            raise PresetParseError(f"File not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PresetParseError(f"Invalid YAML syntax: {e}", str(path))
        except UnicodeDecodeError as e:
            raise PresetParseError(f"File is not valid UTF-8: {e}", str(path))
        except OSError as e:
            raise PresetParseError(f"Cannot read file: {e.strerror or e}", str(path))

        if data is None:
            raise PresetParseError("Empty YAML file", str(path))

        return cls.parse(data, str(path))

    @classmethod
    def loads(cls, yaml_str: str, source: str = "<string>") -> PresetCatalog:
        """Parse a YAML string."""
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise PresetParseError(f"Invalid YAML syntax: {e}", source)

        if data is None:
            raise PresetParseError("Empty YAML content", source)

        return cls.parse(data, source)

    @classmethod
    def parse(cls, data: Dict[str, Any], source: str = "<dict>") -> PresetCatalog:
        """Parse an already-loaded dictionary."""
        parser = cls(source)
        return parser._parse_root(data)

    def __init__(self, source: str = "<unknown>"):
        self.source = source

    def _error(self, message: str) -> PresetParseError:
        logger.warning(f"Preset parse error in {self.source}: {message}")
        return PresetParseError(message, self.source)

    def _parse_root(self, data: Any) -> PresetCatalog:
        if not isinstance(data, dict):
            raise self._error("Top level must be a mapping")

        dialogs = data.get("dialogs")
        if not isinstance(dialogs, dict) or not dialogs:
            raise self._error("'dialogs' must be a non-empty mapping")

        catalog = PresetCatalog(source=self.source)
        for name, entry in dialogs.items():
            catalog.dialogs[str(name)] = self._parse_preset(str(name), entry)

        logger.debug(f"Loaded {len(catalog.dialogs)} dialog presets from {self.source}")
        return catalog

    def _parse_preset(self, name: str, entry: Any) -> DialogPreset:
        if not isinstance(entry, dict):
            raise self._error(f"Preset '{name}' must be a mapping")

        raw_type = entry.get("type")
        try:
            preset_type = PresetType(str(raw_type).lower())
        except ValueError:
            allowed = ", ".join(t.value for t in PresetType)
            raise self._error(f"Preset '{name}': type must be one of {allowed}, got {raw_type!r}")

        unknown = set(entry) - _COMMON_KEYS - _TYPE_KEYS[preset_type]
        if unknown:
            raise self._error(
                f"Preset '{name}': unknown keys for type {preset_type.value}: {', '.join(sorted(unknown))}"
            )

        if "title" not in entry:
            raise self._error(f"Preset '{name}': missing required field 'title'")

        texts = {}
        for key in ("title", "message") + tuple(sorted(_TYPE_KEYS[preset_type])):
            if key in entry:
                value = entry[key]
                if value is None:
                    value = ""
                if not isinstance(value, (str, int, float)):
                    raise self._error(f"Preset '{name}': '{key}' must be text")
                texts[key] = str(value)

        window_data = entry.get("window")
        if window_data is not None and not isinstance(window_data, dict):
            raise self._error(f"Preset '{name}': 'window' must be a mapping")
        try:
            window = WindowOptions.from_dict(window_data)
        except InvalidConfiguration as e:
            raise self._error(f"Preset '{name}': {e}")

        return DialogPreset(name=name, type=preset_type, window=window, **texts)


def show_preset(catalog: PresetCatalog, name: str, parent=None):
    """
    Show the dialog described by a preset.

    Returns:
        None for notify, the captured text for prompt, a DialogOutcome for confirm
    """
    preset = catalog.get(name)
    logger.debug(f"Showing preset {name!r} ({preset.type.value})")

    if preset.type == PresetType.NOTIFY:
        return show_notification(
            preset.title, preset.message, preset.button_text, preset.window, parent
        )
    elif preset.type == PresetType.PROMPT:
        return prompt_for_input(
            preset.title, preset.message, preset.button_text, preset.window, parent
        )
    return ask_confirmation(
        preset.title, preset.message, preset.confirm_text, preset.deny_text, preset.window, parent
    )
