"""Editor window settings and viewport resolutions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

__all__ = [
    "WindowConfig",
    "load_window_config",
    "Resolution",
    "DEFAULT_RESOLUTIONS",
]

_SECTION = "Window"


def _get_int(section: Mapping[str, Any], key: str) -> int:
    value = section[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{_SECTION}.{key} must be a number")
    return int(value)


def _get_bool(section: Mapping[str, Any], key: str) -> bool:
    value = section[key]
    if not isinstance(value, bool):
        raise TypeError(f"{_SECTION}.{key} must be a boolean")
    return value


def _get_str(section: Mapping[str, Any], key: str) -> str:
    value = section[key]
    if not isinstance(value, str):
        raise TypeError(f"{_SECTION}.{key} must be a string")
    return value


@dataclass
class WindowConfig:
    """Settings of the editor's main window."""

    width: int = 1280
    height: int = 720
    title: str = "MEngine Editor"
    fullscreen: bool = False
    resizable: bool = True
    vsync: bool = True
    font_path: str = "Assets/Fonts/NotoSans-Medium.ttf"
    font_size: float = 16.0

    def to_json(self) -> dict[str, Any]:
        """Return the settings as stored under the ``Window`` section."""
        return {
            _SECTION: {
                "Width": self.width,
                "Height": self.height,
                "Title": self.title,
                "Fullscreen": self.fullscreen,
                "Resizable": self.resizable,
                "Vsync": self.vsync,
                "FontPath": self.font_path,
                "FontSize": self.font_size,
            }
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "WindowConfig":
        """Read settings from a document with a ``Window`` section.

        Every key is required; a missing key raises ``KeyError`` and a value
        of the wrong kind raises ``TypeError``. The font size is read as a
        whole number.
        """
        section = data[_SECTION]
        if not isinstance(section, Mapping):
            raise TypeError(f"{_SECTION} must be an object")
        return cls(
            width=_get_int(section, "Width"),
            height=_get_int(section, "Height"),
            title=_get_str(section, "Title"),
            fullscreen=_get_bool(section, "Fullscreen"),
            resizable=_get_bool(section, "Resizable"),
            vsync=_get_bool(section, "Vsync"),
            font_path=_get_str(section, "FontPath"),
            font_size=float(_get_int(section, "FontSize")),
        )


def load_window_config(path: str | Path) -> WindowConfig:
    """Load window settings from a JSON settings file."""
    with Path(path).open(encoding="utf-8") as settings_file:
        return WindowConfig.from_json(json.load(settings_file))


@dataclass(frozen=True)
class Resolution:
    """A viewport render resolution in pixels."""

    width: int = 1280
    height: int = 720

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height


DEFAULT_RESOLUTIONS: tuple[Resolution, ...] = (
    Resolution(100, 100),
    Resolution(800, 600),
    Resolution(1280, 720),
    Resolution(1920, 1080),
    Resolution(2560, 1440),
    Resolution(3840, 2160),
    Resolution(5120, 2880),
)