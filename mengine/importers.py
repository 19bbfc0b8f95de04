"""Asset importers and their JSON import settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, TypeVar

__all__ = [
    "FilterType",
    "WrapModeType",
    "CompareModeType",
    "CompareFuncType",
    "AssetImporter",
    "AudioImporter",
    "NativeFormatImporter",
    "ShaderImporter",
    "PrefabImporter",
    "FBXImporter",
    "TextureImporter",
]


class FilterType(Enum):
    """Texture sampling filter."""

    NEAREST = "Nearest"
    LINEAR = "Linear"
    NEAREST_MIPMAP_NEAREST = "NearestMipmapNearest"
    LINEAR_MIPMAP_NEAREST = "LinearMipmapNearest"
    NEAREST_MIPMAP_LINEAR = "NearestMipmapLinear"
    LINEAR_MIPMAP_LINEAR = "LinearMipmapLinear"


class WrapModeType(Enum):
    """Texture coordinate wrapping mode."""

    REPEAT = "Repeat"
    MIRRORED_REPEAT = "MirroredRepeat"
    CLAMP_TO_EDGE = "ClampToEdge"
    CLAMP_TO_BORDER = "ClampToBorder"


class CompareModeType(Enum):
    """Depth texture compare mode."""

    NONE = "None"
    COMPARE_REF_TO_TEXTURE = "CompareRefToTexture"


class CompareFuncType(Enum):
    """Depth texture compare function."""

    LEQUAL = "Lequal"
    GEQUAL = "Gequal"
    LESS = "Less"
    GREATER = "Greater"
    EQUAL = "Equal"
    NOTEQUAL = "Notequal"
    ALWAYS = "Always"
    NEVER = "Never"


_ImporterT = TypeVar("_ImporterT", bound="AssetImporter")
_EnumT = TypeVar("_EnumT", bound=Enum)


@dataclass
class AssetImporter:
    """Base importer: holds the asset's name and path; has no saved settings."""

    name: str = ""
    asset_path: Path = field(default_factory=Path)
    supported_extensions: list[str] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Return the importer's persisted settings."""
        return {}

    @classmethod
    def from_json(cls: type[_ImporterT], data: Mapping[str, Any] | None) -> _ImporterT:
        """Build an importer from persisted settings."""
        return cls()


@dataclass
class AudioImporter(AssetImporter):
    """Importer for audio clips."""


@dataclass
class NativeFormatImporter(AssetImporter):
    """Importer for assets stored in the engine's own formats."""


@dataclass
class ShaderImporter(AssetImporter):
    """Importer for shader sources."""


@dataclass
class PrefabImporter(AssetImporter):
    """Importer for prefabs."""


@dataclass
class FBXImporter(AssetImporter):
    """Importer for FBX models."""


def _enum_from(data: Mapping[str, Any], key: str, enum_type: type[_EnumT]) -> _EnumT:
    raw = data[key]
    if not isinstance(raw, str):
        raise ValueError(f"Invalid {key} value")
    try:
        return enum_type(raw)
    except ValueError:
        raise ValueError(f"Invalid {key} value") from None


@dataclass
class TextureImporter(AssetImporter):
    """Importer for images, carrying texture sampling settings."""

    mipmap_levels: int = 1
    mipmap_bias: float = 0.0
    min_filter: FilterType = FilterType.LINEAR
    mag_filter: FilterType = FilterType.LINEAR
    wrap_u: WrapModeType = WrapModeType.REPEAT
    wrap_v: WrapModeType = WrapModeType.REPEAT
    wrap_w: WrapModeType = WrapModeType.REPEAT
    compare_mode: CompareModeType = CompareModeType.NONE
    compare_func: CompareFuncType = CompareFuncType.LEQUAL
    lod_min: float = -1000.0
    lod_max: float = 1000.0
    lod_bias: float = 0.0
    ansio_level: int = 0
    border_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data.update(
            {
                "MipmapLevels": self.mipmap_levels,
                "MipmapBias": self.mipmap_bias,
                "MinFilter": self.min_filter.value,
                "MagFilter": self.mag_filter.value,
                "WrapU": self.wrap_u.value,
                "WrapV": self.wrap_v.value,
                "WrapW": self.wrap_w.value,
                "compareMode": self.compare_mode.value,
                "compareFunc": self.compare_func.value,
                "LodMin": self.lod_min,
                "LodMax": self.lod_max,
                "LodBias": self.lod_bias,
                "AnsioLevel": self.ansio_level,
                "BorderColor": list(self.border_color),
            }
        )
        return data

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "TextureImporter":
        """Build a texture importer; raises KeyError or ValueError on bad input."""
        border = [float(value) for value in data["BorderColor"]]
        importer = cls(
            mipmap_levels=int(data["MipmapLevels"]),
            mipmap_bias=float(data["MipmapBias"]),
            min_filter=_enum_from(data, "MinFilter", FilterType),
            mag_filter=_enum_from(data, "MagFilter", FilterType),
            wrap_u=_enum_from(data, "WrapU", WrapModeType),
            wrap_v=_enum_from(data, "WrapV", WrapModeType),
            wrap_w=_enum_from(data, "WrapW", WrapModeType),
            compare_mode=_enum_from(data, "compareMode", CompareModeType),
            compare_func=_enum_from(data, "compareFunc", CompareFuncType),
            lod_min=float(data["LodMin"]),
            lod_max=float(data["LodMax"]),
            lod_bias=float(data["LodBias"]),
            ansio_level=int(data["AnsioLevel"]),
        )
        if len(border) != 4:
            raise ValueError("Invalid BorderColor value")
        importer.border_color = (border[0], border[1], border[2], border[3])
        return importer