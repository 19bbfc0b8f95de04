"""Asset database: tracks project assets through their ``.meta`` side files."""

from __future__ import annotations

import json
import logging
import threading
import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from mengine.importers import (
    AssetImporter,
    AudioImporter,
    NativeFormatImporter,
    PrefabImporter,
    ShaderImporter,
    TextureImporter,
)

__all__ = [
    "AssetType",
    "NativeAssetKind",
    "AssetMeta",
    "determine_asset_type",
    "generate_unique_asset_path",
    "AssetDatabase",
]

_log = logging.getLogger(__name__)

META_SUFFIX = ".meta"


class AssetType(Enum):
    """Broad category of an asset, used for icons and inspection."""

    NONE = "None"
    FOLDER = "Folder"
    TEXTURE = "Texture"
    MATERIAL = "Material"
    SHADER = "Shader"
    PREFAB = "Prefab"
    MODEL = "Model"
    AUDIO = "Audio"
    ANIMATION = "Animation"
    SCRIPT = "Script"


class NativeAssetKind(Enum):
    """Kinds of engine-native assets that can be created as files."""

    ASSET = "Asset"
    PIPELINE = "Pipeline"
    MATERIAL = "Material"
    PBR_MATERIAL = "PBRMaterial"
    PHONG_MATERIAL = "PhongMaterial"
    CUSTOM_MATERIAL = "CustomMaterial"
    PREFAB = "Prefab"

    @property
    def extension(self) -> str:
        """File extension under which this kind is stored."""
        return _NATIVE_EXTENSIONS[self]


_NATIVE_EXTENSIONS = {
    NativeAssetKind.ASSET: ".asset",
    NativeAssetKind.PIPELINE: ".shader",
    NativeAssetKind.MATERIAL: ".mat",
    NativeAssetKind.PBR_MATERIAL: ".mat",
    NativeAssetKind.PHONG_MATERIAL: ".mat",
    NativeAssetKind.CUSTOM_MATERIAL: ".mat",
    NativeAssetKind.PREFAB: ".prefab",
}

_TEXTURE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg"})
_NATIVE_FORMAT_EXTENSIONS = frozenset({".mat", ".shader", ".prefab"})
_SHADER_EXTENSIONS = frozenset({".shader", ".hlsl", ".glsl", ".vert", ".frag", ".comp"})
_MODEL_EXTENSIONS = frozenset({".fbx", ".obj"})
_AUDIO_EXTENSIONS = frozenset({".wav", ".mp3", ".ogg"})

# Key written for each importer class; any other importer is saved as the default one.
_IMPORTER_KEYS: dict[type[AssetImporter], str] = {
    TextureImporter: "TextureImporter",
    NativeFormatImporter: "NativeFormatImporter",
    AudioImporter: "AudioImporter",
    ShaderImporter: "ShaderImporter",
    PrefabImporter: "PrefabImporter",
}
_DEFAULT_IMPORTER_KEY = "DefaultImporter"

# Order in which a meta document is probed for its importer.
_IMPORTER_LOOKUP: tuple[tuple[str, type[AssetImporter]], ...] = (
    ("TextureImporter", TextureImporter),
    (_DEFAULT_IMPORTER_KEY, AssetImporter),
    ("NativeFormatImporter", NativeFormatImporter),
    ("AudioImporter", AudioImporter),
    ("ShaderImporter", ShaderImporter),
    ("PrefabImporter", PrefabImporter),
)


def determine_asset_type(extension: str) -> AssetType:
    """Map a file extension (empty for a directory) to its asset type."""
    if not extension:
        return AssetType.FOLDER
    if extension in _TEXTURE_EXTENSIONS:
        return AssetType.TEXTURE
    if extension == ".mat":
        return AssetType.MATERIAL
    if extension in _SHADER_EXTENSIONS:
        return AssetType.SHADER
    if extension == ".prefab":
        return AssetType.PREFAB
    if extension in _MODEL_EXTENSIONS:
        return AssetType.MODEL
    if extension in _AUDIO_EXTENSIONS:
        return AssetType.AUDIO
    if extension == ".anim":
        return AssetType.ANIMATION
    return AssetType.NONE


def generate_unique_asset_path(path: str | Path) -> Path:
    """Return *path* if free, otherwise the first free ``stem (n)ext`` beside it."""
    path = Path(path)
    if not path.exists():
        return path
    extension = "" if path.is_dir() else path.suffix
    counter = 1
    while True:
        candidate = path.parent / f"{path.stem} ({counter}){extension}"
        if not candidate.exists():
            return candidate
        counter += 1


def _extension_of(path: Path) -> str:
    return "" if path.is_dir() else path.suffix


@dataclass
class AssetMeta:
    """Persistent identity and import settings of one asset."""

    id: uuid.UUID = field(default_factory=uuid.uuid4)
    is_folder: bool = False
    type: AssetType = AssetType.NONE
    importer: AssetImporter | None = None

    def to_json(self) -> dict[str, Any]:
        """Return the document stored in the asset's ``.meta`` file."""
        if self.importer is None:
            raise ValueError("Importer is null")
        key = _IMPORTER_KEYS.get(type(self.importer), _DEFAULT_IMPORTER_KEY)
        return {
            "ID": str(self.id),
            "folder": self.is_folder,
            key: self.importer.to_json(),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssetMeta":
        """Build a meta from a ``.meta`` document; raises on malformed input."""
        asset_id = uuid.UUID(str(data["ID"]))
        is_folder = data["folder"]
        if not isinstance(is_folder, bool):
            raise ValueError("Invalid folder value")
        for key, importer_type in _IMPORTER_LOOKUP:
            if key in data:
                importer = importer_type.from_json(data[key])
                break
        else:
            raise ValueError("Invalid asset meta importer")
        return cls(id=asset_id, is_folder=is_folder, importer=importer)


class AssetDatabase:
    """Index of assets below registered directories, keyed by path and by ID."""

    def __init__(self) -> None:
        self._metas: dict[uuid.UUID, AssetMeta] = {}
        self._path_ids: dict[Path, uuid.UUID] = {}
        self._directories: list[Path] = []
        self._lock = threading.RLock()

    @property
    def directories(self) -> list[Path]:
        """Registered asset directories, in registration order."""
        with self._lock:
            return list(self._directories)

    def register_asset_directory(self, directory: str | Path) -> None:
        """Add a directory to be scanned by :meth:`refresh`."""
        directory = Path(directory)
        if not directory.exists():
            raise FileNotFoundError(f"Asset directory does not exist: {directory}")
        with self._lock:
            self._directories.append(directory)

    def unregister_asset_directory(self, directory: str | Path) -> None:
        """Stop scanning a directory; unknown directories are ignored."""
        directory = Path(directory)
        with self._lock:
            self._directories = [d for d in self._directories if d != directory]

    def import_asset(self, path: str | Path) -> AssetMeta | None:
        """Index an asset, reading its ``.meta`` file or writing a new one.

        Returns ``None`` when asked to import a ``.meta`` file itself.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Asset path does not exist: {path}")
        extension = _extension_of(path)
        if extension == META_SUFFIX:
            _log.warning("Please do not import .meta file")
            return None
        meta_path = path.with_name(path.name + META_SUFFIX)

        with self._lock:
            if meta_path.exists():
                _log.debug("Deserialize from existing meta file %s", meta_path)
                with meta_path.open(encoding="utf-8") as meta_file:
                    meta = AssetMeta.from_json(json.load(meta_file))
            else:
                meta = AssetMeta(id=uuid.uuid4(), is_folder=False)
                if extension in _TEXTURE_EXTENSIONS:
                    meta.importer = TextureImporter()
                elif extension in _NATIVE_FORMAT_EXTENSIONS:
                    meta.importer = NativeFormatImporter()
                else:
                    meta.importer = AssetImporter()
                    meta.is_folder = not extension
                meta_path.write_text(json.dumps(meta.to_json(), indent=4), encoding="utf-8")

            assert meta.importer is not None
            meta.importer.asset_path = path
            meta.importer.name = path.stem
            meta.type = determine_asset_type(extension)
            self._metas[meta.id] = meta
            self._path_ids[path] = meta.id
            return meta

    def refresh(self) -> None:
        """Import every not-yet-indexed entry below the registered directories."""
        with self._lock:
            for directory in list(self._directories):
                for entry in sorted(directory.rglob("*")):
                    if entry.is_file() and entry.suffix == META_SUFFIX:
                        continue
                    if entry not in self._path_ids:
                        self.import_asset(entry)

    def get_asset_meta(self, path: str | Path) -> AssetMeta | None:
        """Return the meta indexed for *path*, or ``None``."""
        with self._lock:
            asset_id = self._path_ids.get(Path(path))
            return None if asset_id is None else self._metas.get(asset_id)

    def create_folder(self, path: str | Path) -> AssetMeta | None:
        """Create a folder at a free path derived from *path* and import it."""
        target = generate_unique_asset_path(path)
        try:
            target.mkdir()
        except OSError as error:
            raise OSError(f"Failed to create folder: {path}") from error
        return self.import_asset(target)

    def create_asset(
        self, kind: NativeAssetKind, document: Mapping[str, Any], path: str | Path
    ) -> AssetMeta | None:
        """Write a native asset document to disk and import it.

        The extension of *path* is replaced by the one the kind requires.
        """
        kind = NativeAssetKind(kind)
        asset_path = Path(path)
        expected = kind.extension
        if asset_path.suffix != expected:
            corrected = asset_path.with_suffix(expected)
            _log.warning(
                "Asset extension mismatch: %s != %s, changed to %s",
                asset_path.suffix,
                expected,
                corrected,
            )
            asset_path = corrected
        with self._lock:
            target = generate_unique_asset_path(asset_path)
            target.write_text(json.dumps(dict(document), indent=4), encoding="utf-8")
            return self.import_asset(target)