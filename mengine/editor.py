"""Editor session: project browsing, asset creation and background scanning."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from pathlib import Path
from typing import Sequence

from mengine.asset_database import AssetDatabase, AssetMeta, NativeAssetKind
from mengine.config import DEFAULT_RESOLUTIONS, Resolution, WindowConfig, load_window_config
from mengine.hierarchy import SceneHierarchy, fit_viewport

__all__ = ["Editor", "main"]

_log = logging.getLogger(__name__)

_SCAN_INTERVAL = 0.001
_EDITOR_CAMERA_NAME = "EditorCamera"
_NEW_FOLDER_NAME = "New Folder"

_MATERIAL_FILES = {
    NativeAssetKind.PBR_MATERIAL: "PBRMaterial.mat",
    NativeAssetKind.PHONG_MATERIAL: "PhongMaterial.mat",
    NativeAssetKind.CUSTOM_MATERIAL: "CustomMaterial.mat",
}


class Editor:
    """An editing session over one project directory."""

    def __init__(self, project_path: str | Path, config: WindowConfig | None = None) -> None:
        self.project_path = Path(project_path)
        self.config = config if config is not None else WindowConfig()
        self.database = AssetDatabase()
        self.hierarchy = SceneHierarchy()
        self.current_path = self.project_path
        self.resolutions: tuple[Resolution, ...] = DEFAULT_RESOLUTIONS
        self.resolution = Resolution(1280, 720)
        self.camera_aspect_ratio = 16.0 / 9.0
        self.editor_camera: int | None = None
        self.selected_asset: AssetMeta | None = None
        self._stop = threading.Event()
        self._scanner: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the background asset scanner is active."""
        return self._scanner is not None and self._scanner.is_alive()

    def __enter__(self) -> "Editor":
        self.init()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def init(self) -> None:
        """Register the project, create the editor camera and start scanning."""
        if self.running:
            return
        self.database.register_asset_directory(self.project_path)
        self.editor_camera = self.hierarchy.create_entity(_EDITOR_CAMERA_NAME)
        self._stop.clear()
        self._scanner = threading.Thread(
            target=self._scan_loop, name="asset-scanner", daemon=True
        )
        self._scanner.start()

    def _scan_loop(self) -> None:
        while not self._stop.is_set():
            try:
                self.database.refresh()
            except (OSError, ValueError, KeyError) as error:
                _log.error("Asset scan failed: %s", error)
            self._stop.wait(_SCAN_INTERVAL)
        _log.info("Stop scanning asset directory")

    def shutdown(self) -> None:
        """Stop the background scanner and wait for it to finish."""
        self._stop.set()
        if self._scanner is not None:
            self._scanner.join()
            self._scanner = None

    def navigate_up(self) -> Path:
        """Move the asset browser one folder up, never above the project root."""
        if self.current_path != self.project_path:
            self.current_path = self.current_path.parent
        return self.current_path

    def open_folder(self, meta: AssetMeta) -> Path:
        """Select *meta*; if it is a folder, browse into it."""
        self.selected_asset = meta
        if meta.is_folder and meta.importer is not None:
            self.current_path = meta.importer.asset_path
        return self.current_path

    def list_current_assets(self) -> list[AssetMeta]:
        """Indexed assets in the current folder, folders first."""
        entries = sorted(
            self.current_path.iterdir(), key=lambda entry: (not entry.is_dir(), entry.name)
        )
        metas = []
        for entry in entries:
            if entry.is_file() and entry.suffix == ".meta":
                continue
            meta = self.database.get_asset_meta(entry)
            if meta is not None:
                metas.append(meta)
        return metas

    def create_folder(self) -> AssetMeta | None:
        """Create a new folder in the current folder."""
        return self.database.create_folder(self.current_path / _NEW_FOLDER_NAME)

    def create_material(self, kind: NativeAssetKind | str) -> AssetMeta | None:
        """Create a PBR, Phong or custom material in the current folder."""
        kind = NativeAssetKind(kind)
        try:
            file_name = _MATERIAL_FILES[kind]
        except KeyError:
            raise ValueError(f"Not a material kind: {kind.value}") from None
        return self.database.create_asset(kind, {}, self.current_path / file_name)

    def select_resolution(self, resolution: Resolution) -> Resolution:
        """Switch the viewport to one of the offered resolutions."""
        if resolution not in self.resolutions:
            raise ValueError(f"Unsupported resolution: {resolution}")
        self.resolution = resolution
        return self.resolution

    def viewport_layout(self, width: float, height: float) -> tuple[float, float, float, float]:
        """Place the rendered image inside a viewport of the given size."""
        return fit_viewport(width, height, self.camera_aspect_ratio)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a project, index its assets and list the root folder."""
    parser = argparse.ArgumentParser(prog="mengine", description="Asset editor session.")
    parser.add_argument("--project", type=Path, default=Path.cwd() / "Project")
    parser.add_argument("--settings", type=Path, default=Path.cwd() / "appsettings.json")
    args = parser.parse_args(argv)

    config = load_window_config(args.settings) if args.settings.exists() else WindowConfig()
    editor = Editor(args.project, config)
    try:
        editor.init()
    except FileNotFoundError as error:
        print(error, file=sys.stderr)
        return 1
    try:
        editor.database.refresh()
        for meta in editor.list_current_assets():
            name = meta.importer.name if meta.importer is not None else ""
            print(f"{meta.type.value}\t{name}\t{meta.id}")
    finally:
        editor.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())