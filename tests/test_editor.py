import time
from pathlib import Path

import pytest

from mengine.asset_database import AssetType, NativeAssetKind
from mengine.config import DEFAULT_RESOLUTIONS, Resolution
from mengine.editor import Editor, main


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "Project"
    root.mkdir()
    return root


@pytest.fixture
def editor(project: Path) -> Editor:
    session = Editor(project, None)
    session.init()
    session.shutdown()
    return session


def test_init_creates_editor_camera_and_shutdown_stops(project):
    session = Editor(project, None)
    session.init()
    try:
        assert session.running
        assert session.hierarchy.roots() == [session.editor_camera]
        assert session.hierarchy.name_of(session.editor_camera) == "EditorCamera"
    finally:
        session.shutdown()
    assert not session.running


def test_context_manager_stops_scanner(project):
    with Editor(project, None) as session:
        assert session.running
    assert not session.running


def test_init_missing_project_raises(tmp_path):
    session = Editor(tmp_path / "missing", None)
    with pytest.raises(FileNotFoundError):
        session.init()


def test_scanner_indexes_new_files(project):
    (project / "a.png").write_bytes(b"")
    with Editor(project, None) as session:
        deadline = time.monotonic() + 5
        meta = None
        while meta is None and time.monotonic() < deadline:
            meta = session.database.get_asset_meta(project / "a.png")
            time.sleep(0.01)
    assert meta is not None
    assert meta.type is AssetType.TEXTURE


def test_list_current_assets_folders_first_without_meta(editor, project):
    (project / "b.png").write_bytes(b"")
    (project / "zdir").mkdir()
    editor.database.refresh()
    assets = editor.list_current_assets()
    assert [m.importer.name for m in assets] == ["zdir", "b"]
    assert assets[0].is_folder
    assert (project / "b.png.meta").exists()


def test_list_skips_unindexed(editor, project):
    (project / "late.png").write_bytes(b"")
    assert editor.list_current_assets() == []


def test_navigation(editor, project):
    folder = editor.create_folder()
    assert editor.navigate_up() == project
    assert editor.open_folder(folder) == project / "New Folder"
    assert editor.current_path == project / "New Folder"
    assert editor.navigate_up() == project


def test_open_non_folder_keeps_path(editor, project):
    meta = editor.create_material(NativeAssetKind.PBR_MATERIAL)
    assert editor.open_folder(meta) == project
    assert editor.selected_asset is meta


def test_create_folder_twice_is_unique(editor, project):
    first = editor.create_folder()
    second = editor.create_folder()
    assert first.importer.asset_path == project / "New Folder"
    assert second.importer.asset_path == project / "New Folder (1)"
    assert first.id != second.id


@pytest.mark.parametrize(
    "kind, file_name",
    [
        ("PBRMaterial", "PBRMaterial.mat"),
        ("PhongMaterial", "PhongMaterial.mat"),
        ("CustomMaterial", "CustomMaterial.mat"),
    ],
)
def test_create_material(editor, project, kind, file_name):
    meta = editor.create_material(kind)
    assert meta.importer.asset_path == project / file_name
    assert meta.type is AssetType.MATERIAL


def test_create_material_rejects_non_material(editor):
    with pytest.raises(ValueError):
        editor.create_material(NativeAssetKind.PREFAB)


def test_select_resolution(editor):
    choice = DEFAULT_RESOLUTIONS[3]
    assert editor.select_resolution(choice) == choice
    assert editor.resolution == choice
    with pytest.raises(ValueError):
        editor.select_resolution(Resolution(123, 45))
    assert editor.resolution == choice


def test_viewport_layout_keeps_aspect(editor):
    x, y, w, h = editor.viewport_layout(1000, 1000)
    assert w / h == pytest.approx(editor.camera_aspect_ratio)
    assert x == 0


def test_main_lists_assets(project, capsys):
    (project / "c.png").write_bytes(b"")
    assert main(["--project", str(project), "--settings", str(project / "none.json")]) == 0
    assert "Texture\tc" in capsys.readouterr().out


def test_main_missing_project(tmp_path):
    assert main(["--project", str(tmp_path / "nope"), "--settings", str(tmp_path / "x.json")]) == 1