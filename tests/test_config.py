import json

import pytest

from mengine.config import (
    DEFAULT_RESOLUTIONS,
    Resolution,
    WindowConfig,
    load_window_config,
)


def test_defaults_match_editor_settings():
    config = WindowConfig()
    assert config.width == 1280
    assert config.height == 720
    assert config.title == "MEngine Editor"
    assert config.font_path == "Assets/Fonts/NotoSans-Medium.ttf"
    assert (config.fullscreen, config.resizable, config.vsync) == (False, True, True)


def test_to_json_nests_under_window_section():
    document = WindowConfig(width=800, height=600, title="Demo").to_json()
    assert list(document) == ["Window"]
    assert document["Window"]["Width"] == 800
    assert document["Window"]["Height"] == 600
    assert document["Window"]["Title"] == "Demo"


def test_round_trip():
    config = WindowConfig(
        width=1920,
        height=1080,
        title="Scene",
        fullscreen=True,
        resizable=False,
        vsync=False,
        font_path="fonts/a.ttf",
        font_size=20.0,
    )
    assert WindowConfig.from_json(config.to_json()) == config


def test_round_trip_through_json_text():
    config = WindowConfig(title="Text")
    restored = WindowConfig.from_json(json.loads(json.dumps(config.to_json())))
    assert restored == config


def test_font_size_read_as_whole_number():
    document = WindowConfig().to_json()
    document["Window"]["FontSize"] = 18.7
    assert WindowConfig.from_json(document).font_size == 18.0


def test_missing_key_raises():
    document = WindowConfig().to_json()
    del document["Window"]["Vsync"]
    with pytest.raises(KeyError):
        WindowConfig.from_json(document)


def test_missing_section_raises():
    with pytest.raises(KeyError):
        WindowConfig.from_json({})


@pytest.mark.parametrize(
    "key, value",
    [("Width", "wide"), ("Fullscreen", 1), ("Title", 5), ("Height", True)],
)
def test_wrong_types_raise(key, value):
    document = WindowConfig().to_json()
    document["Window"][key] = value
    with pytest.raises(TypeError):
        WindowConfig.from_json(document)


def test_load_window_config(tmp_path):
    settings = tmp_path / "appsettings.json"
    expected = WindowConfig(width=640, height=480, title="Loaded")
    settings.write_text(json.dumps(expected.to_json()), encoding="utf-8")
    assert load_window_config(settings) == expected


def test_load_window_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_window_config(tmp_path / "absent.json")


def test_resolution_str():
    assert str(Resolution()) == "1280x720"
    assert str(Resolution(1920, 1080)) == "1920x1080"


def test_resolution_equality():
    assert Resolution(800, 600) == Resolution(800, 600)
    assert Resolution(800, 600) != Resolution(600, 800)


def test_default_resolutions_contain_default_and_are_unique():
    assert Resolution() in DEFAULT_RESOLUTIONS
    assert len(set(DEFAULT_RESOLUTIONS)) == len(DEFAULT_RESOLUTIONS)
    assert list(DEFAULT_RESOLUTIONS) == sorted(
        DEFAULT_RESOLUTIONS, key=lambda r: r.width * r.height
    )