# mengine

The asset and editor core of a small game engine, with no window and no
rendering. It has these parts:

- a file-backed asset database that keeps a `.meta` sidecar file next to each asset
- importer settings for each kind of asset
- window settings and viewport resolutions
- a scene hierarchy of named entities
- a headless editor session that ties the parts together

It needs only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Asset database (`mengine.asset_database`)

`AssetDatabase` indexes the files and folders below one or more registered
directories. It keys them both by path and by UUID.

```python
from mengine.asset_database import AssetDatabase

db = AssetDatabase()
db.register_asset_directory("Project")   # FileNotFoundError if missing
db.refresh()                             # import everything not yet indexed

meta = db.get_asset_meta("Project/wood.png")
print(meta.type, meta.id, meta.importer)  # AssetType.TEXTURE, UUID(...), TextureImporter(...)
```

### Importing assets

`import_asset(path)` indexes a single file or folder.

- If `<name>.meta` already exists beside the asset, the database reads the ID
  and importer settings from that file.
- Otherwise it creates a new UUID and picks a default importer, then writes
  the `.meta` file as indented JSON. The default importer depends on the
  asset:
  - `TextureImporter` for `.png`, `.jpg` and `.jpeg`
  - `NativeFormatImporter` for `.mat`, `.shader` and `.prefab`
  - `AssetImporter` for anything else, including folders
- A missing path raises `FileNotFoundError`.
- If you ask it to import a `.meta` file itself, it logs a warning and
  returns `None`.

`refresh()` walks the registered directories recursively in sorted order. It
skips `.meta` files and imports every entry that is not yet indexed. Use
`unregister_asset_directory` to stop scanning a directory. The `directories`
property lists the registered directories.

### Meta files

An `AssetMeta` holds these fields:

- `id`
- `is_folder`
- `type`
- `importer`

`AssetMeta.to_json()` produces `{"ID": ..., "folder": ..., "<ImporterKey>": {...}}`.
`AssetMeta.from_json()` reads that document back. It raises an error if the
ID, the folder flag or the importer section is missing or invalid.

### Asset types

`determine_asset_type(extension)` maps a file extension to an `AssetType`:

- an empty extension means a folder
- `.png`, `.jpg` and `.jpeg` are textures
- `.mat` is a material
- `.shader`, `.hlsl`, `.glsl`, `.vert`, `.frag` and `.comp` are shaders
- `.prefab` is a prefab
- `.fbx` and `.obj` are models
- `.wav`, `.mp3` and `.ogg` are audio
- `.anim` is an animation
- anything else is `AssetType.NONE`

### Creating assets

`generate_unique_asset_path(path)` returns `path` if it is free. Otherwise it
returns the first free `stem (n)ext` beside it, such as `New Folder (1)`.

- `create_folder(path)` creates a folder at a unique path and imports it.
- `create_asset(kind, document, path)` writes a JSON document for a
  `NativeAssetKind` and imports it. If the extension of `path` does not match
  the kind, it is replaced:
  - `.shader` for pipelines
  - `.mat` for materials
  - `.prefab` for prefabs
  - `.asset` for plain assets

## Importers (`mengine.importers`)

`AssetImporter` is the base class. It holds the asset's `name` and
`asset_path` and has no saved settings, so its `to_json()` is `{}`. These
subclasses add no settings either:

- `AudioImporter`
- `NativeFormatImporter`
- `ShaderImporter`
- `PrefabImporter`
- `FBXImporter`

`TextureImporter` holds the sampling settings:

- mip levels and bias
- min and mag filters (`FilterType`)
- U, V and W wrap modes (`WrapModeType`)
- compare mode (`CompareModeType`) and compare function (`CompareFuncType`)
- LOD range and bias
- anisotropy level
- a four-component border colour

It round-trips through `to_json` / `from_json`. Enums are stored by name, for
example `"Linear"` or `"Repeat"`. `from_json` raises `KeyError` for a missing
key. It raises `ValueError` for an unknown enum name or a border colour that
does not have exactly four components.

## Configuration (`mengine.config`)

`WindowConfig` holds the window settings:

- width and height
- title
- fullscreen, resizable and vsync flags
- font path and font size

Its `to_json()` and `from_json()` work on a `{"Window": {...}}` document.
Every key is required. A missing key raises `KeyError` and a value of the
wrong kind raises `TypeError`. The font size is read as a whole number.
`load_window_config(path)` reads such a document from a JSON file.

`Resolution` is a frozen width/height pair. It formats as `1280x720` and has
an `aspect_ratio` property. `DEFAULT_RESOLUTIONS` lists the resolutions the
editor offers, from `100x100` to `5120x2880`.

## Scene hierarchy (`mengine.hierarchy`)

`SceneHierarchy` stores named entities, identified by integers, in a
parent/child tree. It has these methods:

- `create_entity(name)`
- `reparent(entity, parent)`, which appends the entity as the last child and
  refuses to create a cycle
- `unparent(entity)`
- `delete(entity)`, which deletes the entity and all of its descendants
- `roots()`, in creation order
- `children(entity)`
- `name_of(entity)` and `parent_of(entity)`

`fit_viewport(width, height, aspect_ratio)` centres an image of the given
aspect ratio in a region. It returns `(offset_x, offset_y, display_width,
display_height)`.

## Editor (`mengine.editor`)

`Editor(project_path, config)` is an editing session over one project
directory. Use it as a context manager, or call `init()` and `shutdown()`
yourself.

`init()` registers the project directory and creates an `EditorCamera`
entity. It then starts a background thread that calls `refresh()` on the
database every millisecond until `shutdown()`.

The session offers these methods:

- `list_current_assets()`: the indexed assets in the current folder, folders
  first
- `open_folder(meta)`: selects an asset and, if it is a folder, browses into it
- `navigate_up()`: moves one folder up, but never above the project root
- `create_folder()`: creates `New Folder` in the current folder, with a
  unique name if that one is taken
- `create_material(kind)`: creates an empty material document for PBR, Phong
  or custom materials, as `PBRMaterial.mat`, `PhongMaterial.mat` or
  `CustomMaterial.mat`
- `select_resolution(resolution)`: accepts only resolutions from
  `DEFAULT_RESOLUTIONS`
- `viewport_layout(width, height)`: fits the camera's aspect ratio into a
  panel of the given size

### Command line

```
mengine-editor [--project PATH] [--settings PATH]
```

By default the command uses `./Project` and `./appsettings.json`. If the
settings file is missing, it uses the default window settings. The command
indexes the project and prints one line per asset in the project root: type,
name and UUID. It exits with status 1 if the project directory does not exist.

## What this package does not do

- It opens no window and draws no user interface.
- It does not render, and it loads no textures, models, audio or shaders into
  memory. The database only records identities, types and importer settings.
- Material documents created by the editor are empty JSON objects. Nothing
  here reads their contents.
- Scene entities have only a name and a place in the tree. There are no
  transforms, cameras, meshes, lights or other components, and no scene
  saving.