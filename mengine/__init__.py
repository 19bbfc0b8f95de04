"""Asset database with .meta files, importer settings, window configuration,
scene hierarchy and a headless editor session for a small game engine."""

__version__ = "0.1.0"
__all__ = ["__version__"]