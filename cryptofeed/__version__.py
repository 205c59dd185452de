"""
Version information for the crypto feed cache.

The package version is read from the installed distribution metadata, with a
fallback to pyproject.toml for source checkouts that are not installed.
"""

try:
    from importlib.metadata import version

    __version__ = version("cryptofeed-cache")
except Exception:
    # Not installed; read pyproject.toml directly
    import tomllib
    from pathlib import Path

    try:
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
            __version__ = pyproject["project"]["version"]
    except Exception:
        __version__ = "0.0.0-dev"
