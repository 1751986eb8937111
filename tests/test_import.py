"""Verify package imports work correctly."""


def test_import_md0() -> None:
    """Test that md0 can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import md0

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert md0.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from md0 import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_exported() -> None:
    """Every name in __all__ resolves."""
    import md0

    for name in md0.__all__:
        assert hasattr(md0, name), name
