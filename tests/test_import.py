"""Verify package imports work correctly."""


def test_import_hshighlight() -> None:
    """Test that hshighlight can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import hshighlight

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert hshighlight.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from hshighlight import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Test that every name in __all__ is importable."""
    import hshighlight

    for name in hshighlight.__all__:
        assert hasattr(hshighlight, name), name
