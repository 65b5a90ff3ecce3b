"""Tests for listing archives in the install directory."""

from gomii.deploy import list_installed_packages


def test_lists_zip_archives_sorted(install_dir):
    for name in ("zeta.zip", "alpha.zip", "mid.zip"):
        (install_dir / name).write_bytes(b"")

    assert list_installed_packages(install_dir) == ["alpha", "mid", "zeta"]


def test_ignores_other_entries(install_dir):
    (install_dir / "toolkit.zip").write_bytes(b"")
    (install_dir / "notes.txt").write_text("not a package")
    (install_dir / "dir.zip").mkdir()
    (install_dir / ".zip").write_bytes(b"")

    assert list_installed_packages(install_dir) == ["toolkit"]


def test_empty_directory(install_dir):
    assert list_installed_packages(install_dir) == []


def test_missing_directory(tmp_path):
    assert list_installed_packages(tmp_path / "missing") == []
