from pathlib import Path

from fenrir.data import paths


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_get_definitions_path_package_data_exists() -> None:
    definitions_path = paths.get_definitions_path()
    assert definitions_path.name == "definitions"
    assert definitions_path.exists()
    assert (definitions_path / "items.json").exists()


def test_get_definitions_path_accepts_string(tmp_path: Path) -> None:
    assert paths.get_definitions_path(str(tmp_path)) == tmp_path
