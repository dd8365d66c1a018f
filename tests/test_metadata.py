from pathlib import Path

import tomllib

from lineage_metagen import __version__

ROOT = Path(__file__).resolve().parents[1]


def load_pyproject():
    return tomllib.loads((ROOT / "pyproject.toml").read_text())


def test_version_matches_pyproject():
    pyproject = load_pyproject()
    project = pyproject["project"]

    assert "version" not in project
    assert "version" in project["dynamic"]

    dynamic_version = pyproject["tool"]["setuptools"]["dynamic"]["version"]
    assert dynamic_version["attr"] == "lineage_metagen.__version__"
    assert __version__


def test_dependencies_cover_runtime_imports():
    project = load_pyproject()["project"]
    names = {dep.split(">")[0].split("=")[0].lower() for dep in project["dependencies"]}
    assert {"pandas", "pyarrow", "pyyaml"} <= names


def test_console_script_points_at_cli():
    project = load_pyproject()["project"]
    assert project["scripts"]["lineage-metagen"] == "lineage_metagen.cli:main"


def test_manifest_includes_docs():
    manifest = (ROOT / "MANIFEST.in").read_text().splitlines()
    for required in ("include README.md", "include pyproject.toml"):
        assert required in manifest
