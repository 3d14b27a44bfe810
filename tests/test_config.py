import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from buildwatch.config import load_config
from buildwatch.sources import discover_sources


def test_defaults_without_config_file(tmp_path):
    config = load_config(tmp_path)

    assert config.root == tmp_path
    assert config.build.compiler == "javac"
    assert config.build.pattern == "*.java"
    assert config.watch.recursive is False


def test_config_found_in_parent_directory(tmp_path):
    (tmp_path / ".buildwatch.toml").write_text(
        '[build]\ncompiler = "ecj"\n\n[watch]\nrecursive = true\n', encoding="utf-8"
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    config = load_config(nested)

    assert config.root == tmp_path
    assert config.build.compiler == "ecj"
    assert config.build.pattern == "*.java"
    assert config.watch.recursive is True


def test_discover_sources_sorted_by_name(tmp_path):
    for name in ("Zeta.java", "Alpha.java", "notes.txt", "Mid.java"):
        (tmp_path / name).write_text("", encoding="utf-8")

    names = [path.name for path in discover_sources(tmp_path)]

    assert names == ["Alpha.java", "Mid.java", "Zeta.java"]


def test_discover_sources_skips_hidden_files(tmp_path):
    for name in (".Scratch.java", "Main.java"):
        (tmp_path / name).write_text("", encoding="utf-8")

    assert [path.name for path in discover_sources(tmp_path)] == ["Main.java"]
