"""
Tests for write_entries() — uses tmp_path only.
"""
from __future__ import annotations

import pytest

from create_app.errors import ScaffoldError
from create_app.models import ScaffoldEntry
from create_app.scaffold import generate
from create_app.writer import write_entries


def test_write_entries_creates_nested_dirs(tmp_path):
    plan = generate("demo")
    written = write_entries(plan.entries, tmp_path)

    assert [p.relative_to(tmp_path).as_posix() for p in written] == plan.paths()
    assert (tmp_path / "src").is_dir()
    for entry in plan.entries:
        assert (tmp_path / entry.path).read_text(encoding="utf-8") == entry.content


def test_write_entries_overwrites_existing_file(tmp_path):
    (tmp_path / "server.js").write_text("// old\n", encoding="utf-8")
    write_entries([ScaffoldEntry("server.js", "// new\n")], tmp_path)
    assert (tmp_path / "server.js").read_text(encoding="utf-8") == "// new\n"


@pytest.mark.parametrize("bad", ["/etc/passwd", "../escape.js", "src/../../x.js", ""])
def test_write_entries_rejects_paths_outside_root(tmp_path, bad):
    with pytest.raises(ScaffoldError):
        write_entries([ScaffoldEntry(bad, "x")], tmp_path)


def test_write_entries_empty(tmp_path):
    assert write_entries([], tmp_path) == []
