import runpy
from pathlib import Path

from razao import Book


def test_readme_runs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    runpy.run_path(str(Path(__file__).parent.parent / "readme.py"))
    assert len(Book.load(tmp_path / "razao.json").transactions) == 4
