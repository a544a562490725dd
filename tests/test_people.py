import io
import sys

import pytest

from algokit.people import PeopleRegistry, main


@pytest.fixture
def registry(tmp_path):
    return PeopleRegistry(tmp_path / "people.txt")


def test_add_then_find(registry):
    registry.add("ann", 30)
    assert registry.contains("ann")
    assert "ann" in registry
    assert registry.find("ann") == 30


def test_file_format(registry):
    registry.add("ann", 30)
    registry.add("bob", 41)
    assert registry.path.read_text(encoding="utf-8") == "ann 30\nbob 41\n"


def test_duplicate_name_rejected(registry):
    registry.add("ann", 30)
    with pytest.raises(ValueError):
        registry.add("ann", 31)
    assert registry.find("ann") == 30


@pytest.mark.parametrize("age", [0, -5])
def test_non_positive_age_rejected(registry, age):
    with pytest.raises(ValueError):
        registry.add("ann", age)
    assert not registry.contains("ann")


def test_missing_file(registry):
    assert registry.contains("ann") is False
    with pytest.raises(FileNotFoundError):
        registry.find("ann")


def test_malformed_lines_skipped(registry):
    registry.path.write_text("broken\nann x\n\nann 30\n", encoding="utf-8")
    assert registry.find("ann") == 30
    assert registry.find("broken") is None


def run(monkeypatch, capsys, tmp_path, text):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr()


def test_main_add_and_search(monkeypatch, capsys, tmp_path):
    code, captured = run(monkeypatch, capsys, tmp_path, "1\nann\n30\n2\nann\n0\n")
    assert code == 0
    assert "osoba 'ann' s vekom 30 bola pridana!" in captured.out
    assert "najdene: ann - vek: 30" in captured.out
    assert (tmp_path / "people.txt").read_text(encoding="utf-8") == "ann 30\n"


def test_main_rejects_duplicate_and_bad_age(monkeypatch, capsys, tmp_path):
    (tmp_path / "people.txt").write_text("ann 30\n", encoding="utf-8")
    _, captured = run(monkeypatch, capsys, tmp_path, "1\nann\nbob\nx\n0\n25\n0\n")
    assert "meno uz existuje!" in captured.err
    assert captured.err.count("neplatny vstup!") == 2
    assert PeopleRegistry(tmp_path / "people.txt").find("bob") == 25


def test_main_search_not_found(monkeypatch, capsys, tmp_path):
    (tmp_path / "people.txt").write_text("oops\nann 30\n", encoding="utf-8")
    _, captured = run(monkeypatch, capsys, tmp_path, "2\nzoe\n0\n")
    assert "osoba s menom 'zoe' nebola najdena" in captured.out
    assert "nespravny format udajov v subore!" in captured.err


def test_main_search_without_file(monkeypatch, capsys, tmp_path):
    _, captured = run(monkeypatch, capsys, tmp_path, "2\n0\n")
    assert "chyba pri otvarani suboru na citanie!" in captured.err