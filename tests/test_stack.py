import io
import sys

import pytest

from algokit.stack import Stack, main


def test_push_top_pop():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    assert stack.top() == 2
    assert stack.pop() == 2
    assert stack.top() == 1
    assert len(stack) == 1


def test_empty_flag():
    stack = Stack()
    assert stack.empty() is True
    stack.push("a")
    assert stack.empty() is False
    stack.pop()
    assert stack.empty() is True


def test_iteration_is_top_down():
    stack = Stack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert list(stack) == [3, 2, 1]


@pytest.mark.parametrize("method", ["pop", "top"])
def test_empty_raises(method):
    with pytest.raises(IndexError, match="chyba: zasobnik je prazdny!"):
        getattr(Stack(), method)()


def run(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr()


def test_main_int_stack(monkeypatch, capsys):
    code, captured = run(monkeypatch, capsys, "1\n1\n5\n1\n7\n5\n3\n4\n0\n")
    assert code == 0
    assert "obsah zasobnika (vrchol dolu): 7 5 \n" in captured.out
    assert "vrchol zasobnika: 7\n" in captured.out
    assert "zasobnik nie je prazdny" in captured.out


def test_main_double_stack(monkeypatch, capsys):
    _, captured = run(monkeypatch, capsys, "2\n1\n2.5\n3\n0\n")
    assert "vrchol zasobnika: 2.5\n" in captured.out


def test_main_string_stack(monkeypatch, capsys):
    _, captured = run(monkeypatch, capsys, "3\n1\nhello\n3\n0\n")
    assert "vrchol zasobnika: hello\n" in captured.out


def test_main_int_rejects_fraction(monkeypatch, capsys):
    _, captured = run(monkeypatch, capsys, "1\n1\n2.5\n4\n0\n")
    assert "neplatny vstup: cislo musi byt cele!" in captured.out
    assert "zasobnik je prazdny\n" in captured.out


def test_main_pop_empty_reports_error(monkeypatch, capsys):
    _, captured = run(monkeypatch, capsys, "1\n2\n0\n")
    assert "chyba: zasobnik je prazdny!" in captured.err


def test_main_non_integer_type_choice(monkeypatch, capsys):
    code, captured = run(monkeypatch, capsys, "1.5\n")
    assert code == 1
    assert "neplatny vstup: cislo musi byt cele!" in captured.out


def test_main_unknown_type_choice(monkeypatch, capsys):
    code, captured = run(monkeypatch, capsys, "9\n")
    assert code == 0
    assert captured.out.endswith("neplatna volba!\n")