import io

import pytest

from structlab.calculator import (
    Calculator,
    Operation,
    add,
    divide,
    main,
    multiply,
    subtract,
)


def test_add():
    assert add(1.5, 2.5) == 4.0


def test_divide():
    assert divide(7.0, 2.0) == 3.5


def test_subtract_self_is_zero():
    assert subtract(3.25, 3.25) == 0


def test_multiply_commutes():
    assert multiply(2.5, 4.0) == multiply(4.0, 2.5)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError, match="Cannot divide by 0!"):
        divide(1.0, 0)


def test_operation_from_menu_number():
    assert Operation(4) is Operation.DIVIDE
    assert Operation.ADD.noun == "sum"


def test_invalid_operation_raises():
    with pytest.raises(ValueError):
        Operation(5)


def test_apply_accumulates():
    calc = Calculator()
    first = calc.apply(Operation.ADD, 1.0, 2.0)
    second = calc.apply(1, 1.0, 2.0)
    assert first == add(1.0, 2.0)
    assert second == 2 * first
    assert calc.result == second


def test_apply_division_by_zero_keeps_result():
    calc = Calculator()
    calc.apply(Operation.MULTIPLY, 2.0, 3.0)
    before = calc.result
    with pytest.raises(ZeroDivisionError):
        calc.apply(Operation.DIVIDE, 1.0, 0.0)
    assert calc.result == before


def test_reset():
    calc = Calculator()
    calc.apply(Operation.SUBTRACT, 5.0, 1.0)
    calc.reset()
    assert calc.result == Calculator().result


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1.5\n2.5\n1\n2\n"))
    assert main([]) == 0
    assert "The result of your sum is: 4.00" in capsys.readouterr().out


def test_main_keeps_running_total(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n1\n1\n1\n1\n1\n1\n2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.count("The result of your sum is") == 2


def test_main_invalid_option(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n9\n2\n"))
    assert main([]) == 0
    assert "Invalid option!" in capsys.readouterr().out


def test_main_division_by_zero_message(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n4\n2\n"))
    assert main([]) == 0
    assert "Cannot divide by 0!" in capsys.readouterr().out