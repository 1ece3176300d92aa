import pytest

from structlab.student_container import Student, StudentContainer, main


def student(ra, status="A"):
    return Student(ra=ra, name=f"name{ra}", born_at="20000101", status=status)


def filled(*ras):
    container = StudentContainer()
    for ra in ras:
        container.insert(student(ra))
    return container


def ras(container):
    return [s.ra for s in container]


def test_new_container_is_empty_queue():
    container = StudentContainer()
    assert container.is_empty()
    assert not container.is_stack()
    assert list(container) == []


def test_queue_mode_is_first_in_first_out():
    container = filled("1", "2", "3")
    assert ras(container) == ["1", "2", "3"]
    assert container.remove().ra == "1"
    assert ras(container) == ["2", "3"]


def test_transfer_to_stack_reverses_order():
    container = filled("1", "2", "3")
    container.transfer()
    assert container.is_stack()
    assert ras(container) == ["3", "2", "1"]


def test_stack_mode_is_last_in_first_out():
    container = filled("1", "2")
    container.transfer()
    container.insert(student("9"))
    assert ras(container) == ["9", "2", "1"]
    assert container.remove().ra == "9"
    assert container.remove().ra == "2"


def test_transfer_twice_restores_queue():
    container = filled("1", "2", "3")
    container.transfer()
    container.transfer()
    assert not container.is_stack()
    assert ras(container) == ["1", "2", "3"]
    assert container.remove().ra == "1"


def test_removing_everything_empties():
    container = filled("1")
    container.remove()
    assert container.is_empty()
    with pytest.raises(IndexError):
        container.remove()


def test_transfer_on_empty_raises():
    with pytest.raises(IndexError):
        StudentContainer().transfer()


def test_student_active_and_describe():
    record = Student("7", "Ana", "20010203", "I")
    assert not record.active
    assert student("8").active
    text = record.describe()
    assert "Name: Ana" in text
    assert "Active: I" in text


def test_main_inserts_and_transfers(monkeypatch, capsys):
    answers = iter(
        ["2", "11", "Ana", "20000101", "A", "2", "22", "Bia", "20000202", "I", "4", "3", "0"]
    )
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "| TOP |" in out
    assert out.index("Name: Bia") < out.index("Name: Ana")