import io

import pytest

from simulab.phonebook import Contact, Phonebook, main


@pytest.fixture
def book():
    phonebook = Phonebook()
    phonebook.add("Anna", "101")
    phonebook.add("Bruno", "202")
    return phonebook


def test_add_and_find(book):
    assert book.find("Anna") == Contact("Anna", "101")
    assert len(book) == 2


def test_find_missing_returns_none(book):
    assert book.find("Carla") is None


def test_update_changes_phone(book):
    book.update("Bruno", "303")
    assert book.find("Bruno").phone == "303"


def test_update_missing_raises(book):
    with pytest.raises(KeyError):
        book.update("Carla", "404")


def test_delete_removes_and_keeps_order(book):
    book.add("Carla", "404")
    removed = book.delete("Bruno")
    assert removed.name == "Bruno"
    assert [c.name for c in book] == ["Anna", "Carla"]


def test_delete_missing_raises(book):
    with pytest.raises(KeyError):
        book.delete("Zeno")


def test_find_returns_first_duplicate():
    phonebook = Phonebook()
    phonebook.add("Anna", "1")
    phonebook.add("Anna", "2")
    assert phonebook.find("Anna").phone == "1"


def test_render_empty():
    assert "La rubrica è vuota." in Phonebook().render()


def test_render_lists_contacts(book):
    text = book.render()
    assert "Rubrica Telefonica (2 contatti):" in text
    assert "1. Nome: Anna, Telefono: 101" in text
    assert "2. Nome: Bruno, Telefono: 202" in text


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nAnna\n42\n2\nAnna\n4\nXyz\n5\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Contatto aggiunto con successo!" in out
    assert "Contatto trovato: Nome: Anna, Telefono: 42" in out
    assert "Impossibile eliminare il contatto." in out
    assert "Arrivederci!" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))
    assert main([]) == 0
    assert "Scelta non valida. Riprova." in capsys.readouterr().out