"""Phone book of named contacts with an interactive menu."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

_RULE = "-" * 26


@dataclass
class Contact:
    """A name and its phone number."""

    name: str
    phone: str


class Phonebook:
    """An ordered collection of contacts looked up by exact name."""

    def __init__(self) -> None:
        self._contacts: List[Contact] = []

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def add(self, name: str, phone: str) -> Contact:
        """Append a new contact and return it."""
        contact = Contact(name, phone)
        self._contacts.append(contact)
        return contact

    def _index(self, name: str) -> Optional[int]:
        return next(
            (i for i, contact in enumerate(self._contacts) if contact.name == name),
            None,
        )

    def find(self, name: str) -> Optional[Contact]:
        """Return the first contact called ``name``, or None."""
        index = self._index(name)
        return None if index is None else self._contacts[index]

    def update(self, name: str, new_phone: str) -> Contact:
        """Change the phone of the contact called ``name``.

        Raises KeyError if no such contact exists.
        """
        contact = self.find(name)
        if contact is None:
            raise KeyError(name)
        contact.phone = new_phone
        return contact

    def delete(self, name: str) -> Contact:
        """Remove and return the contact called ``name``.

        Raises KeyError if no such contact exists.
        """
        index = self._index(name)
        if index is None:
            raise KeyError(name)
        return self._contacts.pop(index)

    def render(self) -> str:
        """Return the listing of every contact."""
        lines = [f"\nRubrica Telefonica ({len(self)} contatti):", _RULE]
        if not self._contacts:
            lines.append("La rubrica è vuota.")
            return "\n".join(lines)
        lines += [
            f"{number}. Nome: {contact.name}, Telefono: {contact.phone}"
            for number, contact in enumerate(self._contacts, start=1)
        ]
        lines.append(_RULE)
        return "\n".join(lines)


def _read_line(prompt: str) -> str:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if line == "":
        raise EOFError("input terminated")
    return line.rstrip("\n")


def _read_choice() -> int:
    text = _read_line("Scelta: ").split()
    try:
        return int(text[0]) if text else -1
    except ValueError:
        return -1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive phone book."""
    book = Phonebook()
    print("Benvenuto nella Rubrica Telefonica")
    try:
        while True:
            print("\nOperazioni disponibili:")
            print("1. Aggiungi contatto")
            print("2. Cerca contatto")
            print("3. Modifica contatto")
            print("4. Elimina contatto")
            print("5. Visualizza tutti i contatti")
            print("0. Esci")
            choice = _read_choice()
            if choice == 0:
                print("Arrivederci!")
                break
            if choice == 1:
                name = _read_line("Inserisci nome: ")
                phone = _read_line("Inserisci numero di telefono: ")
                book.add(name, phone)
                print("Contatto aggiunto con successo!")
            elif choice == 2:
                name = _read_line("Inserisci nome da cercare: ")
                contact = book.find(name)
                if contact is None:
                    print("Contatto non trovato.")
                else:
                    print(f"Contatto trovato: Nome: {contact.name}, Telefono: {contact.phone}")
            elif choice == 3:
                name = _read_line("Inserisci nome del contatto da modificare: ")
                phone = _read_line("Inserisci nuovo numero di telefono: ")
                try:
                    book.update(name, phone)
                    print("Contatto modificato con successo!")
                except KeyError:
                    print("Impossibile modificare il contatto.")
            elif choice == 4:
                name = _read_line("Inserisci nome del contatto da eliminare: ")
                try:
                    book.delete(name)
                    print("Contatto eliminato con successo!")
                except KeyError:
                    print("Impossibile eliminare il contatto.")
            elif choice == 5:
                print(book.render())
            else:
                print("Scelta non valida. Riprova.")
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())