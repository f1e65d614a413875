"""Singly linked list of integers with a small interactive front end."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass
class _Node:
    value: int
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list supporting insertion at both ends."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: int) -> None:
        """Insert ``value`` at the head."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append ``value`` at the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def remove(self, value: int) -> bool:
        """Remove the first occurrence of ``value``; return whether one was found."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None and node.value != value:
            previous, node = node, node.next
        if node is None:
            return False
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1
        return True

    def clear(self) -> None:
        """Drop every element."""
        self._head = self._tail = None
        self._size = 0

    def render(self) -> str:
        """Return the list as ``Lista: a -> b -> NULL``."""
        return "Lista: " + "".join(f"{value} -> " for value in self) + "NULL"


def _demo() -> None:
    items = LinkedList()
    print("Test della lista concatenata")
    for value in (30, 20, 10):
        items.push_front(value)
    print("Dopo inserimento in testa: " + items.render())
    for value in (40, 50):
        items.push_back(value)
    print("Dopo inserimento in coda: " + items.render())
    for value in (30, 60):
        found = "Trovato" if value in items else "Non trovato"
        print(f"Ricerca del valore {value}: {found}")
    items.remove(20)
    print("Dopo eliminazione del valore 20: " + items.render())
    items.remove(10)
    print("Dopo eliminazione del valore 10 (testa): " + items.render())
    items.remove(50)
    print("Dopo eliminazione del valore 50 (coda): " + items.render())
    items.clear()
    print("Memoria liberata con successo")


def _read_int(prompt: str) -> Optional[int]:
    """Return the entered integer, -1 on unparsable input, None at end of input."""
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if line == "":
        return None
    try:
        return int(line.split()[0]) if line.split() else -1
    except ValueError:
        return -1


def _interactive() -> None:
    items = LinkedList()
    while True:
        print("\nOperazioni disponibili:")
        print("1. Inserisci in testa")
        print("2. Inserisci in coda")
        print("3. Stampa lista")
        print("0. Esci")
        choice = _read_int("Scelta: ")
        if choice is None or choice == 0:
            print("Uscita...")
            break
        if choice in (1, 2):
            line_value = _read_int("Inserisci valore: ")
            if line_value is None:
                break
            if choice == 1:
                items.push_front(line_value)
            else:
                items.push_back(line_value)
        elif choice == 3:
            print(items.render())
        else:
            print("Scelta non valida!")
    items.clear()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive list, or the scripted demo with ``--demo``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if "--demo" in args:
        _demo()
    else:
        _interactive()
    return 0


if __name__ == "__main__":
    sys.exit(main())