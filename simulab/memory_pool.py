"""Fixed-size block allocator backed by a single buffer and a bitmap."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


class PoolError(Exception):
    """Raised when a pool operation cannot be carried out."""


class MemoryPool:
    """A pool of equally sized blocks tracked by a one-bit-per-block map."""

    def __init__(self, block_size: int, num_blocks: int) -> None:
        if block_size <= 0 or num_blocks <= 0:
            raise ValueError("block_size and num_blocks must be positive")
        self.block_size = block_size
        self.num_blocks = num_blocks
        self._memory = bytearray(block_size * num_blocks)
        self._map = bytearray((num_blocks + 7) // 8)
        self.free_blocks = num_blocks

    @property
    def used_blocks(self) -> int:
        """Number of blocks currently allocated."""
        return self.num_blocks - self.free_blocks

    @property
    def usage(self) -> float:
        """Percentage of blocks in use."""
        return 100.0 * self.used_blocks / self.num_blocks

    def is_free(self, index: int) -> bool:
        """Return True if the block at ``index`` exists and is free."""
        if not 0 <= index < self.num_blocks:
            return False
        byte, bit = divmod(index, 8)
        return not self._map[byte] & (1 << bit)

    def _mark(self, index: int, used: bool) -> None:
        byte, bit = divmod(index, 8)
        if used:
            self._map[byte] |= 1 << bit
            self.free_blocks -= 1
        else:
            self._map[byte] &= ~(1 << bit) & 0xFF
            self.free_blocks += 1

    def alloc(self) -> int:
        """Allocate the lowest free block and return its index."""
        if self.free_blocks == 0:
            raise PoolError("no free blocks left in the pool")
        index = next(i for i in range(self.num_blocks) if self.is_free(i))
        self._mark(index, True)
        return index

    def free(self, block: int) -> None:
        """Release an allocated block."""
        if not 0 <= block < self.num_blocks:
            raise PoolError(f"block {block} does not belong to the pool")
        if self.is_free(block):
            raise PoolError(f"block {block} is already free")
        self._mark(block, False)

    def block(self, index: int) -> memoryview:
        """Return a writable view of the block at ``index``."""
        if not 0 <= index < self.num_blocks:
            raise PoolError(f"block {index} does not belong to the pool")
        start = index * self.block_size
        return memoryview(self._memory)[start : start + self.block_size]

    def report(self) -> str:
        """Return a textual summary of the pool and its block map."""
        lines = [
            "Stato del Memory Pool:",
            f"Dimensione blocco: {self.block_size} byte",
            f"Numero totale di blocchi: {self.num_blocks}",
            f"Blocchi liberi: {self.free_blocks}",
            f"Blocchi occupati: {self.used_blocks}",
            f"Utilizzo: {self.usage:.2f}%",
        ]
        chunks = []
        for start in range(0, self.num_blocks, 50):
            stop = min(start + 50, self.num_blocks)
            chunks.append(
                "".join("." if self.is_free(i) else "X" for i in range(start, stop))
            )
        lines.append("Mappa dei blocchi: " + "\n                ".join(chunks))
        return "\n".join(lines)


def _write_text(view: memoryview, text: str) -> None:
    data = text.encode()[: len(view) - 1] + b"\0"
    view[: len(data)] = data


def _read_text(view: memoryview) -> str:
    return bytes(view).split(b"\0", 1)[0].decode()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pool demonstration and return the exit status."""
    out = sys.stdout
    pool = MemoryPool(32, 100)
    print("Memory pool creato con successo!\n", file=out)
    print(pool.report(), file=out)

    print("\nAllocazione di 10 blocchi...", file=out)
    blocks = []
    for i in range(10):
        index = pool.alloc()
        _write_text(pool.block(index), f"Blocco {i}")
        blocks.append(index)
    print(pool.report(), file=out)

    print("\nContenuto dei blocchi allocati:", file=out)
    for i, index in enumerate(blocks):
        print(f"Blocco {i}: {_read_text(pool.block(index))}", file=out)

    print("\nLiberazione dei blocchi pari...", file=out)
    for i in range(0, 10, 2):
        try:
            pool.free(blocks[i])
        except PoolError:
            print(f"Errore: impossibile liberare il blocco {i}", file=out)
        else:
            print(f"Blocco {i} liberato con successo", file=out)
    print(pool.report(), file=out)

    print("\nRiallocazione di 5 nuovi blocchi...", file=out)
    new_blocks = []
    for i in range(5):
        try:
            index = pool.alloc()
        except PoolError:
            print(f"Errore: impossibile allocare il nuovo blocco {i}", file=out)
            continue
        _write_text(pool.block(index), f"Nuovo blocco {i}")
        new_blocks.append(index)
        print(f"Nuovo blocco {i} allocato con successo", file=out)
    print(pool.report(), file=out)

    print("\nLiberazione di tutti i blocchi rimanenti...", file=out)
    for index in blocks[1::2] + new_blocks:
        pool.free(index)
    print(pool.report(), file=out)

    print("\nDistruzione del memory pool...", file=out)
    del pool
    print("Memory pool distrutto con successo!", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())