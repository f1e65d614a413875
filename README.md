# simulab

A collection of small console simulators and classic data-structure exercises,
meant for learning how state machines, allocators and dynamic collections behave.
Messages shown on the console are in Italian.

## Installation

```
pip install .
```

Python 3.10 or later is required; there are no runtime dependencies.

## Commands

| Command                 | What it does |
|-------------------------|--------------|
| `simulab-traffic-light` | Interactive traffic light: automatic and manual modes, emergencies, maintenance, configuration, cyclic test and statistics |
| `simulab-memory-pool`   | Demonstrates a pool of 100 blocks of 32 bytes: allocation, release and the usage map |
| `simulab-linked-list`   | Menu-driven singly linked list (insert at head or tail, print); `--demo` runs a scripted sequence of insertions, searches and removals |
| `simulab-phonebook`     | Phonebook with add, search, update, delete and listing |
| `simulab-arrays`        | Array and matrix exercises, chosen by sub-command |

`simulab-arrays` sub-commands (any missing number is asked for on the console):

```
simulab-arrays array [SIZE]                 # multiples of ten
simulab-arrays matrix [ROWS] [COLUMNS]      # matrix of row-major positions
simulab-arrays stats [VALUES ...]           # sum and mean
simulab-arrays random [ROWS] [COLUMNS] [--seed N]   # random 1-100 matrix with row and column sums
```

The traffic light console clears the screen between menus by running the
system's `clear` (or `cls` on Windows) command.

## Library use

The pieces can also be driven from code.

```python
from simulab.traffic_light import TrafficLight, LightState, next_cyclic_state

light = TrafficLight()
previous = light.change_state(LightState.GREEN)   # returns LightState.RED
print(light.render_graphic())
print(next_cyclic_state(LightState.GREEN))        # LightState.YELLOW
```

`TrafficLight.change_state` raises `RuntimeError` while an emergency is active,
and `deactivate_emergency` raises `RuntimeError` when there is none.

```python
from simulab.memory_pool import MemoryPool, PoolError

pool = MemoryPool(32, 100)
index = pool.alloc()
pool.block(index)[:5] = b"hello"
pool.free(index)
print(pool.report())
```

`alloc` raises `PoolError` when the pool is full; `free` raises it for a block
outside the pool or one that is already free.

```python
from simulab.linked_list import LinkedList

items = LinkedList()
items.push_back(10)
items.push_front(5)
print(items.render())    # Lista: 5 -> 10 -> NULL
print(10 in items, len(items))
items.remove(10)         # True if a value was removed
```

```python
from simulab.phonebook import Phonebook

book = Phonebook()
book.add("Mario", "int. 12")
print(book.find("Mario"))       # Contact(name='Mario', phone='int. 12')
book.update("Mario", "int. 14")
book.delete("Mario")            # KeyError for an unknown name
```

```python
from simulab.arrays import index_matrix, row_sums, column_sums, format_matrix

matrix = index_matrix(2, 3)
print(format_matrix(matrix))
print(row_sums(matrix), column_sums(matrix))   # [3, 12] [3, 5, 7]
```

## What is not included

There is no elevator simulator in this package; the only simulated device is
the traffic light. Nothing is saved to disk: phonebook entries, lists and
traffic-light statistics last only for the running session.

## Running the tests

```
pip install .[test]
pytest
```