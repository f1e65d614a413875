"""Console simulators and data-structure exercises: traffic light, memory pool, linked list, phonebook and arrays."""

__version__ = "1.0.0"

__all__ = [
    "arrays",
    "linked_list",
    "memory_pool",
    "phonebook",
    "traffic_console",
    "traffic_light",
]