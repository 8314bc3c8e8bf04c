from .shared import printf
from .table import HashTable, Occupied, ProbeEvent, ResizeEvent, TableEvent


def dump_table(table: HashTable):
    printf("-----------\n")
    printf("[Size] {0:d}\n", table.size())

    for index, entry in enumerate(table.slots):
        if isinstance(entry, Occupied):
            printf("[{0:d}] {1!s}:{2!s}\n", index, entry.key, entry.value)
        else:
            printf("[{0:d}] null\n", index)

    printf("===========\n")


def print_event(event: TableEvent):
    match event:
        case ProbeEvent(key, home_index, index):
            printf(
                '[collision] key="{0!s}" original_index={1:d} trying_index={2:d}\n',
                key,
                home_index,
                index,
            )
        case ResizeEvent(old_capacity, new_capacity):
            printf(
                "[resize] Growing from {0:d} to {1:d} slots\n",
                old_capacity,
                new_capacity,
            )
        case _:
            raise Exception("Unknown table event", event)
