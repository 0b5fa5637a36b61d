# dlclist

`dlclist` is a small console program for working with doubly linked circular lists of integers. It keeps a set of lists. Each list has a numeric id. You select a list, then you can:

- add elements before or after its current position,
- delete the current element,
- move the current position around the circle,
- print the list.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Running

```
dlclist
```

You can also start it with `python -m dlclist.menu`. The program reads choices from standard input and writes to standard output. When input ends, it writes `Input error` to standard error and exits with status 1.

The main menu offers these options:

1. Create new list. Ids start at 0 and go up by one.
2. Show all lists.
3. Delete list.
4. Select list by id.
5. Copy list. The copy gets the next free id.
6. Exit.

At most 20 lists can exist at the same time.

After you select a list, its own menu offers these options:

1. Add element after current
2. Add element before current
3. Show list
4. Delete current element
5. Move current forward
6. Move current backward
7. Return

A choice that is not a number, or that is not on the menu, does nothing and the menu is shown again. Element values must lie between -2147483648 and 2147483647. If a value is out of range or is not a number, you are asked for it again. List ids must be unsigned numbers and are checked the same way.

## Use as a library

```python
from dlclist.circular import CircularList
from dlclist.registry import ListRegistry

lst = CircularList(0)
lst.insert_after(1)
lst.insert_after(2)      # the circle is now 1 -> 2, and current is 1
lst.move_forward()       # current is 2
print(lst.current)       # 2
print(lst.values(True))  # [2, 1]
print(lst.format(True))

registry = ListRegistry(20)
registry.add(0, lst)
registry.copy(0, 1)      # independent copy stored under id 1
print(registry.format_all())
```

`CircularList` supports `len()`. Iterating over it goes forward from the current element. `copy()` keeps the order and the current element. `delete_current()` returns the removed value and makes the next element current.

`ListRegistry(capacity)` stores lists in numbered slots. It provides `add`, `find`, `delete`, `copy`, `format_all` and `clear`, and supports iteration and `len()`.

These operations raise exceptions when they fail:

- `CircularList` raises `EmptyListError` when an operation needs at least one element.
- `ListRegistry` raises `DuplicateListIdError`, `RegistryFullError` and `ListNotFoundError`.

The menus in `dlclist.menu` accept any text streams: `main_menu(input_stream, output)` and `list_menu(lst, input_stream, output)`. The prompts `read_int` and `read_unsigned` work the same way. This lets you drive the menus from a file or from a string.

## What it does not do

The lists exist only in memory while the program runs. Nothing is saved to disk, so every list is gone after exit.