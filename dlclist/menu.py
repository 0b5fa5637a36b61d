"""Interactive text menus for managing a set of circular lists."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from dlclist.circular import CircularList
from dlclist.registry import (
    DuplicateListIdError,
    ListNotFoundError,
    ListRegistry,
    RegistryFullError,
)

MAX_LISTS = 20
ULONG_MAX = 2**64 - 1
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

MAIN_MENU_ITEMS = (
    "1. Create new list",
    "2. Show all lists",
    "3. Delete list",
    "4. Select list by id",
    "5. Copy list",
    "6. Exit",
)

LIST_MENU_ITEMS = (
    "1. Add element after current",
    "2. Add element before current",
    "3. Show list",
    "4. Delete current element",
    "5. Move current forward",
    "6. Move current backward",
    "7. Return",
)

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def _streams(input_stream: TextIO | None, output: TextIO | None) -> tuple[TextIO, TextIO]:
    return (input_stream or sys.stdin, output or sys.stdout)


def _read_line(input_stream: TextIO) -> str:
    line = input_stream.readline()
    if not line:
        raise EOFError("Input error")
    return line.split("\n", 1)[0]


def _parse(text: str) -> tuple[bool, int] | None:
    """Split a decimal integer into (negative, magnitude), or None if malformed."""
    match = _INTEGER.fullmatch(text)
    if match is None:
        return None
    return match.group(1) == "-", int(match.group(2))


def read_unsigned(prompt: str, input_stream: TextIO | None = None, output: TextIO | None = None) -> int:
    """Prompt until a valid unsigned long is entered and return it."""
    input_stream, output = _streams(input_stream, output)
    while True:
        output.write(prompt)
        parsed = _parse(_read_line(input_stream))
        if parsed is None:
            output.write("Invalid number. Try again.\n")
            continue
        negative, magnitude = parsed
        if magnitude > ULONG_MAX:
            output.write(f"Maximum: {ULONG_MAX}\n")
            continue
        return (-magnitude) % (ULONG_MAX + 1) if negative else magnitude


def read_int(prompt: str, input_stream: TextIO | None = None, output: TextIO | None = None) -> int:
    """Prompt until a valid int is entered and return it."""
    input_stream, output = _streams(input_stream, output)
    while True:
        output.write(prompt)
        parsed = _parse(_read_line(input_stream))
        if parsed is None:
            output.write("Invalid number. Try again.\n")
            continue
        negative, magnitude = parsed
        value = -magnitude if negative else magnitude
        if not INT_MIN <= value <= INT_MAX:
            output.write(f"Range: {INT_MIN} to {INT_MAX}\n")
            continue
        return value


def _read_choice(input_stream: TextIO) -> int:
    """Read a menu choice; anything that is not a number selects nothing."""
    try:
        return int(_read_line(input_stream).strip())
    except ValueError:
        return 0


def _render(output: TextIO, title: str, items: tuple[str, ...]) -> None:
    output.write(f"\n\n=== {title} ===\n\n")
    output.writelines(f"  {item}\n" for item in items)
    output.write("\nEnter option number:\n")


def list_menu(lst: CircularList, input_stream: TextIO | None = None, output: TextIO | None = None) -> None:
    """Run the menu for one list until the user chooses to return."""
    input_stream, output = _streams(input_stream, output)
    while True:
        _render(output, f"List menu (id list: {lst.id})", LIST_MENU_ITEMS)
        choice = _read_choice(input_stream)
        if choice in (1, 2):
            value = read_int("Enter the value of the element: ", input_stream, output)
            if choice == 1:
                lst.insert_after(value)
            else:
                lst.insert_before(value)
            output.write("Element is inserted!\n")
        elif choice == 3:
            output.write(lst.format(True))
        elif choice == 4:
            if not lst:
                output.write("List is empty.\n")
            else:
                lst.delete_current()
                output.write("Current is deleted!\n")
        elif choice in (5, 6):
            if not lst:
                output.write("List is empty.\n")
            else:
                if choice == 5:
                    lst.move_forward()
                else:
                    lst.move_backward()
                output.write("Current is moved!\n")
        elif choice == 7:
            return


def main_menu(input_stream: TextIO | None = None, output: TextIO | None = None) -> None:
    """Run the main menu until the user chooses to exit."""
    input_stream, output = _streams(input_stream, output)
    registry = ListRegistry(MAX_LISTS)
    next_id = 0
    while True:
        _render(output, "Main menu", MAIN_MENU_ITEMS)
        choice = _read_choice(input_stream)
        if choice == 1:
            list_id, next_id = next_id, next_id + 1
            try:
                registry.add(list_id)
            except DuplicateListIdError:
                output.write("Such id already exists.\n")
            except RegistryFullError:
                output.write("List of lists is full!\n")
            else:
                output.write("New list was added!\n")
        elif choice == 2:
            output.write(registry.format_all())
        elif choice == 3:
            list_id = read_unsigned("Enter the list id for deleting: ", input_stream, output)
            try:
                registry.delete(list_id)
            except ListNotFoundError:
                output.write("Deleting id does not exist.\n")
            else:
                output.write("List was deleted")
        elif choice == 4:
            list_id = read_unsigned("Enter the list id for selection: ", input_stream, output)
            try:
                selected = registry.find(list_id)
            except ListNotFoundError:
                output.write(f"There isnt list with such id: {list_id}\n")
            else:
                list_menu(selected, input_stream, output)
        elif choice == 5:
            list_id = read_unsigned("Enter the list id for copying: ", input_stream, output)
            new_id, next_id = next_id, next_id + 1
            try:
                registry.copy(list_id, new_id)
            except (ListNotFoundError, RegistryFullError, DuplicateListIdError):
                output.write(f"List with id: {list_id} does not exist")
            else:
                output.write(f"List was copied. Copy list id is: {new_id}")
        elif choice == 6:
            registry.clear()
            return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive program; return the exit status."""
    parser = argparse.ArgumentParser(description="Manage doubly linked circular lists interactively.")
    parser.parse_args(argv)
    try:
        main_menu(sys.stdin, sys.stdout)
    except EOFError:
        sys.stderr.write("Input error\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())