"""Command line driver that runs a sequence of operations on one data structure.

Usage::

    dsakit stack [--capacity N] [OPERATION ...]
    dsakit queue [--capacity N] [OPERATION ...]
    dsakit singly [--values 1,2,3] [OPERATION ...]
    dsakit circular [--values 1,2,3] [OPERATION ...]
    dsakit doubly [--values 1,2,3] [OPERATION ...]

Each operation is a name followed by its integer arguments, for example
``push 90`` or ``insert-at 2 7``. A failed operation is reported on standard
error and the remaining operations still run; the exit status is 1 if any
operation failed.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from dsakit.array_queue import BoundedQueue
from dsakit.circular import CircularLinkedList
from dsakit.doubly import DoublyLinkedList
from dsakit.errors import StructureError
from dsakit.singly import SinglyLinkedList
from dsakit.stack import BoundedStack


@dataclass(frozen=True)
class _Command:
    arity: int
    run: Callable[..., str]


@dataclass(frozen=True)
class _Structure:
    build: Callable[[argparse.Namespace], Any]
    commands: dict[str, _Command]
    demo: tuple[str, ...] = field(default=("show",))


def _deleted(value: Any) -> str:
    return f"{value} DELETED"


def _push(stack: BoundedStack, value: int) -> str:
    stack.push(value)
    return f"{value} INSERTED"


def _show_stack(stack: BoundedStack) -> str:
    if stack.is_empty():
        return "STACK IS EMPTY"
    return "FINAL LIST IS: " + " ".join(str(value) for value in stack)


def _enqueue(queue: BoundedQueue, value: int) -> str:
    queue.enqueue(value)
    return f"{value} ENQUEUED"


def _show_queue(queue: BoundedQueue) -> str:
    return "ELEMENTS CURRENTLY ARE " + "".join(f">{value}" for value in queue)


def _inserted(method: str) -> Callable[..., str]:
    def run(structure: Any, *args: int) -> str:
        getattr(structure, method)(*args)
        return f"{args[-1]} INSERTED"

    return run


def _deleter(method: str) -> Callable[..., str]:
    def run(structure: Any, *args: int) -> str:
        return _deleted(getattr(structure, method)(*args))

    return run


def _search(structure: SinglyLinkedList, value: int) -> str:
    return "DATA FOUND" if structure.search(value) else "DATA NOT FOUND"


def _show_list(structure: Any) -> str:
    return str(structure)


_STACK_COMMANDS = {
    "push": _Command(1, _push),
    "pop": _Command(0, lambda stack: _deleted(stack.pop())),
    "peek": _Command(0, lambda stack: f"TOP IS {stack.peek()}"),
    "show": _Command(0, _show_stack),
}

_QUEUE_COMMANDS = {
    "enqueue": _Command(1, _enqueue),
    "dequeue": _Command(0, lambda queue: _deleted(queue.dequeue())),
    "show": _Command(0, _show_queue),
}

_CIRCULAR_COMMANDS = {
    "insert-first": _Command(1, _inserted("insert_first")),
    "insert-last": _Command(1, _inserted("insert_last")),
    "insert-at": _Command(2, _inserted("insert_at")),
    "delete-first": _Command(0, _deleter("delete_first")),
    "delete-last": _Command(0, _deleter("delete_last")),
    "delete-at": _Command(1, _deleter("delete_at")),
    "show": _Command(0, _show_list),
}

_SINGLY_COMMANDS = {**_CIRCULAR_COMMANDS, "search": _Command(1, _search)}

_DOUBLY_COMMANDS = {
    "append": _Command(1, _inserted("append")),
    "delete-first": _Command(0, _deleter("delete_first")),
    "delete-last": _Command(0, _deleter("delete_last")),
    "delete-at": _Command(1, _deleter("delete_at")),
    "show": _Command(0, _show_list),
}

_STRUCTURES = {
    "stack": _Structure(
        build=lambda ns: BoundedStack(ns.capacity),
        commands=_STACK_COMMANDS,
        demo=("push", "90", "show", "push", "97", "show", "pop", "show"),
    ),
    "queue": _Structure(
        build=lambda ns: BoundedQueue(ns.capacity),
        commands=_QUEUE_COMMANDS,
        demo=(
            "enqueue", "1", "enqueue", "2", "enqueue", "3", "show",
            "dequeue", "enqueue", "5", "show",
        ),
    ),
    "singly": _Structure(
        build=lambda ns: SinglyLinkedList(ns.values),
        commands=_SINGLY_COMMANDS,
    ),
    "circular": _Structure(
        build=lambda ns: CircularLinkedList(ns.values),
        commands=_CIRCULAR_COMMANDS,
    ),
    "doubly": _Structure(
        build=lambda ns: DoublyLinkedList(ns.values),
        commands=_DOUBLY_COMMANDS,
    ),
}


def _positive_int(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("capacity must be at least 1")
    return number


def _int_list(text: str) -> list[int]:
    parts = [part.strip() for part in text.split(",") if part.strip()]
    try:
        return [int(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a list of integers: {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit",
        description="Run a sequence of operations on a data structure.",
    )
    sub = parser.add_subparsers(dest="structure", required=True)
    for name, default in (("stack", 10), ("queue", 3)):
        p = sub.add_parser(name, help=f"a bounded {name}")
        p.add_argument("--capacity", type=_positive_int, default=default)
        p.add_argument("ops", nargs="*", help="operations and their arguments")
    for name in ("singly", "circular", "doubly"):
        p = sub.add_parser(name, help=f"a {name} linked list")
        p.add_argument(
            "--values", type=_int_list, default=[],
            help="comma separated initial values",
        )
        p.add_argument("ops", nargs="*", help="operations and their arguments")
    return parser


def _parse_ops(
    tokens: Iterable[str],
    commands: dict[str, _Command],
    parser: argparse.ArgumentParser,
) -> list[tuple[_Command, list[int]]]:
    parsed = []
    stream = iter(tokens)
    for token in stream:
        command = commands.get(token)
        if command is None:
            parser.error(
                f"unknown operation {token!r}; choose from {', '.join(commands)}"
            )
        args = [arg for _, arg in zip(range(command.arity), stream)]
        if len(args) < command.arity:
            parser.error(f"operation {token!r} needs {command.arity} argument(s)")
        try:
            parsed.append((command, [int(arg) for arg in args]))
        except ValueError:
            parser.error(f"operation {token!r} takes integer arguments, got {args}")
    return parsed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    parser = _build_parser()
    ns = parser.parse_args(argv)
    spec = _STRUCTURES[ns.structure]
    operations = _parse_ops(ns.ops or spec.demo, spec.commands, parser)
    structure = spec.build(ns)
    failed = False
    for command, args in operations:
        try:
            print(command.run(structure, *args))
        except StructureError as exc:
            print(f"error: {exc}", file=sys.stderr)
            failed = True
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())