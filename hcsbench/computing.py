"""Computing systems and the on-disk repository that lists them."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from hcsbench.filesystem import combine_path, create_dir, create_file, dir_exists, file_exists

_HEADER = "ComputingSystemRepository"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _stoi(text: str) -> int:
    """Parse the leading integer of ``text``; raise ValueError if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer {value} is out of range")
    return value


def ask_int(
    message: str,
    read: Callable[[], str] | None = None,
    out: TextIO | None = None,
    error_message: str = "Error! Enter integer number",
) -> int:
    """Prompt with ``message`` until ``read`` yields text that starts with an integer."""
    read = input if read is None else read
    stream = sys.stdout if out is None else out
    while True:
        stream.write(message)
        stream.flush()
        try:
            return _stoi(read())
        except ValueError:
            stream.write(error_message + "\n")


@dataclass
class ComputingSystem:
    """A computing system known by its integer identifier."""

    id: int = 0
    name: str = ""
    description: str = ""
    file_name: str = "ComputingSystem.txt"

    def serialize(self, dir_name: str) -> bool:
        """Create the ``dir_name/<id>`` directory; False if it cannot be created."""
        path_dir = combine_path(dir_name, str(self.id))
        if not create_dir(path_dir):
            sys.stderr.write(f"Cannot create dir {path_dir}\n")
            return False
        return True


@dataclass
class ComputingSystemRepository:
    """Directory holding a list file of computing-system identifiers."""

    dir_name: str = "ComputingSystemRepository"
    file_name: str = "List.txt"
    ids: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not dir_exists(self.dir_name):
            create_dir(self.dir_name)
        if not file_exists(self.dir_name, self.file_name):
            create_file(self.dir_name, self.file_name, _HEADER)
        self._read_file()

    @property
    def _path(self) -> str:
        return combine_path(self.dir_name, self.file_name)

    def _read_file(self) -> bool:
        try:
            with open(self._path, encoding="utf-8") as fin:
                tokens = fin.read().split()
        except OSError:
            sys.stderr.write(f'File "{self._path}" is not opened!\n')
            return False
        if not tokens or tokens[0] != _HEADER:
            sys.stderr.write(f'File "{self._path}" format is not AppConfig!\n')
            return False
        for token in tokens[1:]:
            try:
                self.ids.append(int(token))
            except ValueError:
                break
        return True

    def _append_id(self, new_id: int) -> None:
        with open(self._path, "a", encoding="utf-8") as fout:
            fout.write(f"\n{new_id}")

    def exists(self, system_id: int) -> bool:
        """Whether a system with this identifier is registered."""
        return system_id in self.ids

    def try_add(self, system: ComputingSystem) -> bool:
        """Register ``system``; False if its identifier is already present."""
        new_id = system.id
        if self.exists(new_id):
            return False
        system.serialize(self.dir_name)
        self._append_id(new_id)
        self.ids.append(new_id)
        return True

    def describe_config(self) -> str:
        return f"dir_name: {self.dir_name}; file_name: {self.file_name}"

    def describe_list(self) -> str:
        return "Computing system ids: [" + "".join(f"{i} " for i in self.ids) + "]"

    def add_interactive(
        self, ask: Callable[[], str] | None = None, out: TextIO | None = None
    ) -> None:
        """Ask for an identifier and register a new computing system."""
        stream = sys.stdout if out is None else out
        stream.write("Add()\n")
        system_id = ask_int("Enter computing system id: ", ask, stream)
        if self.try_add(ComputingSystem(id=system_id)):
            stream.write(f"Computing system {system_id} added.\n")
        else:
            stream.write(f"Error in adding computing system {system_id}!\n")

    def check_exists_interactive(
        self, ask: Callable[[], str] | None = None, out: TextIO | None = None
    ) -> None:
        """Ask for an identifier and report whether it is registered."""
        stream = sys.stdout if out is None else out
        system_id = ask_int(
            "Enter computing system id: ", ask, stream, "Error! Enter integer number!"
        )
        flag = 1 if self.exists(system_id) else 0
        stream.write(f"id: {system_id}; isExists: {flag}\n")