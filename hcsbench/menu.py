"""Interactive text menus of the application."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TextIO

from hcsbench.algresults import AlgTestingResultRepository
from hcsbench.computing import ComputingSystemRepository
from hcsbench.config import AppConfig
from hcsbench.devices import (
    LibSupport,
    cuda_device_count,
    get_device_properties,
    print_device_properties,
    write_gpu_specs,
)
from hcsbench.selftest import check_array_helper, check_sum, check_vector_gpu

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_SEPARATOR = "-------------------------------------"
_NOT_RECOGNIZED = "Command not recognized!"
_BACK = "Back to main menu"


class MenuCommand(Enum):
    """Commands of the main menu."""

    NONE = auto()
    EXIT = auto()
    HELP = auto()
    PRINT_LIB_SUPPORT = auto()
    PRINT_GPU_PARAMETERS = auto()
    WRITE_GPU_SPECS_TO_TXT_FILE = auto()
    TESTING_TEST_ARRAY_HELPER = auto()
    TESTING_TEST_VECTOR_GPU = auto()
    TESTING_TEST_SUM = auto()
    APPLICATION_CONFIG = auto()
    COMPUTING_SYSTEM_REPOSITORY_CONFIG = auto()
    ALG_TESTING_RESULT_REPOSITORY_CONFIG = auto()


@dataclass
class MenuCommandItem:
    """A menu entry: its command, the keys that choose it and what it runs."""

    comm: MenuCommand = MenuCommand.NONE
    keys: tuple[str, ...] = field(default_factory=tuple)
    func: Callable[[], None] | None = None
    desc: str = ""

    def matches(self, key: str) -> bool:
        return key in self.keys


def _command_number(text: str) -> int:
    """Leading integer of ``text``, or 0 if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    value = int(match.group(1))
    return value if -(2**31) <= value <= 2**31 - 1 else 0


def _run_submenu(
    header: str,
    actions: dict[int, Callable[[], None]],
    read: Callable[[], str],
    out: TextIO,
) -> None:
    out.write(header)
    command = 0
    while command != 1:
        out.write(">> ")
        out.flush()
        command = _command_number(read())
        if command == 1:
            out.write(_BACK + "\n")
        elif command in actions:
            actions[command]()
        else:
            out.write(_NOT_RECOGNIZED + "\n")


def run_config_menu(
    config: AppConfig, read: Callable[[], str] | None = None, out: TextIO | None = None
) -> None:
    """Application configuration submenu."""
    read = input if read is None else read
    stream = sys.stdout if out is None else out
    header = "----- Application configuration -----\n1 Back to main menu\n2 Print config\n"
    actions = {2: lambda: stream.write(config.describe() + "\n")}
    _run_submenu(header, actions, read, stream)


def run_systems_menu(
    repo: ComputingSystemRepository,
    read: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> None:
    """Computing system repository submenu."""
    read = input if read is None else read
    stream = sys.stdout if out is None else out
    header = (
        "----- Computing system repository configuration -----\n"
        "1 Back to main menu\n"
        "2 Print config\n"
        "3 Print computing system list\n"
        "4 Print computing system details\n"
        "5 Add computing system\n"
        "6 Change computing system\n"
        "7 Remove computing system\n"
        "8 Is computing system exists\n"
    )

    def announce(title: str, action: Callable[[], None]) -> Callable[[], None]:
        def run() -> None:
            stream.write(f"Command: {title}\n")
            action()

        return run

    actions = {
        2: announce("2 Print config", lambda: stream.write(repo.describe_config() + "\n")),
        3: announce(
            "3 Print computing system list",
            lambda: stream.write(repo.describe_list() + "\n"),
        ),
        4: announce(
            "4 Print computing system details", lambda: stream.write("PrintDetails()\n")
        ),
        5: announce("5 Add computing system", lambda: repo.add_interactive(read, stream)),
        6: announce("6 Change computing system", lambda: stream.write("Change()\n")),
        7: announce("7 Remove computing system", lambda: stream.write("Remove()\n")),
        8: announce(
            "8 Is computing system exists",
            lambda: repo.check_exists_interactive(read, stream),
        ),
    }
    _run_submenu(header, actions, read, stream)


def run_results_menu(
    repo: AlgTestingResultRepository,
    read: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> None:
    """Algorithm test-result repository submenu."""
    read = input if read is None else read
    stream = sys.stdout if out is None else out
    header = (
        "----- AlgTestingResultRepository configuration -----\n"
        "1 Back to main menu\n"
        "2 Print config\n"
        "3 Print AlgTestingResultRepository list\n"
        "4 Print AlgTestingResultRepository details\n"
        "5 Add test alg result data\n"
        "6 Change AlgTestingResultRepository\n"
        "7 Remove AlgTestingResultRepository\n"
        "8 Is AlgTestingResultRepository exists\n"
    )

    def say(text: str) -> Callable[[], None]:
        return lambda: stream.write(f"Command: {text}\n")

    def add() -> None:
        stream.write("Command: 5 Add test alg result data\n")
        repo.write_sample()

    actions = {
        2: say("2 Print config"),
        3: say("3 Print computing system list"),
        4: say("4 Print computing system details"),
        5: add,
        6: say("6 Change computing system"),
        7: say("7 Remove computing system"),
        8: say("8 Is computing system exists"),
    }
    _run_submenu(header, actions, read, stream)


class _TokenReader:
    """Yields whitespace-separated tokens from a line source."""

    def __init__(self, read_line: Callable[[], str]) -> None:
        self._read_line = read_line
        self._pending: deque[str] = deque()

    def __call__(self) -> str:
        while not self._pending:
            self._pending.extend(self._read_line().split())
        return self._pending.popleft()


class MainMenu:
    """The main menu: reads commands and runs them until told to exit."""

    def __init__(
        self,
        read: Callable[[], str] | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._read = _TokenReader(input if read is None else read)
        self._out = sys.stdout if out is None else out
        self._err = sys.stderr if err is None else err
        self.commands: list[MenuCommandItem] = [
            MenuCommandItem(MenuCommand.HELP, ("1", "?", "h", "help"), None, "Print help"),
            MenuCommandItem(MenuCommand.EXIT, ("2", "q", "exit"), None, "Exit from menu"),
            MenuCommandItem(
                MenuCommand.PRINT_LIB_SUPPORT,
                ("3", "libs"),
                self._print_lib_support,
                "Print supported libs (OpenMP, Cuda etc.)",
            ),
            MenuCommandItem(
                MenuCommand.PRINT_GPU_PARAMETERS,
                ("4", "gpu"),
                lambda: print_device_properties(0, self._out),
                "Print default (0) Cuda-device properties",
            ),
            MenuCommandItem(
                MenuCommand.WRITE_GPU_SPECS_TO_TXT_FILE,
                ("5", "gpu"),
                self._write_gpu_specs,
                "Write GPU specification to txt file gpu-specs.txt",
            ),
            MenuCommandItem(
                MenuCommand.TESTING_TEST_ARRAY_HELPER,
                ("6", "test-arr-help"),
                lambda: self._verdict(
                    check_array_helper(self._out, self._err), "TestArrayHelper"
                ),
                "Testing TestArrayHelper class",
            ),
            MenuCommandItem(
                MenuCommand.TESTING_TEST_VECTOR_GPU,
                ("7", "test-vec-gpu"),
                lambda: self._verdict(check_vector_gpu(self._out, self._err), "VectorGpu"),
                "Testing VectorGpu class",
            ),
            MenuCommandItem(
                MenuCommand.TESTING_TEST_SUM,
                ("8", "test-sum"),
                lambda: self._verdict(check_sum(self._out, self._err), "TestSum"),
                "Testing sum functions",
            ),
            MenuCommandItem(
                MenuCommand.APPLICATION_CONFIG,
                ("9", "app-conf"),
                None,
                "Application configuration",
            ),
            MenuCommandItem(
                MenuCommand.COMPUTING_SYSTEM_REPOSITORY_CONFIG,
                ("10", "cs-repo-conf"),
                None,
                "Computing system repository configuration",
            ),
            MenuCommandItem(
                MenuCommand.ALG_TESTING_RESULT_REPOSITORY_CONFIG,
                ("11", "algtr-repo-conf"),
                None,
                "AlgTestingResultRepository configuration",
            ),
        ]

    def _print_lib_support(self) -> None:
        self._out.write(LibSupport.detect().describe() + "\n")

    def _write_gpu_specs(self) -> None:
        count = cuda_device_count()
        self._out.write(f"Cuda devices number: {count}\n")
        if count <= 0:
            return
        for _ in range(count):
            self._out.write("\nCUDA Device #0\n")
            self._out.write(get_device_properties(0).describe() + "\n")
        with open("gpu-specs.txt", "w", encoding="utf-8") as fout:
            write_gpu_specs(fout)

    def _verdict(self, ok: bool, name: str) -> None:
        self._out.write(f"{name} correct!\n" if ok else f"{name} not correct!\n")

    def recognize(self, text: str) -> MenuCommandItem | None:
        """The first menu entry that has ``text`` among its keys."""
        return next((item for item in self.commands if item.matches(text)), None)

    def describe_help(self) -> str:
        lines = ["----- Command list -----"]
        for item in self.commands:
            keys = "".join(f"{key} " for key in item.keys)
            lines.append(f"{keys}\t{item.desc}")
        return "\n".join(lines)

    def _run(self, item: MenuCommandItem) -> None:
        if item.func is None:
            return
        self._out.write(f"----- Starting: {item.desc}-----------\n")
        item.func()
        self._out.write(_SEPARATOR + "\n")

    def start(
        self,
        config: AppConfig,
        systems: ComputingSystemRepository,
        results: AlgTestingResultRepository,
    ) -> None:
        """Read and run commands until the exit command or end of input."""
        out = self._out
        out.write("--- Main Menu ('1', '?', 'h' or 'help' for print help)---\n")
        while True:
            out.write("> ")
            out.flush()
            try:
                text = self._read()
                item = self.recognize(text)
                if item is None:
                    out.write(
                        "Error! Command not recognized! Please enter command again. "
                        "'?' or 'help' for print help.\n"
                    )
                    continue
                if item.comm is MenuCommand.EXIT:
                    break
                if item.comm is MenuCommand.HELP:
                    out.write(self.describe_help() + "\n")
                elif item.comm is MenuCommand.APPLICATION_CONFIG:
                    run_config_menu(config, self._read, out)
                elif item.comm is MenuCommand.COMPUTING_SYSTEM_REPOSITORY_CONFIG:
                    run_systems_menu(systems, self._read, out)
                elif item.comm is MenuCommand.ALG_TESTING_RESULT_REPOSITORY_CONFIG:
                    run_results_menu(results, self._read, out)
                    self._run(item)
                else:
                    self._run(item)
            except EOFError:
                out.write("\n")
                break
        out.write("--- Good bye! ---\n")