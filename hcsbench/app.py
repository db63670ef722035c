"""The application: configuration, repositories and the main menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from hcsbench.algresults import AlgTestingResultRepository
from hcsbench.computing import ComputingSystemRepository
from hcsbench.config import AppConfig, ConfigError
from hcsbench.menu import MainMenu


class Application:
    """Loads the configuration and the repositories, then runs the main menu."""

    def __init__(
        self,
        config_file: str = "config.txt",
        read: Callable[[], str] | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.config_file = config_file
        self._out = sys.stdout if out is None else out
        self.menu = MainMenu(read, self._out, err)
        self.config: AppConfig | None = None
        self.systems: ComputingSystemRepository | None = None
        self.results: AlgTestingResultRepository | None = None

    def start(self) -> None:
        """Run the application; raises ConfigError if the configuration is bad."""
        self.config = AppConfig.load(self.config_file)
        self._out.write("Application initialization: OK\n")
        self.systems = ComputingSystemRepository(
            self.config.dir_computing_system_repository
        )
        self._out.write("Computing system repository initialization: OK\n")
        self.results = AlgTestingResultRepository()
        self.menu.start(self.config, self.systems, self.results)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Summation benchmark console.")
    parser.add_argument("--config", default="config.txt", help="configuration file")
    args = parser.parse_args(argv)
    print("Starting application...")
    try:
        Application(args.config).start()
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())