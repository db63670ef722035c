"""Application configuration read from a text file."""

from __future__ import annotations

import re
from dataclasses import dataclass

from hcsbench.filesystem import create_dir, dir_exists, file_exists

_HEADER = "AppConfig"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class ConfigError(Exception):
    """The configuration file is missing or malformed."""


def _stoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not -(2**31) <= value <= 2**31 - 1:
        raise ValueError(f"integer {value} is out of range")
    return value


@dataclass
class AppConfig:
    """Settings of the application."""

    file_config: str = "config.txt"
    comp_system_id: int = 1
    dir_calc_test_results: str = "CalcTestResults"
    dir_computing_system_repository: str = "ComputingSystemRepository"

    @classmethod
    def load(cls, file_name: str = "config.txt") -> "AppConfig":
        """Read ``file_name`` and create the configured directories."""
        if not file_exists(file_name):
            raise ConfigError(f'Error! Config file "{file_name}" not found!')
        try:
            with open(file_name, encoding="utf-8") as fin:
                tokens = fin.read().split()
        except OSError as exc:
            raise ConfigError(f'Config file "{file_name}" is not opened!') from exc
        if not tokens or tokens[0] != _HEADER:
            raise ConfigError(f'Config file "{file_name}" format is not AppConfig!')

        config = cls(file_config=file_name)
        pairs = tokens[1:]
        for param, value in zip(pairs[0::2], pairs[1::2]):
            if param == "compSystemId":
                try:
                    config.comp_system_id = _stoi(value)
                except ValueError as exc:
                    raise ConfigError(
                        f'Config file "{file_name}": compSystemId parameter is not recognized!'
                    ) from exc
            elif param == "dir_calcTestResults":
                config.dir_calc_test_results = value
            elif param == "dir_computingSystemRepository":
                config.dir_computing_system_repository = value
            else:
                raise ConfigError(
                    f'Config file "{file_name}": parameter "{param}" with value '
                    f'"{value}" is not recognized!'
                )
        config.ensure_directories()
        return config

    def ensure_directories(self) -> None:
        """Create the result and repository directories if missing."""
        for path in (self.dir_calc_test_results, self.dir_computing_system_repository):
            if not dir_exists(path):
                create_dir(path)

    def describe(self) -> str:
        return (
            "AppConfig: ["
            f"compSystemId: {self.comp_system_id}; "
            f"dir_calcTestResults: {self.dir_calc_test_results}; "
            f"dir_computingSystemRepository: {self.dir_computing_system_repository}"
            "]"
        )