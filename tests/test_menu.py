import io

import pytest

from hcsbench.algresults import AlgTestingResultRepository
from hcsbench.computing import ComputingSystemRepository
from hcsbench.config import AppConfig
from hcsbench.menu import (
    MainMenu,
    MenuCommand,
    MenuCommandItem,
    run_config_menu,
    run_results_menu,
    run_systems_menu,
)


def feeder(*lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def repos(tmp_path):
    systems = ComputingSystemRepository(dir_name=str(tmp_path / "cs"))
    results = AlgTestingResultRepository(dir_name=str(tmp_path / "alg"))
    config = AppConfig(
        dir_calc_test_results=str(tmp_path / "calc"),
        dir_computing_system_repository=str(tmp_path / "cs"),
    )
    return config, systems, results


def test_item_matches_keys():
    item = MenuCommandItem(MenuCommand.EXIT, ("2", "q", "exit"), None, "Exit from menu")
    assert item.matches("q")
    assert not item.matches("quit")


@pytest.mark.parametrize(
    "key, expected",
    [
        ("h", MenuCommand.HELP),
        ("?", MenuCommand.HELP),
        ("exit", MenuCommand.EXIT),
        ("gpu", MenuCommand.PRINT_GPU_PARAMETERS),
        ("5", MenuCommand.WRITE_GPU_SPECS_TO_TXT_FILE),
        ("cs-repo-conf", MenuCommand.COMPUTING_SYSTEM_REPOSITORY_CONFIG),
    ],
)
def test_recognize(key, expected):
    assert MainMenu(feeder(), io.StringIO()).recognize(key).comm is expected


def test_recognize_unknown_is_none():
    assert MainMenu(feeder(), io.StringIO()).recognize("nothing") is None


def test_describe_help_lists_every_command():
    menu = MainMenu(feeder(), io.StringIO())
    lines = menu.describe_help().splitlines()
    assert lines[0] == "----- Command list -----"
    assert lines[1] == "1 ? h help \tPrint help"
    assert len(lines) == len(menu.commands) + 1


def test_start_runs_commands_until_exit(repos):
    out = io.StringIO()
    MainMenu(feeder("xyz libs", "q"), out).start(*repos)
    text = out.getvalue()
    assert "Error! Command not recognized!" in text
    assert "----- Starting: Print supported libs (OpenMP, Cuda etc.)-----------" in text
    assert "Supported libs: OpenMP \n" in text
    assert text.endswith("--- Good bye! ---\n")


def test_start_stops_at_end_of_input(repos):
    out = io.StringIO()
    MainMenu(feeder("help"), out).start(*repos)
    text = out.getvalue()
    assert "----- Command list -----" in text
    assert text.endswith("--- Good bye! ---\n")


def test_gpu_specs_command_reports_no_devices(repos, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    MainMenu(feeder("5", "q"), out).start(*repos)
    assert "Cuda devices number: 0\n" in out.getvalue()
    assert not (tmp_path / "gpu-specs.txt").exists()


def test_config_menu(repos):
    config = repos[0]
    out = io.StringIO()
    run_config_menu(config, feeder("2", "abc", "1"), out)
    text = out.getvalue()
    assert config.describe() + "\n" in text
    assert "Command not recognized!\n" in text
    assert text.endswith("Back to main menu\n")


def test_systems_menu_adds_and_checks(repos):
    systems = repos[1]
    out = io.StringIO()
    run_systems_menu(systems, feeder("5", "7", "3", "8", "7", "1"), out)
    text = out.getvalue()
    assert "Computing system 7 added." in text
    assert "Computing system ids: [7 ]" in text
    assert "id: 7; isExists: 1" in text
    assert systems.exists(7)


def test_results_menu_writes_sample(repos):
    results = repos[2]
    run_results_menu(results, feeder("5", "1"), io.StringIO())
    with open(results.records_path, encoding="utf-8") as fin:
        assert fin.read().startswith("111 222 ")


def test_main_menu_enters_results_menu(repos):
    results = repos[2]
    out = io.StringIO()
    MainMenu(feeder("11 5 1", "q"), out).start(*repos)
    assert "----- AlgTestingResultRepository configuration -----" in out.getvalue()
    with open(results.records_path, encoding="utf-8") as fin:
        assert len(fin.read().splitlines()) == 1