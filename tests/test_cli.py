from __future__ import annotations

import logging

import pytest
from openpyxl import load_workbook

from faturas import cli
from faturas.commands import menu as menu_command


def _feed(monkeypatch, answers):
    pending = iter(answers)

    def _input(_prompt=""):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", _input)


@pytest.fixture(autouse=True)
def _no_env(monkeypatch):
    monkeypatch.delenv("FATURAS_DUPLICATES", raising=False)
    monkeypatch.delenv("FATURAS_LEGACY_FIELDS", raising=False)


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("faturas")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True


def test_available_commands_lists_menu():
    names = [spec.name for spec in cli.available_commands()]
    assert names == ["menu"]


def test_run_unknown_command_raises():
    with pytest.raises(ValueError, match="Comando desconhecido"):
        cli.run("inexistente")


def test_main_runs_menu_and_exports_report(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, ["1", "2", "2024-05-05", "10", "paga", "1", "1", "2024-04-04", "5", "pendente", "0"])
    report = tmp_path / "relatorio.xlsx"

    code = cli.main(["menu", "--relatorio", str(report), "--log-file", str(tmp_path / "f.log")])

    assert code == 0
    assert "Relatório de faturas guardado em" in capsys.readouterr().out
    rows = list(load_workbook(report)["Faturas"].iter_rows(values_only=True))
    assert [row[0] for row in rows[1:]] == [1, 2]


def test_help_is_forwarded_to_command(capsys):
    code = cli.main(["menu", "--help"])

    assert code == 0
    assert "--relatorio" in capsys.readouterr().out


def test_invalid_duplicate_choice_returns_error_code(capsys):
    code = cli.run("menu", ["--duplicados", "talvez"])

    assert code == 2


def test_resolve_config_combines_legacy_and_policy():
    parser = menu_command.build_parser()

    config = menu_command._resolve_config(parser.parse_args(["--legacy", "--duplicados", "replace"]))

    assert config.duplicates == "replace"
    assert config.max_status_length == 9


def test_invalid_environment_policy_exits_with_error(monkeypatch, tmp_path):
    monkeypatch.setenv("FATURAS_DUPLICATES", "talvez")

    code = cli.run("menu", ["--log-file", str(tmp_path / "f.log")])

    assert code == 2


def test_main_without_command_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main([])

    assert exc.value.code == 2


def test_verbose_logs_store_debug_records(tmp_path, monkeypatch):
    _feed(monkeypatch, ["1", "1", "2024-01-01", "5", "paga", "0"])
    log_file = tmp_path / "f.log"

    code = cli.main(["menu", "-v", "--log-file", str(log_file)])

    assert code == 0
    assert logging.getLogger("faturas").level == logging.DEBUG
    for handler in logging.getLogger("faturas").handlers:
        handler.flush()
    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG [faturas.store] Fatura 1 inserida" in content
    assert "INFO [faturas.menu] Fatura 1 inserida pelo menu." in content


def test_console_logging_defaults_to_warnings_only(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "1", "2024-01-01", "5", "paga", "0"])

    code = cli.main(["menu"])

    assert code == 0
    assert logging.getLogger("faturas").level == logging.WARNING
    assert "inserida pelo menu" not in capsys.readouterr().err
