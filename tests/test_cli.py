"""Tests for the command line entry point."""

import io
from pathlib import Path
from typing import Callable

import pytest

from rental_space import cli
from rental_space.store.csv_store import RecordRepository
from rental_space.store.rental import RentalDataStore
from rental_space.ui import ConsoleUI


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
    """Record setup_logging calls instead of reconfiguring the root logger."""
    calls: list[tuple] = []
    monkeypatch.setattr(cli, "setup_logging", lambda *args: calls.append(args))
    for name in ("RENTAL_DB_DIR", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return calls


class TestParser:
    """Tests for build_parser and resolve_config."""

    def test_defaults(self) -> None:
        args = cli.build_parser().parse_args([])

        assert args.command is None
        config = cli.resolve_config(args)
        assert config.storage.db_dir == Path("db")
        assert config.log_level == "INFO"

    def test_overrides(self, tmp_path: Path) -> None:
        args = cli.build_parser().parse_args(
            [
                "--db-dir", str(tmp_path),
                "--log-level", "DEBUG",
                "--log-format", "json",
                "--log-file", str(tmp_path / "rental.log"),
                "run",
            ]
        )

        config = cli.resolve_config(args)

        assert args.command == "run"
        assert config.storage.tenant_path == tmp_path / "tenant.csv"
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.log_file == tmp_path / "rental.log"

    def test_env_used_without_flags(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENTAL_DB_DIR", "/srv/rental")

        config = cli.resolve_config(cli.build_parser().parse_args([]))

        assert config.storage.db_dir == Path("/srv/rental")

    def test_seed_arguments(self) -> None:
        args = cli.build_parser().parse_args(["seed", "--tenants", "3", "--seed", "7"])

        assert args.tenants == 3
        assert args.properties == 20
        assert args.seed == 7

    def test_invalid_log_format(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--log-format", "xml"])


class TestMain:
    """Tests for main."""

    def test_seed_writes_files(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], no_logging_setup: list[tuple]
    ) -> None:
        db_dir = tmp_path / "db"

        code = cli.main(
            [
                "--db-dir", str(db_dir),
                "seed",
                "--tenants", "3",
                "--properties", "4",
                "--applications", "2",
                "--wishlists", "2",
                "--seed", "42",
            ]
        )

        assert code == 0
        assert no_logging_setup == [("INFO", "standard", None)]
        store = RecordRepository.at(db_dir).load_all()
        assert store.summary() == {
            "tenants": 3,
            "properties": 4,
            "applications": 2,
            "wishlists": 2,
        }
        assert "tenants: 3" in capsys.readouterr().out

    def test_seed_appends(self, tmp_path: Path) -> None:
        db_dir = tmp_path / "db"
        args = ["--db-dir", str(db_dir), "seed", "--tenants", "2", "--properties", "2"]

        cli.main(args)
        cli.main(args)

        store = RecordRepository.at(db_dir).load_all()
        assert [p.property_id for p in store.properties] == [1, 2, 3, 4]

    def test_run_exits(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("builtins.input", lambda: "2")

        code = cli.main(["--db-dir", str(tmp_path / "db")])

        assert code == 0
        assert "Welcome to MRS!" in capsys.readouterr().out

    def test_store_error_returns_1(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        assert cli.main(["--db-dir", str(blocker), "seed", "--tenants", "1"]) == 1

    def test_keyboard_interrupt_returns_130(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def interrupt() -> str:
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupt)

        assert cli.main(["--db-dir", str(tmp_path / "db"), "run"]) == 130

    def test_bad_env_format_is_usage_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_FORMAT", "yaml")

        with pytest.raises(SystemExit) as exc_info:
            cli.main([])

        assert exc_info.value.code == 2


class TestRunApp:
    """Tests for run_app."""

    def test_loads_records_and_runs(
        self,
        tmp_path: Path,
        store: RentalDataStore,
        scripted_input: Callable[..., Callable[[], str]],
    ) -> None:
        repository = RecordRepository.at(tmp_path / "db")
        repository.flush(store)
        output = io.StringIO()
        ui = ConsoleUI(
            input_func=scripted_input("1", "bsmi2@student.monash.edu", "secret", "4", "2"),
            output=output,
        )

        cli.run_app(repository, ui)

        assert "*** Hi, Bob Smith! ***" in output.getvalue()
