from __future__ import annotations

from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from django_mysqlops.commands import CommandLine
from django_mysqlops.exceptions import ExecutableNotFoundError
from django_mysqlops.executor import ExecutionResult
from django_mysqlops.management.commands._base import OperationCommand

MYSQL_DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.mysql",
        "NAME": "shop",
        "USER": "admin",
        "PASSWORD": "secret",
        "HOST": "db.example.com",
        "PORT": "3306",
    },
    "nameless": {"ENGINE": "django.db.backends.mysql", "NAME": ""},
    "lite": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"},
}

pytestmark = [
    pytest.mark.filterwarnings("ignore:Overriding setting DATABASES can lead to unexpected behavior\\.:UserWarning"),
]


def _result(command: CommandLine, returncode: int = 0, output: str = "") -> ExecutionResult:
    return ExecutionResult(command, returncode, output)


@pytest.fixture(autouse=True)
def fake_which():
    with patch("django_mysqlops.resolver.shutil.which", side_effect=lambda name, path=None: f"/usr/bin/{name}"):
        yield


@pytest.fixture
def mock_run():
    with patch("django_mysqlops.management.commands._base.run") as mocked:
        mocked.side_effect = lambda command, **kwargs: _result(command)
        yield mocked


@pytest.fixture(autouse=True)
def mysql_databases():
    with override_settings(DATABASES=MYSQL_DATABASES):
        yield


class TestOperationCommands:
    def test_dbexport(self, mock_run: MagicMock):
        out = StringIO()
        call_command("dbexport", "/tmp/shop.sql", stdout=out)
        command: CommandLine = mock_run.call_args[0][0]
        assert command.executable == "/usr/bin/mysqldump"
        assert command.stdout == "/tmp/shop.sql"
        assert mock_run.call_args[1] == {"log_password": False}
        assert "Exporting database 'default' to /tmp/shop.sql" in out.getvalue()
        assert "Done." in out.getvalue()

    def test_dbimport(self, mock_run: MagicMock):
        call_command("dbimport", "/tmp/shop.sql", verbosity=0)
        command: CommandLine = mock_run.call_args[0][0]
        assert command.executable == "/usr/bin/mysql"
        assert command.stdin == "/tmp/shop.sql"

    def test_dbcreate(self, mock_run: MagicMock):
        call_command("dbcreate", verbosity=0)
        command: CommandLine = mock_run.call_args[0][0]
        assert command.args[-1] == "CREATE DATABASE IF NOT EXISTS shop"

    def test_dbexecute_prints_output(self, mock_run: MagicMock):
        mock_run.side_effect = lambda command, **kwargs: _result(command, output="1\n1\n")
        out = StringIO()
        call_command("dbexecute", "SELECT 1", verbosity=0, stdout=out)
        command: CommandLine = mock_run.call_args[0][0]
        assert command.args[-1] == "USE `shop`; SELECT 1"
        assert out.getvalue() == "1\n1\n"

    def test_dbdrop_noinput(self, mock_run: MagicMock):
        call_command("dbdrop", interactive=False, verbosity=0)
        command: CommandLine = mock_run.call_args[0][0]
        assert command.args[-3:] == ("-f", "drop", "shop")

    @patch("builtins.input", return_value="y")
    def test_dbdrop_confirmed(self, mock_input: MagicMock, mock_run: MagicMock):
        call_command("dbdrop", verbosity=0)
        mock_input.assert_called_once()
        mock_run.assert_called_once()

    @patch("builtins.input", return_value="n")
    def test_dbdrop_cancelled(self, mock_input: MagicMock, mock_run: MagicMock):
        out = StringIO()
        with pytest.raises(SystemExit) as exc_info:
            call_command("dbdrop", stdout=out)
        assert exc_info.value.code == 0
        assert "cancelled" in out.getvalue()
        mock_run.assert_not_called()

    def test_show_password(self, mock_run: MagicMock):
        call_command("dbcreate", show_password=True, verbosity=0)
        assert mock_run.call_args[1] == {"log_password": True}

    def test_database_option(self, mock_run: MagicMock):
        with pytest.raises(CommandError, match="no NAME configured"):
            call_command("dbcreate", database="nameless", verbosity=0)
        mock_run.assert_not_called()

    def test_unknown_alias(self, mock_run: MagicMock):
        with pytest.raises(CommandError, match="not configured"):
            call_command("dbexport", "/tmp/x.sql", database="missing", verbosity=0)

    def test_non_mysql_alias(self, mock_run: MagicMock):
        with pytest.raises(CommandError, match="not MySQL-compatible"):
            call_command("dbexport", "/tmp/x.sql", database="lite", verbosity=0)

    def test_failing_exit(self, mock_run: MagicMock):
        mock_run.side_effect = lambda command, **kwargs: _result(command, 1, "ERROR 1049 (42000): Unknown database\n")
        err = StringIO()
        with pytest.raises(SystemExit) as exc_info:
            call_command("dbimport", "/tmp/shop.sql", verbosity=0, stderr=err)
        assert exc_info.value.code == 1
        assert "exit 1" in err.getvalue()
        assert "Unknown database" in err.getvalue()

    def test_missing_tool(self, mock_run: MagicMock):
        err = StringIO()
        with patch("django_mysqlops.resolver.shutil.which", return_value=None):
            with pytest.raises(SystemExit) as exc_info:
                call_command("dbexport", "/tmp/shop.sql", verbosity=0, stderr=err)
        assert exc_info.value.code == 1
        assert "Could not find executable: 'mysqldump'" in err.getvalue()
        mock_run.assert_not_called()


class TestOperationCommandBase:
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            OperationCommand()

    def test_subclass_must_describe(self):
        class PerformOnly(OperationCommand):
            def perform(self, db, options):
                return _result(CommandLine("/usr/bin/mysql"))

        with pytest.raises(TypeError):
            PerformOnly()
