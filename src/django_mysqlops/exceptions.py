from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .commands import CommandLine


class DjangoMysqlOpsError(Exception):
    """Base exception for django-mysqlops."""


class MissingDatabaseError(DjangoMysqlOpsError):
    """Raised when an operation needs a database name and none is configured."""

    def __init__(self, message: str = "Missing value for `database` in options"):
        super().__init__(message)


class ExecutableNotFoundError(DjangoMysqlOpsError):
    """Raised when a MySQL client tool cannot be located."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Could not find executable: '{name}'")


class ExecutorError(DjangoMysqlOpsError):
    """Raised when a command cannot be started."""


class ExternalCommandFailure(DjangoMysqlOpsError):
    """Raised when a MySQL tool exits with a non-zero status."""

    def __init__(self, command: CommandLine, returncode: int, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(f"MySQL command failed (exit {returncode}): {command}\n{output}".strip())


class DatabaseNotConfigured(DjangoMysqlOpsError):
    """Raised when a database alias is missing from DATABASES."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Database '{alias}' is not configured.")


class UnsupportedEngine(DjangoMysqlOpsError):
    """Raised when a database alias does not use a MySQL engine."""

    def __init__(self, engine: str):
        self.engine = engine
        super().__init__(f"Database engine is not MySQL-compatible: {engine}")
