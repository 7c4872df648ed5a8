from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from . import commands
from .commands import CommandLine, Resolver
from .configuration import Configuration, get_configuration
from .executor import ExecutionResult, run
from .resolver import resolve_executable

Runner = Callable[[CommandLine], ExecutionResult]


class Database:
    """Administer one MySQL database through the command-line tools.

    Every method builds a single command, runs it and returns the
    :class:`ExecutionResult`. With ``check=True`` a non-zero exit raises
    :class:`~django_mysqlops.exceptions.ExternalCommandFailure` instead.
    """

    def __init__(
        self,
        config: Configuration | Mapping[str, Any],
        *,
        resolver: Resolver = resolve_executable,
        runner: Runner = run,
        check: bool = False,
    ):
        self.config = config if isinstance(config, Configuration) else Configuration(config)
        self.resolver = resolver
        self.runner = runner
        self.check = check

    @classmethod
    def for_alias(cls, alias: str = "default", **kwargs: Any) -> Database:
        return cls(get_configuration(alias), **kwargs)

    def export_to(self, filename: str) -> ExecutionResult:
        return self._run(commands.build_export(self.config, filename, resolver=self.resolver))

    def import_from(self, filename: str) -> ExecutionResult:
        return self._run(commands.build_import(self.config, filename, resolver=self.resolver))

    def drop(self) -> ExecutionResult:
        return self._run(commands.build_drop(self.config, resolver=self.resolver))

    def create(self) -> ExecutionResult:
        return self._run(commands.build_create(self.config, resolver=self.resolver))

    def db_execute(self, statement: str) -> ExecutionResult:
        return self._run(commands.build_db_execute(self.config, statement, resolver=self.resolver))

    def _run(self, command: CommandLine) -> ExecutionResult:
        result = self.runner(command)
        if self.check:
            result.check_returncode()
        return result
