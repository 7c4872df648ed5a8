from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial

from django.core.management.base import BaseCommand, CommandError, CommandParser

from django_mysqlops.database import Database
from django_mysqlops.exceptions import (
    DatabaseNotConfigured,
    ExecutableNotFoundError,
    ExecutorError,
    MissingDatabaseError,
    UnsupportedEngine,
)
from django_mysqlops.executor import ExecutionResult, run


class OperationCommand(ABC, BaseCommand):
    """Shared plumbing for commands that run a single MySQL tool invocation."""

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "-d",
            "--database",
            default="default",
            help="Database alias to operate on (default: 'default').",
        )
        parser.add_argument(
            "--show-password",
            action="store_true",
            help="Do not mask the password when logging the command line.",
        )

    @abstractmethod
    def perform(self, db: Database, options: dict[str, object]) -> ExecutionResult:
        """Run the operation and return its result."""

    @abstractmethod
    def describe(self, alias: str, options: dict[str, object]) -> str:
        """One-line progress message shown at verbosity >= 1."""

    def confirm(self, alias: str, options: dict[str, object]) -> bool:
        return True

    def handle(self, *args: object, **options: object) -> None:
        alias = str(options["database"])
        verbosity = int(options["verbosity"])  # type: ignore[arg-type]
        runner = partial(run, log_password=bool(options["show_password"]))

        try:
            db = Database.for_alias(alias, runner=runner)
        except (DatabaseNotConfigured, UnsupportedEngine) as exc:
            raise CommandError(str(exc)) from exc

        if not self.confirm(alias, options):
            self.stdout.write("Operation cancelled.")
            raise SystemExit(0)

        if verbosity >= 1:
            self.stdout.write(self.describe(alias, options))

        try:
            result = self.perform(db, options)
        except MissingDatabaseError as exc:
            raise CommandError(f"Database '{alias}' has no NAME configured.") from exc
        except (ExecutableNotFoundError, ExecutorError) as exc:
            self.stderr.write(f"MySQL command failed: {exc}")
            raise SystemExit(1) from exc

        if not result.succeeded:
            self.stderr.write(f"MySQL command failed (exit {result.returncode}): {result.output.strip()}")
            raise SystemExit(1)

        self.report(result, verbosity)

    def report(self, result: ExecutionResult, verbosity: int) -> None:
        if verbosity >= 1:
            self.stdout.write(self.style.SUCCESS("Done."))
