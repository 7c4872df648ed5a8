from __future__ import annotations

from django.core.management.base import CommandParser

from django_mysqlops.database import Database
from django_mysqlops.executor import ExecutionResult

from ._base import OperationCommand


class Command(OperationCommand):
    help = "Execute a SQL statement against a MySQL database."

    def add_arguments(self, parser: CommandParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("statement", help="SQL statement to run.")

    def describe(self, alias: str, options: dict[str, object]) -> str:
        return f"Executing statement on database '{alias}'"

    def perform(self, db: Database, options: dict[str, object]) -> ExecutionResult:
        return db.db_execute(str(options["statement"]))

    def report(self, result: ExecutionResult, verbosity: int) -> None:
        if result.output:
            self.stdout.write(result.output, ending="")
        super().report(result, verbosity)
