from __future__ import annotations

from django.core.management.base import CommandParser

from django_mysqlops.database import Database
from django_mysqlops.executor import ExecutionResult

from ._base import OperationCommand


class Command(OperationCommand):
    help = "Drop a MySQL database using mysqladmin."

    def add_arguments(self, parser: CommandParser) -> None:
        super().add_arguments(parser)
        parser.add_argument(
            "--noinput",
            action="store_false",
            dest="interactive",
            default=True,
            help="Do not prompt for confirmation before dropping.",
        )

    def confirm(self, alias: str, options: dict[str, object]) -> bool:
        if not options["interactive"]:
            return True
        answer = input(f"Drop database '{alias}'? This cannot be undone. [y/N] ").strip().lower()
        return answer in {"y", "yes"}

    def describe(self, alias: str, options: dict[str, object]) -> str:
        return f"Dropping database '{alias}'"

    def perform(self, db: Database, options: dict[str, object]) -> ExecutionResult:
        return db.drop()
