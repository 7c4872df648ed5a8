from __future__ import annotations

from django.core.management.base import CommandParser

from django_mysqlops.database import Database
from django_mysqlops.executor import ExecutionResult

from ._base import OperationCommand


class Command(OperationCommand):
    help = "Export a MySQL database to a SQL file using mysqldump."

    def add_arguments(self, parser: CommandParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("path", help="File to write the dump to.")

    def describe(self, alias: str, options: dict[str, object]) -> str:
        return f"Exporting database '{alias}' to {options['path']}"

    def perform(self, db: Database, options: dict[str, object]) -> ExecutionResult:
        return db.export_to(str(options["path"]))
