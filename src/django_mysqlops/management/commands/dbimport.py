from __future__ import annotations

from django.core.management.base import CommandParser

from django_mysqlops.database import Database
from django_mysqlops.executor import ExecutionResult

from ._base import OperationCommand


class Command(OperationCommand):
    help = "Import a SQL file into a MySQL database."

    def add_arguments(self, parser: CommandParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("path", help="SQL file to load.")

    def describe(self, alias: str, options: dict[str, object]) -> str:
        return f"Importing {options['path']} into database '{alias}'"

    def perform(self, db: Database, options: dict[str, object]) -> ExecutionResult:
        return db.import_from(str(options["path"]))
