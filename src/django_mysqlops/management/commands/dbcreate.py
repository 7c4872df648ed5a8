from __future__ import annotations

from django_mysqlops.database import Database
from django_mysqlops.executor import ExecutionResult

from ._base import OperationCommand


class Command(OperationCommand):
    help = "Create a MySQL database if it does not exist."

    def describe(self, alias: str, options: dict[str, object]) -> str:
        return f"Creating database '{alias}'"

    def perform(self, db: Database, options: dict[str, object]) -> ExecutionResult:
        return db.create()
