from __future__ import annotations

import logging
import os
import subprocess
from contextlib import ExitStack
from dataclasses import dataclass

from .commands import CommandLine
from .exceptions import DjangoMysqlOpsError, ExecutableNotFoundError, ExecutorError, ExternalCommandFailure
from .settings import get_setting

logger = logging.getLogger("django_mysqlops")


@dataclass(frozen=True)
class ExecutionResult:
    command: CommandLine
    returncode: int
    output: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def check_returncode(self) -> ExecutionResult:
        """Raise ExternalCommandFailure if the command exited non-zero."""
        if not self.succeeded:
            raise ExternalCommandFailure(self.command, self.returncode, self.output)
        return self


def run(command: CommandLine, *, log_password: bool | None = None) -> ExecutionResult:
    """Run ``command`` to completion and return its exit status and output.

    The argv is executed directly, without a shell. Redirect targets are opened here.
    When stdout goes to a file only stderr is captured; otherwise both streams are
    merged. A non-zero exit is reported in the result, not raised.
    """
    if log_password is None:
        log_password = bool(get_setting("LOG_PASSWORD"))
    logger.info("%s", command.render(reveal_password=log_password))

    env = os.environ.copy()
    env.update(command.env)
    with ExitStack() as stack:
        stdin = _open(stack, command.stdin, "rb") if command.stdin is not None else subprocess.DEVNULL
        if command.stdout is not None:
            stdout = _open(stack, command.stdout, "wb")
            stderr = subprocess.PIPE
        else:
            stdout = subprocess.PIPE
            stderr = subprocess.STDOUT
        try:
            proc = subprocess.run(command.argv, stdin=stdin, stdout=stdout, stderr=stderr, env=env)
        except OSError as exc:
            raise _command_error(command, exc) from exc

    captured = proc.stderr if command.stdout is not None else proc.stdout
    output = captured.decode(errors="replace") if captured else ""
    if proc.returncode != 0:
        logger.warning("%s exited with status %d", os.path.basename(command.executable), proc.returncode)
    return ExecutionResult(command=command, returncode=proc.returncode, output=output)


def _open(stack: ExitStack, path: str, mode: str):
    try:
        return stack.enter_context(open(path, mode))
    except OSError as exc:
        raise ExecutorError(f"Cannot open '{path}': {exc.strerror or exc}") from exc


def _command_error(command: CommandLine, exc: OSError) -> DjangoMysqlOpsError:
    if exc.errno == 2:
        return ExecutableNotFoundError(command.executable)
    return ExecutorError(str(exc))
