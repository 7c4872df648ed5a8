"""Build command lines for the MySQL client tools.

Nothing here spawns a process. Each builder looks up exactly one tool through the
resolver it is given and returns a :class:`CommandLine`, which keeps the executable,
its arguments, the credential environment and any redirect target apart so the
executor can run it without a shell.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Union

from .configuration import RECOGNIZED_OPTIONS, Configuration
from .resolver import Tool, resolve_executable

PASSWORD_ENV = "MYSQL_PWD"
REDACTED = "********"

Resolver = Callable[[str], str]


@dataclass(frozen=True, repr=False)
class CommandLine:
    executable: str
    args: tuple[str, ...] = ()
    env: dict[str, str] = field(default_factory=dict)
    stdin: str | None = None
    stdout: str | None = None

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]

    def render(self, reveal_password: bool = False) -> str:
        """Render as a single shell command line.

        Tokens are quoted with :func:`shlex.quote`. The password is masked unless
        ``reveal_password`` is set.
        """
        parts: list[str] = []
        for name, value in self.env.items():
            shown = shlex.quote(value) if reveal_password or name != PASSWORD_ENV else REDACTED
            parts.append(f"{name}={shown}")
        parts += [shlex.quote(token) for token in self.argv]
        if self.stdout is not None:
            parts += [">", shlex.quote(self.stdout)]
        if self.stdin is not None:
            parts += ["<", shlex.quote(self.stdin)]
        return " ".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        env = {name: (REDACTED if name == PASSWORD_ENV else value) for name, value in self.env.items()}
        return (
            f"CommandLine(executable={self.executable!r}, args={self.args!r}, env={env!r}, "
            f"stdin={self.stdin!r}, stdout={self.stdout!r})"
        )


@dataclass(frozen=True)
class Export:
    destination: str


@dataclass(frozen=True)
class Import:
    source: str


@dataclass(frozen=True)
class Drop:
    pass


@dataclass(frozen=True)
class Create:
    pass


@dataclass(frozen=True)
class Execute:
    statement: str
    target_database: str | None = None


Operation = Union[Export, Import, Drop, Create, Execute]


def connection_flags(config: Configuration) -> list[str]:
    """Return the ``--key=value`` flags for the present connection options."""
    flags = [f"--{option}={config[option]}" for option in RECOGNIZED_OPTIONS if option in config]
    if "port" in config:
        flags.append("--protocol=TCP")
    return flags


def credential_env(config: Configuration) -> dict[str, str]:
    """Pass the password through MYSQL_PWD, never as a command-line argument."""
    if config.password:
        return {PASSWORD_ENV: config.password}
    return {}


def _command(
    config: Configuration,
    tool: Tool,
    args: list[str],
    resolver: Resolver,
    **redirects: str,
) -> CommandLine:
    executable = resolver(tool.binary)
    return CommandLine(
        executable=executable,
        args=(*connection_flags(config), *args),
        env=credential_env(config),
        **redirects,
    )


def build_export(config: Configuration, destination: str, resolver: Resolver = resolve_executable) -> CommandLine:
    """Dump the configured database into ``destination``."""
    database = config.database
    return _command(config, Tool.DUMP, [database], resolver, stdout=destination)


def build_import(config: Configuration, source: str, resolver: Resolver = resolve_executable) -> CommandLine:
    """Load ``source`` into the configured database."""
    database = config.database
    return _command(config, Tool.RESTORE, [database], resolver, stdin=source)


def build_drop(config: Configuration, resolver: Resolver = resolve_executable) -> CommandLine:
    database = config.database
    return _command(config, Tool.ADMIN, ["-f", "drop", database], resolver)


def build_create(config: Configuration, resolver: Resolver = resolve_executable) -> CommandLine:
    # The database may not exist yet, so no USE clause.
    return build_execute_statement(config, f"CREATE DATABASE IF NOT EXISTS {config.database}", resolver=resolver)


def build_execute_statement(
    config: Configuration,
    statement: str,
    target_database: str | None = None,
    resolver: Resolver = resolve_executable,
) -> CommandLine:
    """Run ``statement`` through the client in ``-e`` mode.

    When ``target_database`` is given the statement is prefixed with a ``USE`` clause.
    """
    full_statement = statement if target_database is None else f"USE `{target_database}`; {statement}"
    return _command(config, Tool.CLIENT, ["-e", full_statement], resolver)


def build_db_execute(config: Configuration, statement: str, resolver: Resolver = resolve_executable) -> CommandLine:
    """Run ``statement`` against the configured database."""
    return build_execute_statement(config, statement, target_database=config.database, resolver=resolver)


def build(config: Configuration, operation: Operation, resolver: Resolver = resolve_executable) -> CommandLine:
    if isinstance(operation, Export):
        return build_export(config, operation.destination, resolver=resolver)
    if isinstance(operation, Import):
        return build_import(config, operation.source, resolver=resolver)
    if isinstance(operation, Drop):
        return build_drop(config, resolver=resolver)
    if isinstance(operation, Create):
        return build_create(config, resolver=resolver)
    if isinstance(operation, Execute):
        return build_execute_statement(
            config, operation.statement, target_database=operation.target_database, resolver=resolver
        )
    raise TypeError(f"Unknown operation: {operation!r}")
