from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from django.conf import settings as django_settings

from .exceptions import DatabaseNotConfigured, MissingDatabaseError, UnsupportedEngine
from .settings import get_setting

RECOGNIZED_OPTIONS = ("user", "host", "port", "socket")

MYSQL_ENGINES = frozenset(
    {
        "django.db.backends.mysql",
        "django.contrib.gis.db.backends.mysql",
        "django_prometheus.db.backends.mysql",
    }
)


class Configuration(Mapping[str, str]):
    """Read-only connection options for the MySQL client tools.

    Recognized keys are ``user``, ``host``, ``port``, ``socket``, ``password`` and
    ``database``. Anything else is stored but never turned into a flag. ``None`` and
    empty strings count as absent.
    """

    __slots__ = ("_options",)

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any):
        merged = {**(options or {}), **kwargs}
        self._options: dict[str, str] = {
            str(key): str(value) for key, value in merged.items() if value is not None and value != ""
        }

    @classmethod
    def from_django(cls, database_settings: Mapping[str, Any]) -> Configuration:
        """Build from a Django ``DATABASES`` entry."""
        db_options: Mapping[str, Any] = database_settings.get("OPTIONS") or {}
        host = str(database_settings.get("HOST") or "")
        socket = db_options.get("unix_socket")
        # Django's MySQL backend treats a HOST starting with "/" as a socket path.
        if host.startswith("/"):
            socket = socket or host
            host = ""
        return cls(
            database=database_settings.get("NAME"),
            user=database_settings.get("USER"),
            password=database_settings.get("PASSWORD"),
            host=host,
            port=database_settings.get("PORT"),
            socket=socket,
        )

    def __getitem__(self, key: str) -> str:
        return self._options[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __setitem__(self, key: str, value: Any) -> None:
        raise TypeError("Configuration is read-only")

    def __delitem__(self, key: str) -> None:
        raise TypeError("Configuration is read-only")

    def __repr__(self) -> str:
        shown = {key: ("********" if key == "password" else value) for key, value in self._options.items()}
        return f"Configuration({shown!r})"

    @property
    def database(self) -> str:
        try:
            return self._options["database"]
        except KeyError:
            raise MissingDatabaseError() from None

    @property
    def password(self) -> str | None:
        return self._options.get("password")


def get_configuration(alias: str = "default") -> Configuration:
    """Get the connection options for a Django database alias."""
    if alias not in django_settings.DATABASES:
        raise DatabaseNotConfigured(alias)
    db_settings: dict[str, Any] = django_settings.DATABASES[alias]
    engine = str(db_settings.get("ENGINE", ""))
    extra_engines: list[str] = get_setting("ENGINES")  # type: ignore[assignment]
    if engine not in MYSQL_ENGINES and engine not in extra_engines:
        raise UnsupportedEngine(engine)
    return Configuration.from_django(db_settings)
