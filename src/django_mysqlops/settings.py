from copy import deepcopy

from django.conf import settings

DEFAULTS: dict[str, object] = {
    # Client tools
    "DUMP_BINARY": "mysqldump",
    "RESTORE_BINARY": "mysql",
    "ADMIN_BINARY": "mysqladmin",
    "CLIENT_BINARY": "mysql",
    # PATH-style string or a list of directories; None searches $PATH
    "SEARCH_PATH": None,
    # Tracing
    "LOG_PASSWORD": False,
    # Extra engines treated as MySQL-compatible
    "ENGINES": [],
}


def get_setting(key: str) -> object:
    """Get a django-mysqlops setting, falling back to defaults."""
    merged = {**DEFAULTS, **getattr(settings, "DJANGO_MYSQLOPS", {})}
    if key not in merged:
        raise KeyError(f"Unknown django-mysqlops setting: {key}")
    return deepcopy(merged[key])
