from __future__ import annotations

import enum
import os
import shutil

from .exceptions import ExecutableNotFoundError
from .settings import get_setting


class Tool(enum.Enum):
    """The MySQL client tools, keyed by the setting that names their binary."""

    DUMP = "DUMP_BINARY"
    RESTORE = "RESTORE_BINARY"
    ADMIN = "ADMIN_BINARY"
    CLIENT = "CLIENT_BINARY"

    @property
    def binary(self) -> str:
        return str(get_setting(self.value))


def resolve_executable(name: str) -> str:
    """Return the absolute path of ``name``, or raise ExecutableNotFoundError."""
    search_path = get_setting("SEARCH_PATH")
    if os.sep in name:
        if os.path.isfile(name) and os.access(name, os.X_OK):
            return os.path.abspath(name)
        raise ExecutableNotFoundError(name)
    if isinstance(search_path, (list, tuple)):
        search_path = os.pathsep.join(str(entry) for entry in search_path)
    found = shutil.which(name, path=str(search_path) if search_path else None)
    if found is None:
        raise ExecutableNotFoundError(name)
    return os.path.abspath(found)
