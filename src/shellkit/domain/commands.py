from __future__ import annotations

"""
Subcommand Catalog.

Closed set of operations the dispatcher knows about. Anything else is a
usage error.
"""

from enum import Enum
from typing import List, Optional

from shellkit.domain.errors import UsageError
from shellkit.utils.i18n import i18n


class Subcommand(Enum):
    ECHO = "echo"
    CAT = "cat"
    LS = "ls"
    TREE = "tree"
    GREP = "grep"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Subcommand":
        """
        Resolve a raw command-line token into a known subcommand.

        Raises:
            UsageError: If the name is missing or not part of the catalog.
        """
        if not name:
            raise UsageError(i18n.t("cli.errors.no_subcommand"))
        try:
            return cls(name)
        except ValueError:
            raise UsageError(
                i18n.t("cli.errors.unknown_subcommand", name=name, available=", ".join(cls.names()))
            ) from None

    @classmethod
    def names(cls) -> List[str]:
        return [member.value for member in cls]
