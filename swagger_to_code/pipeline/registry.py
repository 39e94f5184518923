"""
Registry of the type names emitted during one generation run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class GeneratedNameRegistry:
    """Tracks formatted type names already emitted in a run.

    The first declaration of a name wins; later ones are skipped with a warning.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._seen: set[str] = set()

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names(self) -> list[str]:
        """Emitted names in emission order."""
        return list(self._names)

    def register(self, type_name: str) -> None:
        if type_name not in self._seen:
            self._seen.add(type_name)
            self._names.append(type_name)

    def claim(self, type_name: str, rhs: str | None = None) -> bool:
        """
        Check that a declaration may be written and register its name.

        Args:
            type_name: Formatted name of the declaration
            rhs: Right-hand side type expression, for aliases

        Returns:
            False if the alias would point at itself or the name was already emitted
        """
        if rhs is not None and type_name == rhs:
            logger.warning("skipping type alias with same name `%s == %s`", type_name, rhs)
            return False
        if type_name in self._seen:
            logger.warning("skipping `%s`, a type with the same name already exists", type_name)
            return False
        self.register(type_name)
        return True
