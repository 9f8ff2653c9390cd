from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Any, Literal

import cytoolz as cz

logger = logging.getLogger(__name__)

type SearchName = Literal["linear", "binary", "exponential"]
"""Names accepted wherever a boundary search strategy can be selected."""

SEARCH_NAMES: frozenset[str] = frozenset(("linear", "binary", "exponential"))


@dataclass(slots=True)
class Config:
    """Process-wide settings for pyogroup.

    Args:
        default_search (SearchName): Strategy used by `group_by` & co when no `search` is given.
        repr_max_items (int): Number of items shown by view reprs before truncating with `...`.
    """

    default_search: SearchName = "linear"
    repr_max_items: int = 20

    def update(self, **changes: Any) -> Config:
        """Validate and apply **changes** in place.

        Args:
            **changes (Any): Field names and their new values.

        Returns:
            Config: The updated configuration, for chaining.

        Raises:
            ValueError: On unknown fields or invalid values.

        Example:
        ```python
        >>> import pyogroup as pg
        >>> cfg = pg.Config()
        >>> cfg.update(default_search="binary").default_search
        'binary'
        >>> cfg.update(default_search="quadratic")
        Traceback (most recent call last):
            ...
        ValueError: unknown search strategy: 'quadratic'

        ```
        """
        known = {f.name for f in fields(self)}
        for name, value in changes.items():
            if name not in known:
                msg = f"unknown config field: {name!r}"
                raise ValueError(msg)
            if name == "default_search" and value not in SEARCH_NAMES:
                msg = f"unknown search strategy: {value!r}"
                raise ValueError(msg)
            if name == "repr_max_items" and (not isinstance(value, int) or value < 0):
                msg = f"repr_max_items must be a non-negative int, got {value!r}"
                raise ValueError(msg)
        for name, value in changes.items():
            setattr(self, name, value)
        logger.debug("config updated: %s", changes)
        return self

    def view_repr(self, items: Iterable[Any], length: int) -> str:
        shown = ", ".join(repr(x) for x in cz.itertoolz.take(self.repr_max_items, items))
        return shown + (", ..." if length > self.repr_max_items else "")


_CONFIG = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance."""
    return _CONFIG
