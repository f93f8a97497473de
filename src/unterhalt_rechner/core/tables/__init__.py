"""Need tables by edition.

High-level entry point:
    from unterhalt_rechner.core.tables import get_need_table

Editions are immutable data. get_need_table() picks the edition in this
order:
  1. the edition passed explicitly
  2. table_file from config.json (custom JSON edition)
  3. table_edition from config.json (default: 2025)

Sub-modules:
    need_table        — NeedTable, NeedTier, JSON loading
    duesseldorf_2025  — Düsseldorfer Tabelle 2025
"""

from typing import Optional

from ..config import get_config
from ..exceptions import UnknownTableEditionError
from .duesseldorf_2025 import DUESSELDORF_2025
from .need_table import NeedTable, NeedTier, load_need_table

#: Built-in editions by year
NEED_TABLES: dict[int, NeedTable] = {
    2025: DUESSELDORF_2025,
}

__all__ = [
    "DUESSELDORF_2025",
    "NEED_TABLES",
    "NeedTable",
    "NeedTier",
    "get_need_table",
    "load_need_table",
]


def get_need_table(edition: Optional[int] = None) -> NeedTable:
    """Return the need table to calculate with.

    Args:
        edition: Year of a built-in edition. When omitted, the table
            configured in config.json is used (ur setup run).

    Raises:
        UnknownTableEditionError: No built-in edition for that year.
        InvalidNeedTableError: The configured table_file is unreadable.
    """
    if edition is None:
        cfg = get_config()
        if cfg.table_file:
            return load_need_table(cfg.table_file)
        edition = cfg.table_edition

    try:
        return NEED_TABLES[edition]
    except KeyError:
        known = ", ".join(str(y) for y in sorted(NEED_TABLES))
        raise UnknownTableEditionError(
            f"No need table for edition {edition} (available: {known})"
        ) from None
