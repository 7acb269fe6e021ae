# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class InMemoryConnection:
    """
    Table storage backing `Record` persistence.

    Rows are stored as attribute dicts keyed by primary key. Rows are copied
    on the way in and on the way out, so records never share state with
    storage.
    """

    def __init__(self):
        self._tables: Dict[str, Dict[Any, Dict[str, Any]]] = defaultdict(dict)
        self._sequences: Dict[str, int] = defaultdict(int)

    def insert(self, table: str, row: Dict[str, Any], key_name: str = "id") -> Any:
        """Insert a row, assigning an auto-increment key when it has none."""
        row = dict(row)
        key = row.get(key_name)
        if key is None:
            self._sequences[table] += 1
            key = self._sequences[table]
            row[key_name] = key
        elif isinstance(key, int):
            self._sequences[table] = max(self._sequences[table], key)

        if key in self._tables[table]:
            raise ValueError(f"Duplicate key {key!r} for table '{table}'")

        self._tables[table][key] = row
        logger.debug(f"Inserted {table}#{key}")
        return key

    def update(self, table: str, key: Any, values: Dict[str, Any]) -> bool:
        row = self._tables[table].get(key)
        if row is None:
            return False
        row.update(values)
        logger.debug(f"Updated {table}#{key}: {sorted(values)}")
        return True

    def delete(self, table: str, key: Any) -> bool:
        removed = self._tables[table].pop(key, None) is not None
        if removed:
            logger.debug(f"Deleted {table}#{key}")
        return removed

    def find(self, table: str, key: Any) -> Optional[Dict[str, Any]]:
        row = self._tables[table].get(key)
        return dict(row) if row is not None else None

    def select(self, table: str) -> List[Dict[str, Any]]:
        return [dict(row) for row in self._tables[table].values()]

    def truncate(self, table: str) -> None:
        self._tables.pop(table, None)
        self._sequences.pop(table, None)
