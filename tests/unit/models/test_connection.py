# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from recordguard.models import InMemoryConnection


def test_insert_assigns_incrementing_keys(connection: InMemoryConnection):
    assert connection.insert("posts", {"title": "a"}) == 1
    assert connection.insert("posts", {"title": "b"}) == 2
    assert connection.insert("tags", {"name": "x"}) == 1


def test_insert_keeps_explicit_key(connection: InMemoryConnection):
    assert connection.insert("posts", {"id": 10, "title": "a"}) == 10
    assert connection.insert("posts", {"title": "b"}) == 11


def test_insert_rejects_duplicate_key(connection: InMemoryConnection):
    connection.insert("posts", {"id": 1})
    with pytest.raises(ValueError):
        connection.insert("posts", {"id": 1})


def test_rows_are_copied(connection: InMemoryConnection):
    row = {"title": "a"}
    key = connection.insert("posts", row)
    row["title"] = "changed"

    found = connection.find("posts", key)
    found["title"] = "changed again"

    assert connection.find("posts", key) == {"id": key, "title": "a"}


def test_update_delete_select(connection: InMemoryConnection):
    key = connection.insert("posts", {"title": "a"})

    assert connection.update("posts", key, {"title": "b"})
    assert not connection.update("posts", 99, {"title": "b"})
    assert connection.select("posts") == [{"id": key, "title": "b"}]

    assert connection.delete("posts", key)
    assert not connection.delete("posts", key)
    assert connection.find("posts", key) is None


def test_truncate_resets_sequence(connection: InMemoryConnection):
    connection.insert("posts", {"title": "a"})
    connection.truncate("posts")

    assert connection.select("posts") == []
    assert connection.insert("posts", {"title": "b"}) == 1
