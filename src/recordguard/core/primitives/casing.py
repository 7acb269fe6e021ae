# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Convention-insensitive attribute name matching.

An attribute can be addressed as ``created_at``, ``createdAt``, ``CreatedAt``
or ``CREATED_AT``. The guard treats all of these as the same
logical attribute by comparing casing variants instead of raw strings.

Both functions here are pure and carry no dependency on the record layer, so
they can be exercised on their own.
"""

from __future__ import annotations

from typing import Iterable, Set, Tuple

from pydantic.alias_generators import to_camel, to_pascal, to_snake


def casing_variants(name: str) -> Tuple[str, ...]:
    """
    Render an attribute name in every supported convention.

    Order is UPPERCASE, lowercase, PascalCase, camelCase, snake_case, with
    duplicates dropped (``"name"`` is its own lowercase, camel and snake form).

    PascalCase and camelCase are derived from the snake form: the pydantic
    generators expect snake input, and going through ``to_snake`` first keeps
    camelCase input such as ``createdAt`` intact.

    Example:
        >>> casing_variants("createdAt")
        ('CREATEDAT', 'createdat', 'CreatedAt', 'createdAt', 'created_at')
    """
    snake = to_snake(name)
    variants = (
        name.upper(),
        name.lower(),
        to_pascal(snake),
        to_camel(snake),
        snake,
    )
    return tuple(dict.fromkeys(variants))


def declared_variants(declared: Iterable[str]) -> Set[str]:
    """Union of the casing variants of every declared name."""
    expanded: Set[str] = set()
    for declared_name in declared:
        expanded.update(casing_variants(declared_name))
    return expanded


def is_protected(name: str, declared: Iterable[str]) -> bool:
    """
    Check whether ``name`` matches any declared attribute name.

    A match means that some casing variant of ``name`` equals some casing
    variant of a declared name. Only whole names are compared; substrings and
    prefixes never match.

    Args:
        name: Attribute name as addressed by the caller
        declared: Declared names (read-only list, fillable list, ...)

    Returns:
        True if ``name`` refers to one of the declared attributes
    """
    expanded = declared_variants(declared)
    if not expanded:
        return False
    return not expanded.isdisjoint(casing_variants(name))
