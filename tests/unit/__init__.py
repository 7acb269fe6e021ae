# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for recordguard components.

Records run against an in-memory connection and dispatcher installed by the
fixtures in ``tests/conftest.py``.
"""
