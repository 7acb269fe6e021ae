# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
recordguard test suite.

Unit tests for the casing rules, the attribute guard, event dispatch and
suppression, and the record base class.
"""
