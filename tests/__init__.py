# carryflow Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
carryflow test suite.

Unit tests for the waterfall engine, its input and result models, core
calculations and reporting.
"""
