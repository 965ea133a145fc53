# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for backitup.

This module collects the foundational classes, utilities, and helpers used
across the backitup codebase. It provides configuration, error handling,
shared helpers, and structured logging.
"""
