# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Value types describing backup jobs and their outcomes.

This package defines the `ErrorKind` enumeration classifying failed jobs
and the `Size` type used to present archive sizes in human-readable units.
"""
