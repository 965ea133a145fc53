# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Creation of compressed, timestamped archives of source directories.

This module provides the `Archiver` class, which processes backup jobs one
after another, and the compressors that produce the gzip-compressed tar archives.
"""

from .archiver import Archiver
from .compressor import Compressor, TarCompressor, TarfileCompressor

__all__ = [
    "Archiver",
    "Compressor",
    "TarCompressor",
    "TarfileCompressor",
]
