#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/utils/__init__.py
"""Utility modules for the docxdiff package.

This package contains dependency checking and input loading helpers shared
by the input converters and the command line.
"""

from docxdiff.utils.decorators import debug_timer, requires_dependencies
from docxdiff.utils.packages import check_version_requirement, get_package_version

__all__ = [
    "check_version_requirement",
    "debug_timer",
    "get_package_version",
    "requires_dependencies",
]
