#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/parsers/base.py
"""Base class for the input converters.

A parser turns one input (a path, raw bytes, a binary stream or, for HTML,
markup text) into a :class:`~docxdiff.ast.nodes.Document` the diff engine
can compare.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from docxdiff.ast.nodes import Document
from docxdiff.exceptions import DocumentNotFoundError, FileError, ValidationError
from docxdiff.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)

InputData = Union[str, Path, IO[bytes], bytes]


def decode_text(data: bytes) -> str:
    """Decode input bytes, detecting their encoding with chardet."""
    return read_text_with_encoding_detection(data)


class BaseParser(ABC):
    """Abstract base class for input converters.

    Parameters
    ----------
    options : Any, optional
        Converter-specific options dataclass

    """

    def __init__(self, options: Any = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @abstractmethod
    def parse(self, input_data: InputData) -> Document:
        """Parse the input into a document tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Input to convert

        Returns
        -------
        Document
            Tree ready to be diffed

        """
        pass

    @staticmethod
    def _read_path(path: Path) -> bytes:
        if not path.exists():
            raise DocumentNotFoundError(str(path))
        try:
            return path.read_bytes()
        except OSError as e:
            raise FileError(f"Could not read {path}: {e}", file_path=str(path), original_error=e) from e

    @staticmethod
    def _load_text_content(input_data: InputData) -> str:
        """Load text from a path, bytes, a stream, or markup given directly.

        A string is treated as a file path when it names an existing file
        and as markup otherwise.
        """
        if isinstance(input_data, bytes):
            return decode_text(input_data)
        if isinstance(input_data, Path):
            return decode_text(BaseParser._read_path(input_data))
        if isinstance(input_data, str):
            # Long strings and strings with newlines are never paths
            if len(input_data) <= 260 and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        return decode_text(BaseParser._read_path(path))
                except OSError:
                    pass
            return input_data
        if hasattr(input_data, "read"):
            data = input_data.read()
            return data if isinstance(data, str) else decode_text(data)
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=type(input_data).__name__,
        )

    @staticmethod
    def _load_bytes_content(input_data: InputData) -> bytes:
        """Load binary content from a path, bytes or a binary stream."""
        if isinstance(input_data, bytes):
            return input_data
        if isinstance(input_data, (str, Path)):
            return BaseParser._read_path(Path(input_data))
        if hasattr(input_data, "read"):
            data = input_data.read()
            if isinstance(data, str):
                raise ValidationError(
                    "Binary input expected, got a text stream",
                    parameter_name="input_data",
                    parameter_value="text stream",
                )
            return data
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=type(input_data).__name__,
        )
