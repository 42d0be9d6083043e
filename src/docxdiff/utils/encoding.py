#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/utils/encoding.py
"""Character encoding detection for HTML inputs.

Converter output and hand-exported HTML arrive as raw bytes in whatever
encoding the producing tool chose. chardet guesses the encoding; when the
guess is weak or wrong a fixed list of fallback encodings is tried.
"""

from __future__ import annotations

import logging
from typing import Sequence

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect the character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of leading bytes to sample
    confidence_threshold : float, default 0.7
        Minimum confidence (0.0-1.0) required to trust the detection

    Returns
    -------
    str | None
        Detected encoding name, or None when nothing was detected or the
        confidence is below ``confidence_threshold``

    """
    if not data:
        return None

    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding")
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None
    return encoding


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: Sequence[str] = DEFAULT_FALLBACK_ENCODINGS,
    confidence_threshold: float = 0.7,
) -> str:
    """Decode binary data, trying the detected encoding before the fallbacks.

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : sequence of str, default ("utf-8-sig", "cp1252", "latin-1")
        Encodings tried in order when detection fails or its guess does not
        decode the data
    confidence_threshold : float, default 0.7
        Minimum chardet confidence

    Returns
    -------
    str
        Decoded text. As a last resort undecodable bytes are replaced.

    """
    detected = detect_encoding(data, confidence_threshold=confidence_threshold)
    if detected:
        try:
            return data.decode(detected)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with detected encoding {detected}: {e}")

    for encoding in fallback_encodings:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
        except LookupError as e:
            logger.debug(f"Unknown encoding {encoding}: {e}")

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")
