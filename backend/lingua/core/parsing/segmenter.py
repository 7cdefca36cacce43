"""Fallback sentence segmentation.

Used only when a sentence split reply cannot be parsed. The output is a
degraded-mode result and callers must flag it as such.
"""

import re
from typing import Iterator

# One or more terminal punctuation marks
SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def segment_sentences(text: str) -> Iterator[str]:
    """Split text into sentence-like pieces at ``.``, ``!`` and ``?``.

    Args:
        text: Raw text to split

    Yields:
        Trimmed, non-empty pieces in left-to-right order
    """
    for piece in SENTENCE_BOUNDARY.split(text or ""):
        piece = piece.strip()
        if piece:
            yield piece
