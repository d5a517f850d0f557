import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 400


def split_text_into_chunks(text: Optional[str], max_length: int) -> List[str]:
    """
    Split text into word-bounded chunks of at most ``max_length`` characters.

    The cut is made at the last space inside the window. When the window has
    no usable space (none at all, or only at position 0) the word is hard cut
    at exactly ``max_length`` characters.

    Args:
        text (str): Text to be chunked
        max_length (int): Maximum size of each chunk in characters

    Returns:
        List[str]: Trimmed, non-empty chunks in source order
    """
    if not text or max_length <= 0:
        return []

    chunks: List[str] = []
    remaining = text.strip()

    while remaining:
        if len(remaining) <= max_length:
            chunks.append(remaining)
            break

        window = remaining[:max_length]
        # Only ASCII spaces count as split points, not tabs or newlines
        boundary = window.rfind(" ")
        if boundary <= 0:
            boundary = max_length

        chunks.append(remaining[:boundary].strip())
        remaining = remaining[boundary:].strip()

    logger.debug("Split %d chars with max_length=%d into %d chunks", len(text), max_length, len(chunks))
    return chunks


class TextChunker:
    """Handles splitting text into length-limited chunks."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Initialize the chunker.

        Args:
            chunk_size (int): Maximum size of each chunk in characters
        """
        self.chunk_size = chunk_size

    def chunk_text(self, text: str) -> List[str]:
        """Split text using the configured chunk size."""
        return split_text_into_chunks(text, self.chunk_size)
