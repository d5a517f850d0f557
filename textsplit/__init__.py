"""TextSplit - split text into word-bounded parts with a character limit.

The chunking core is a pure function; the CLI and interactive session in
``textsplit.main`` and ``textsplit.app`` render its output and copy parts to
the clipboard.
"""

from __future__ import annotations

from textsplit.chunking import TextChunker, split_text_into_chunks

__all__ = ["TextChunker", "split_text_into_chunks"]
