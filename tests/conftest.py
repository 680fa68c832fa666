from __future__ import annotations

import pytest

from subalign.config import Settings
from subalign.utils.word_segmentation import WordSegment


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(log_dir=str(tmp_path / "logs"))


def space_segmenter(text: str) -> list[WordSegment]:
    """Whitespace-only segmenter; keeps tests independent of dictionary tokenization."""
    out: list[WordSegment] = []
    cursor = 0
    for piece in text.split():
        offset = text.index(piece, cursor)
        cursor = offset + len(piece)
        out.append(WordSegment(text=piece, is_word_like=True, offset=offset))
    return out


@pytest.fixture()
def whitespace_segmenter():
    return space_segmenter
