"""Tests for releasing cached GL textures."""

import pytest

from textures import texture_utils
from textures.frame import Frame


@pytest.fixture
def deleted(monkeypatch) -> list:
    calls: list = []
    monkeypatch.setattr(texture_utils, "glDeleteTextures", lambda ids: calls.append(list(ids)))
    monkeypatch.setattr(texture_utils, "_FRAME_CACHE", {})
    monkeypatch.setattr(texture_utils, "_TEXTURE_SIZES", {})
    return calls


class TestUnloadFrames:
    """Test unload_frames empties the cache and frees each texture once."""

    def test_deletes_every_cached_texture(self, deleted: list) -> None:
        """Test each distinct texture id is deleted in a single call."""
        texture_utils._FRAME_CACHE.update(
            {
                "a.png": Frame(texture=7, width=8, height=8, name="a.png"),
                "b.png": Frame(texture=3, width=16, height=16, name="b.png"),
            }
        )
        texture_utils._TEXTURE_SIZES.update({7: (8, 8), 3: (16, 16)})
        assert texture_utils.unload_frames() == 2
        assert deleted == [[3, 7]]
        assert texture_utils._FRAME_CACHE == {}
        assert texture_utils._TEXTURE_SIZES == {}

    def test_shared_texture_deleted_once(self, deleted: list) -> None:
        """Test two cache entries on one texture free it only once."""
        frame = Frame(texture=5, width=4, height=4, name="x.png")
        texture_utils._FRAME_CACHE.update({"x.png": frame, "./x.png": frame})
        assert texture_utils.unload_frames() == 1
        assert deleted == [[5]]

    def test_empty_cache_skips_gl(self, deleted: list) -> None:
        """Test nothing reaches GL when no frame was loaded."""
        assert texture_utils.unload_frames() == 0
        assert deleted == []
