"""Texture loading utilities for OpenGL.

Loaded images are cached as Frames keyed by path so each file is uploaded
once; `unload_frames` deletes every cached texture before the context goes.
Unlike a fallback-texture loader, a missing or unreadable file raises
`AssetError`: sprites are loaded at construction, never mid-frame.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Tuple

import pygame
from OpenGL.GL import (
    glGenTextures,
    glDeleteTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_NEAREST,
    GL_CLAMP_TO_EDGE,
)

from core.errors import AssetError
from textures.frame import Frame

logger = logging.getLogger(__name__)

_TEXTURE_SIZES: Dict[int, Tuple[int, int]] = {}
_FRAME_CACHE: Dict[str, Frame] = {}


def load_texture(filename: str) -> int:
    """Load a texture from an image file.

    Parameters
    ----------
    filename : str
        Path to the image file

    Returns
    -------
    int
        OpenGL texture ID

    Raises
    ------
    AssetError
        If the file is missing or pygame cannot decode it.
    """
    if not os.path.exists(filename):
        raise AssetError(filename)
    try:
        surface = pygame.image.load(filename)
    except pygame.error as e:
        raise AssetError(filename, f"cannot decode: {e}") from e

    surface = surface.convert_alpha()

    # Flipped so texture row 0 is the image bottom (y-up view).
    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )

    # Nearest keeps pixel art crisp; clamp prevents sprite seams
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    _TEXTURE_SIZES[int(texture_id)] = (int(width), int(height))
    logger.debug("Loaded texture %s (id=%s, %dx%d)", filename, texture_id, width, height)
    return int(texture_id)


def load_frame(filename: str) -> Frame:
    """Load (or reuse) an image as a drawable Frame."""
    frame = _FRAME_CACHE.get(filename)
    if frame is not None:
        return frame
    tex_id = load_texture(filename)
    width, height = _TEXTURE_SIZES[tex_id]
    frame = Frame(texture=tex_id, width=width, height=height, name=filename)
    _FRAME_CACHE[filename] = frame
    return frame


def unload_frames() -> int:
    """Delete every cached texture and forget the cached frames.

    Must run while the GL context is still alive. Returns the number of
    textures released.
    """
    tex_ids = sorted({frame.texture for frame in _FRAME_CACHE.values()})
    if tex_ids:
        glDeleteTextures(tex_ids)
    for tex_id in tex_ids:
        _TEXTURE_SIZES.pop(tex_id, None)
    _FRAME_CACHE.clear()
    logger.debug("Released %d textures", len(tex_ids))
    return len(tex_ids)
