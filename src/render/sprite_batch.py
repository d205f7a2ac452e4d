"""Immediate-mode sprite batch for the isometric view.

Quads are emitted in submission order with depth testing off, so whatever is
drawn later covers what was drawn earlier. Texture binds are skipped while
consecutive draws share a texture.
"""

from __future__ import annotations

from typing import Optional

from OpenGL.GL import (
    glBegin,
    glEnd,
    glBindTexture,
    glBlendFunc,
    glColor4f,
    glDisable,
    glEnable,
    glLoadIdentity,
    glMatrixMode,
    glPopMatrix,
    glPushMatrix,
    glTexCoord2f,
    glVertex2f,
    GL_BLEND,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_QUADS,
    GL_SRC_ALPHA,
    GL_TEXTURE_2D,
)

from textures.frame import Frame


class SpriteBatch:
    def __init__(self) -> None:
        self._drawing = False
        self._bound: Optional[int] = None
        self._in_quads = False

    @property
    def drawing(self) -> bool:
        return self._drawing

    def begin(self, camera) -> None:  # pragma: no cover - visual
        if self._drawing:
            return
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        camera.apply()
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        self._bound = None
        self._drawing = True

    def draw(
        self, frame: Frame, x: float, y: float, width: float, height: float
    ) -> None:  # pragma: no cover - visual
        if not self._drawing:
            return
        if frame.texture != self._bound:
            # glBindTexture is not allowed inside glBegin/glEnd
            if self._in_quads:
                glEnd()
                self._in_quads = False
            glBindTexture(GL_TEXTURE_2D, frame.texture)
            self._bound = frame.texture
        if not self._in_quads:
            glBegin(GL_QUADS)
            self._in_quads = True

        # Texture rows are stored bottom-up, so v=0 is the sprite's feet.
        x2, y2 = x + width, y + height
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x2, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x2, y2)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y2)

    def end(self) -> None:  # pragma: no cover - visual
        if not self._drawing:
            return
        if self._in_quads:
            glEnd()
            self._in_quads = False
        glBindTexture(GL_TEXTURE_2D, 0)
        glDisable(GL_TEXTURE_2D)
        glDisable(GL_BLEND)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
        self._drawing = False
