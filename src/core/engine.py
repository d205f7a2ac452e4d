"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up window, GL state, main loop, input polling.
- Scene: holds world state & update/draw logic.

Each frame the engine builds one input snapshot, updates the scene with it,
then renders. Update always finishes before render starts.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame
from OpenGL.GL import (
    glDisable,
    glClearColor,
    GL_DEPTH_TEST,
    GL_CULL_FACE,
)

from config import *
from core.input import KeyboardInput
from core.scene import Scene
from core.settings import GameSettings
from textures.texture_utils import unload_frames

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, settings: Optional[GameSettings] = None, scene: Optional[Scene] = None):
        pygame.init()
        pygame.display.set_caption("Isometric World")
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except pygame.error:
            # vsync requested but unavailable on this system/driver
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # Draw order alone decides occlusion
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)
        glClearColor(*CLEAR_COLOR)

        self.input = KeyboardInput()
        if scene is None:
            # Needs the GL context above for texture upload
            from world.worldscene import WorldScene

            scene = WorldScene(settings)
        self.scene = scene
        logger.info("Engine started (%dx%d, vsync=%s)", WIDTH, HEIGHT, VSYNC)

    # ------------------------------------------------------------------
    def handle_events(self, dt: float) -> bool:
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.scene.handle_event(event)
        self.scene.update(dt, self.input.poll(events))
        return True

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.scene.render()
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        try:
            while running:
                # Uncapped when vsync is off; otherwise FPS is a safety net
                if not VSYNC:
                    dt = self.clock.tick() / 1000.0
                else:
                    dt = self.clock.tick(FPS) / 1000.0
                running = self.handle_events(dt)
                if not running:
                    break
                self.render()
        finally:
            logger.info("Engine stopped")
            unload_frames()
            pygame.quit()
