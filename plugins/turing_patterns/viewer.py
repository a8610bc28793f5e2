"""
Interactive Pygame Viewer for Multi-scale Turing Patterns

Steps the pattern engine once per frame and shows the result through the
current colormap. Stepping and rendering happen on the same loop thread,
render strictly after step, so the display never sees a half-updated field.

Controls:
  SPACE       Pause / Resume
  R           Randomize the field
  C           Cycle colormap
  H           Toggle HUD overlay
  S           Save screenshot
  Q / ESC     Quit
"""

import os
import time
import numpy as np
import pygame

from .simulator import PatternSimulator, get_screenshots_dir


WINDOW_TITLE = "Multi-scale Turing Patterns"
BG_COLOR = (18, 18, 24)


class Viewer:
    def __init__(self, width=640, height=480, sim_size=None,
                 start_preset="mottled", colormap=None, seed=None):
        """
        Args:
            width, height: Window canvas size in pixels
            sim_size: (w, h) simulation field size; defaults to the canvas size
            start_preset: Preset key
            colormap: Optional colormap override
            seed: Optional integer seed
        """
        self.canvas_w = width
        self.canvas_h = height
        sim_w, sim_h = sim_size or (width, height)
        self.running = True
        self.paused = False
        self.show_hud = True
        self.fps_history = []

        self.sim = PatternSimulator(start_preset, sim_w, sim_h,
                                    colormap=colormap, seed=seed)
        self.hud_font = None

    def _render_frame(self):
        rgb = self.sim.render()
        return pygame.surfarray.make_surface(rgb.swapaxes(0, 1).copy())

    def _draw_hud(self, screen, fps):
        if not self.show_hud:
            return

        stats = self.sim.engine.stats
        preset = self.sim.preset
        line = (f"{preset['name']}  |  Gen: {stats['generation']:,}  |  "
                f"Scales: {stats['scales']}  |  {self.sim.colormap_name}  |  "
                f"{self.sim.width}x{self.sim.height}  |  FPS: {fps:.0f}")
        if self.paused:
            line = "[PAUSED]  " + line

        padding = 6
        bg_height = 24
        bg_surface = pygame.Surface((self.canvas_w, bg_height), pygame.SRCALPHA)
        bg_surface.fill((0, 0, 0, 140))
        screen.blit(bg_surface, (0, 0))

        text_surface = self.hud_font.render(line, True, (210, 215, 225))
        screen.blit(text_surface, (padding + 4, padding))

    def _save_screenshot(self, screen):
        screenshots_dir = get_screenshots_dir()
        os.makedirs(screenshots_dir, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        path = os.path.join(screenshots_dir,
                            f"turing_{self.sim.preset_key}_{timestamp}.png")
        latest_path = os.path.join(screenshots_dir, "latest.png")

        save_surface = self._render_frame()
        pygame.image.save(save_surface, path)
        pygame.image.save(save_surface, latest_path)
        print(f"Screenshot saved: {path}")

    def run(self):
        """Main viewer loop."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.canvas_w, self.canvas_h))
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            self.hud_font = pygame.font.SysFont("menlo", 13)

            while self.running:
                frame_start = time.time()

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self._handle_keydown(event, screen)

                if not self.paused:
                    self.sim.step()

                screen.fill(BG_COLOR)
                sim_surface = self._render_frame()
                if sim_surface.get_size() != (self.canvas_w, self.canvas_h):
                    sim_surface = pygame.transform.smoothscale(
                        sim_surface, (self.canvas_w, self.canvas_h))
                screen.blit(sim_surface, (0, 0))

                frame_time = time.time() - frame_start
                self.fps_history.append(frame_time)
                if len(self.fps_history) > 30:
                    self.fps_history.pop(0)
                avg_fps = 1.0 / max(np.mean(self.fps_history), 0.001)

                self._draw_hud(screen, avg_fps)

                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()

    def _handle_keydown(self, event, screen):
        key = event.key

        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False

        elif key == pygame.K_SPACE:
            self.paused = not self.paused

        elif key == pygame.K_r:
            self.sim.randomize()

        elif key == pygame.K_c:
            self.sim.cycle_colormap()

        elif key == pygame.K_h:
            self.show_hud = not self.show_hud

        elif key == pygame.K_s:
            self._save_screenshot(screen)
