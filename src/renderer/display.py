# renderer/display.py
import os
import time
import numpy as np
import pygame
from renderer.canvas import Canvas

# Long side of the window when no explicit size is requested
MAX_WINDOW_SIZE = 1200

class DisplayError(RuntimeError):
    """Raised when the pygame window cannot be created."""

def default_window_size(render_width: int, render_height: int) -> tuple:
    """Window size with the render's aspect ratio and a long side of MAX_WINDOW_SIZE."""
    aspect_ratio = render_width / render_height
    if aspect_ratio > 1.0:
        return MAX_WINDOW_SIZE, int(MAX_WINDOW_SIZE / aspect_ratio)
    return int(MAX_WINDOW_SIZE * aspect_ratio), MAX_WINDOW_SIZE

def fit_rect(window_width: int, window_height: int,
             render_width: int, render_height: int) -> pygame.Rect:
    """
    Largest rectangle with the render's aspect ratio that fits the window,
    centered, with bars on the sides or on top and bottom.
    """
    window_aspect = window_width / window_height
    render_aspect = render_width / render_height
    if window_aspect > render_aspect:
        # Window is wider than the render: fit to height
        h = window_height
        w = int(window_height * render_aspect)
        return pygame.Rect((window_width - w) // 2, 0, w, h)
    # Window is taller than the render: fit to width
    w = window_width
    h = int(window_width / render_aspect)
    return pygame.Rect(0, (window_height - h) // 2, w, h)

class DisplayWindow:
    """
    A resizable pygame window that shows a canvas scaled to fit.

    ESC or closing the window ends the session; S saves the current canvas.
    """
    def __init__(self, render_width: int, render_height: int,
                 window_width: int = 0, window_height: int = 0,
                 title: str = "Whitted Ray Tracer"):
        self.render_width = render_width
        self.render_height = render_height
        if window_width == 0 or window_height == 0:
            window_width, window_height = default_window_size(render_width, render_height)
        self.window_width = window_width
        self.window_height = window_height
        self.canvas = None

        try:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (self.window_width, self.window_height), pygame.RESIZABLE)
        except pygame.error as e:
            pygame.quit()
            raise DisplayError(f"Window could not be created: {e}") from e
        pygame.display.set_caption(title)

    def present(self, canvas: Canvas):
        """Blits the canvas, letterboxed, and flips the display."""
        self.canvas = canvas
        # surfarray expects (width, height, 3)
        surf = pygame.surfarray.make_surface(np.transpose(canvas.to_rgb_array(), (1, 0, 2)))
        dest = fit_rect(self.window_width, self.window_height,
                        self.render_width, self.render_height)
        surf = pygame.transform.smoothscale(surf, dest.size)
        self.screen.fill((0, 0, 0))
        self.screen.blit(surf, dest.topleft)
        pygame.display.flip()

    def handle_events(self) -> bool:
        """Processes pending events. Returns False once the user asks to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_s:
                    self.save_image()
            elif event.type == pygame.VIDEORESIZE:
                self.window_width, self.window_height = event.w, event.h
        return True

    def save_image(self, directory: str = "."):
        """Saves the last presented canvas as a timestamped PNG."""
        if self.canvas is None:
            print("Nothing rendered yet, not saving")
            return None
        path = os.path.join(directory, time.strftime("render_%Y%m%d_%H%M%S.png"))
        self.canvas.save(path)
        print(f"Saved image to {path}")
        return path

    def close(self):
        pygame.quit()
