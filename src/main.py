# main.py
import argparse
import logging
import sys
import threading
import time
import pygame
from geometry.scenes import SCENES
from geometry.world import Scene
from renderer.canvas import Canvas
from renderer.display import DisplayWindow
from renderer.raytracer import MAX_DEPTH, RayTracer, render_parallel

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
REFRESH_MS = 16

class Application:
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 scene_name: str = "classic", workers: int = 1,
                 output: str = None, show_window: bool = True):
        self.render_width = width
        self.render_height = height
        self.workers = workers
        self.output = output
        self.show_window = show_window

        self.scene = self.create_world(scene_name)
        self.canvas = Canvas(width, height)
        self.tracer = RayTracer(max_depth=MAX_DEPTH)
        self.render_time = None
        self.render_error = None

    def create_world(self, scene_name: str) -> Scene:
        print("\n=== Creating World ===")
        scene = SCENES[scene_name]()
        print(f"Scene: {scene_name}")
        print(f"Camera position: {scene.camera.position}")
        print(f"Camera forward: {scene.camera.forward}")
        print(f"Things: {len(scene.things)}, lights: {len(scene.lights)}")
        return scene

    def render(self):
        """Renders the scene into the canvas and records the elapsed time."""
        start_time = time.perf_counter()
        render_parallel(self.tracer, self.scene, self.canvas,
                        self.render_width, self.render_height, self.workers)
        self.render_time = time.perf_counter() - start_time
        print(f"Rendering completed in {self.render_time * 1000:.0f}ms")

    def _render_in_background(self):
        # Errors are handed back to the main thread, which re-raises them.
        try:
            self.render()
        except Exception as e:
            self.render_error = e

    def run(self) -> int:
        print(f"Rendering {self.render_width}x{self.render_height} image...")
        if not self.show_window:
            self.render()
            self.save_output()
            return 0

        print("Controls:")
        print("  ESC - Exit")
        print("  S - Save image")
        print("  Window is resizable - try resizing it!")
        print()

        window = DisplayWindow(self.render_width, self.render_height)
        try:
            # Render on a background thread while the window shows progress
            render_thread = threading.Thread(target=self._render_in_background, daemon=True)
            render_thread.start()

            clock = pygame.time.Clock()
            running = True
            while running and render_thread.is_alive():
                running = window.handle_events()
                window.present(self.canvas)
                clock.tick(1000 // REFRESH_MS)

            render_thread.join()
            window.present(self.canvas)
            if self.render_error is not None:
                raise self.render_error
            self.save_output()

            print("Rendering complete! Press ESC to exit.")
            while running:
                running = window.handle_events()
                window.present(self.canvas)
                clock.tick(1000 // REFRESH_MS)
        finally:
            print("Cleaning up...")
            window.close()
        return 0

    def save_output(self):
        if self.output:
            self.canvas.save(self.output)
            print(f"Saved image to {self.output}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recursive Whitted-style ray tracer")
    parser.add_argument("width", nargs="?", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("height", nargs="?", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--scene", choices=sorted(SCENES), default="classic")
    parser.add_argument("--workers", type=int, default=1,
                        help="render threads (rows are split between them)")
    parser.add_argument("--output", "-o", help="write the finished image to this file")
    parser.add_argument("--no-window", action="store_true",
                        help="render without opening a window")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    print("Whitted Ray Tracer")
    try:
        app = Application(args.width, args.height, args.scene, args.workers,
                          args.output, show_window=not args.no_window)
        return app.run()
    except Exception as e:
        print(f"Error: {e}")
        logging.getLogger(__name__).debug("Unhandled error", exc_info=True)
        return 1

if __name__ == "__main__":
    sys.exit(main())
