# main.py

import logging
import time

import pygame

import constants
import logger_setup
from canvas import Canvas
from settings import load_settings
from simulation import Simulation

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)


class FrameTimer:
    """
    Measures wall-clock time between frames.
    The first call to elapsed() returns 0.0 so the first frame emits nothing.
    """
    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self.last = None

    def elapsed(self) -> float:
        now = self.clock()
        dt = 0.0 if self.last is None else now - self.last
        self.last = now
        return dt


class StopToken:
    """Set by whoever tears the animation down; checked by the loop once per frame."""
    def __init__(self):
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def request_stop(self):
        self._stopped = True


def handle_events(simulation: Simulation, stop_token: StopToken):
    """Pumps pygame's event queue: quit/escape stop the loop, window resizes reach the simulation."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            stop_token.request_stop()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            stop_token.request_stop()
        elif event.type == pygame.VIDEORESIZE:
            simulation.resize(event.w, event.h)


def run(simulation: Simulation, screen: pygame.Surface, stop_token: StopToken,
        fps: int = constants.FPS, max_frames: int = None, timer: FrameTimer = None) -> int:
    """
    The frame loop. Calls simulation.tick() once per display frame until the
    stop token is set or max_frames have been rendered.

    Data Contract:
    - Inputs:
        - simulation (Simulation): The animation to drive.
        - screen (pygame.Surface): The display surface.
        - stop_token (StopToken): External cancellation.
        - fps (int): Frame rate cap.
        - max_frames (int, optional): Frame limit, mainly for headless runs.
        - timer (FrameTimer, optional): Source of per-frame dt.
    - Outputs: Number of frames rendered.
    """
    clock = pygame.time.Clock()
    timer = timer or FrameTimer()
    frames = 0

    while not stop_token.stopped and (max_frames is None or frames < max_frames):
        handle_events(simulation, stop_token)
        if stop_token.stopped:
            break

        simulation.tick(timer.elapsed())

        screen.fill(constants.BACKGROUND)
        simulation.canvas.blit_to(screen)
        pygame.display.flip()
        clock.tick(fps)
        frames += 1

    return frames


def main():
    """
    Main function to initialize and run the heart animation.
    """
    # --- Setup ---
    logger_setup.setup_logging()
    settings = load_settings()

    logger.info("Application starting...")

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)

    canvas = Canvas(constants.WIDTH, constants.HEIGHT)
    simulation = Simulation(settings, canvas)

    # --- Run ---
    stop_token = StopToken()
    try:
        frames = run(simulation, screen, stop_token)
        logger.info(f"Rendered {frames} frames.")
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        logger.info("Application shutting down.")
        pygame.quit()

if __name__ == "__main__":
    main()
