import logging
import os
import pygame
import cv2
import numpy as np
from datetime import datetime
from maze_carver import config

logger = logging.getLogger(__name__)


def default_output_file(width: int, height: int) -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    fname = f"maze_{width}x{height}_{ts}.mp4"

    if os.path.isdir("recordings"):
        return os.path.join("recordings", fname)
    return fname


def surface_to_frame(surface: pygame.Surface) -> np.ndarray:
    """pygame gives (width, height, RGB); OpenCV writes (height, width, BGR)."""
    rgb = np.ascontiguousarray(pygame.surfarray.array3d(surface).swapaxes(0, 1))
    return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)


class VideoRecorder:
    """
    Appends every displayed viewer frame to an mp4 file.
    A recorder without an output file is inactive and ignores all calls.
    """

    def __init__(self, output_file: str = None, fps: int = config.FPS):
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_count = 0

    @property
    def active(self) -> bool:
        return self.output_file is not None

    def _open_writer(self, frame: np.ndarray):
        height, width = frame.shape[:2]
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, (width, height))
        if not writer.isOpened():
            raise RuntimeError(f"Cannot open video writer for {self.output_file}")
        self.writer = writer
        logger.info(f"Recording {width}x{height} frames to {self.output_file}")

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        frame = surface_to_frame(surface)
        if self.writer is None:
            self._open_writer(frame)

        self.writer.write(frame)
        self.frame_count += 1

    def stop(self):
        if self.writer is None:
            return
        self.writer.release()
        self.writer = None
        logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
