"""Gravity timer backed by a pygame timer event"""
import pygame
from blockfall_config import CONFIG

TICK_EVENT = pygame.USEREVENT + 1

class GravityTimer:
    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.interval_ms = 0

    @property
    def running(self) -> bool:
        return self.interval_ms > 0

    def start(self, interval_ms=None):
        ms = int(CONFIG["TICK_MS"] if interval_ms is None else interval_ms)
        if ms <= 0:
            raise ValueError(f"tick interval must be positive, got {ms}")
        pygame.time.set_timer(self.event_type, ms)
        self.interval_ms = ms

    def stop(self):
        # an interval of 0 cancels the pygame timer
        pygame.time.set_timer(self.event_type, 0)
        self.interval_ms = 0
