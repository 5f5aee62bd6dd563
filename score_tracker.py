import logging

logger = logging.getLogger(__name__)

MULTIPLIER_DURATION = 5.0  # seconds a bonus multiplier stays in effect
POINTS_PER_SECOND = 15
SECONDS_PER_POINT = 1 / POINTS_PER_SECOND
DEFAULT_MULTIPLIER = 2


class ScoreTracker:
    """
    Running score plus a time-limited score multiplier.

    Drive it with update(delta_time) once per frame. While active, the
    score grows by one point every SECONDS_PER_POINT (scaled by the
    current multiplier).
    """

    def __init__(self):
        self._score = 0
        self._multiplier = 1
        self.active = False
        self._has_multiplier = False
        self._multiplier_remaining = 0.0
        self._accumulated_time = 0.0

    @property
    def score(self) -> int:
        return self._score

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def has_multiplier(self) -> bool:
        return self._has_multiplier

    @property
    def multiplier_remaining(self) -> float:
        return self._multiplier_remaining

    @property
    def accumulated_time(self) -> float:
        return self._accumulated_time

    def reset(self):
        """Back to the freshly constructed state, ready for a new session."""
        self._score = 0
        self._accumulated_time = 0.0
        self.active = False
        self.reset_multiplier()

    def set_active(self, active: bool):
        self.active = active

    def add_score(self, delta: int):
        """
        Add delta points, scaled by the current multiplier.

        Applies whether or not the tracker is active. Negative deltas are
        not rejected.
        """
        self._score += delta * self._multiplier

    def update(self, delta_time: float):
        """
        Advance the tracker by one frame.

        Args:
            delta_time: Seconds elapsed since the previous frame
        """
        if not self.active:
            return

        self._accumulated_time += delta_time
        # At most one point per frame; any surplus carries to later frames
        if self._accumulated_time >= SECONDS_PER_POINT:
            self.add_score(1)
            self._accumulated_time -= SECONDS_PER_POINT

        self._tick_multiplier(delta_time)

    def _tick_multiplier(self, delta_time: float):
        if not self._has_multiplier:
            return
        # Expiry is noticed one frame after the timer runs out
        if self._multiplier_remaining > 0:
            self._multiplier_remaining -= delta_time
        else:
            logger.debug(f"Multiplier x{self._multiplier} expired")
            self.reset_multiplier()

    def set_multiplier(self, value: int = DEFAULT_MULTIPLIER):
        """
        Apply a multiplier for MULTIPLIER_DURATION seconds.

        Replaces any multiplier already running and restarts its timer.

        Args:
            value: Factor applied to every score increment (default: 2)
        """
        self._multiplier = value
        self._multiplier_remaining = MULTIPLIER_DURATION
        self._has_multiplier = True
        logger.debug(f"Multiplier x{value} applied for {MULTIPLIER_DURATION}s")

    def reset_multiplier(self):
        self._multiplier = 1
        self._multiplier_remaining = 0.0
        self._has_multiplier = False

    def __repr__(self):
        return (
            f"ScoreTracker(score={self._score}, multiplier={self._multiplier}, "
            f"active={self.active}, multiplier_remaining={self._multiplier_remaining:.2f})"
        )
