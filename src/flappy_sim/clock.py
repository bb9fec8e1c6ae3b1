"""Tick timing: the per-update clock and polled countdown timers."""

from typing import Optional


class Clock:
    """Supplies the elapsed time for each update.

    A fixed clock always reports its tick length. A variable clock reports
    the host's measured delta, clamped to ``[0, max_delta]`` so a stalled
    frame cannot produce an arbitrarily large step.
    """

    def __init__(self, fixed_delta: Optional[float] = None, max_delta: float = 0.25):
        self.fixed_delta = fixed_delta
        self.max_delta = max_delta
        self.last_delta = 0.0

    @classmethod
    def fixed(cls, delta: float) -> "Clock":
        return cls(fixed_delta=delta, max_delta=delta)

    @classmethod
    def variable(cls, max_delta: float = 0.25) -> "Clock":
        return cls(fixed_delta=None, max_delta=max_delta)

    @property
    def is_fixed(self) -> bool:
        return self.fixed_delta is not None

    def tick(self, raw_delta: Optional[float] = None) -> float:
        """Advance the clock and return the delta to simulate.

        Args:
            raw_delta: Measured seconds since the previous update. Ignored
                by a fixed clock; required by a variable one.
        """
        if self.fixed_delta is not None:
            delta = self.fixed_delta
        else:
            if raw_delta is None:
                raise ValueError("Variable clock needs a measured delta")
            delta = min(max(raw_delta, 0.0), self.max_delta)
        self.last_delta = delta
        return delta


class Timer:
    """Countdown advanced by elapsed tick time and polled for completion.

    A repeating timer wraps around on completion and counts how many times
    it finished during the last ``tick``.
    """

    def __init__(self, duration: float, repeating: bool = False):
        if duration < 0:
            raise ValueError(f"Timer duration must be >= 0, got {duration}")
        self.duration = duration
        self.repeating = repeating
        self.elapsed = 0.0
        self.times_finished = 0

    @property
    def finished(self) -> bool:
        """Whether a one-shot timer has run out."""
        return not self.repeating and self.elapsed >= self.duration

    @property
    def just_finished(self) -> bool:
        """Whether the timer completed during the last tick."""
        return self.times_finished > 0

    @property
    def remaining(self) -> float:
        return max(self.duration - self.elapsed, 0.0)

    def tick(self, delta: float) -> "Timer":
        self.times_finished = 0
        if self.repeating:
            if self.duration == 0:
                return self
            self.elapsed += delta
            while self.elapsed >= self.duration:
                self.elapsed -= self.duration
                self.times_finished += 1
        elif self.elapsed < self.duration:
            self.elapsed = min(self.elapsed + delta, self.duration)
            if self.elapsed >= self.duration:
                self.times_finished = 1
        return self

    def reset(self) -> None:
        self.elapsed = 0.0
        self.times_finished = 0
