"""Semantic input signals consumed by the simulation.

Keyboard, mouse and touch input are collapsed by the front-end into two
edge-triggered booleans: ``activate`` (flap / start) and ``confirm``
(start / restart after game over).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InputSignals:
    activate: bool = False
    confirm: bool = False

    def __bool__(self) -> bool:
        return self.activate or self.confirm

    def __or__(self, other: "InputSignals") -> "InputSignals":
        return InputSignals(
            activate=self.activate or other.activate,
            confirm=self.confirm or other.confirm,
        )


NO_INPUT = InputSignals()
