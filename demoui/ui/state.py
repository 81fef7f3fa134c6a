from __future__ import annotations

import datetime
from dataclasses import dataclass, field

from .. import config


def _now_minute() -> datetime.datetime:
    return datetime.datetime.now().replace(second=0, microsecond=0)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def snap_to_step(value: float, lo: float, step: float) -> float:
    if step <= 0:
        return value
    return lo + round((value - lo) / step) * step


def greeting_for(name: str) -> str:
    """Alert title for the Say Hello button; an empty name greets "there"."""
    return f"Hello, {name if name else config.GREETING_FALLBACK_NAME}!"


def advanced_progress(progress: float) -> float:
    return min(1.0, progress + config.PROGRESS_STEP)


def regressed_progress(progress: float) -> float:
    return max(0.0, progress - config.PROGRESS_STEP)


@dataclass
class FormState:
    name: str = ""
    feature_enabled: bool = False
    slider_value: float = config.SLIDER_DEFAULT
    quantity: int = config.QUANTITY_DEFAULT
    selected_fruit: str = config.FRUIT_DEFAULT
    progress: float = config.PROGRESS_DEFAULT
    reminder: datetime.datetime = field(default_factory=_now_minute)
    show_alert: bool = False

    @property
    def greeting(self) -> str:
        return greeting_for(self.name)

    @property
    def quantity_text(self) -> str:
        return f"Quantity: {self.quantity}"

    @property
    def progress_percent(self) -> int:
        return int(round(self.progress * config.PROGRESS_BAR_SCALE))
