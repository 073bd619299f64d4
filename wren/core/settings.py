from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Startup configuration for a headless Application."""

    asset_root: Path = Path("assets")
    asset_workers: int = 2
    tick_rate: float = 60.0  # ticks per second
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.asset_workers < 1:
            raise ValueError("asset_workers must be at least 1")
        if self.tick_rate <= 0:
            raise ValueError("tick_rate must be positive")

    @property
    def tick_seconds(self) -> float:
        return 1.0 / self.tick_rate
