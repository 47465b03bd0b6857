#!/usr/bin/env python3
from dataclasses import dataclass
import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: str) -> int:
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ["true", "1", "yes"]


@dataclass
class Config:
    """Application configuration"""
    # Leading letter naming the substitute command
    marker: str = "s"
    # Stands in for a matched fragment inside a hit key
    sentinel: str = "!"
    # Shortest possible shape: marker, delimiter, fragment, delimiter, fragment, delimiter
    min_length: int = 5
    column_width: int = 21
    encoding: str = "utf-8"
    enable_debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment variables"""
        return cls(
            marker=os.getenv("SEDWORDS_MARKER", "s"),
            sentinel=os.getenv("SEDWORDS_SENTINEL", "!"),
            min_length=_env_int("SEDWORDS_MIN_LENGTH", "5"),
            column_width=_env_int("SEDWORDS_COLUMN_WIDTH", "21"),
            encoding=os.getenv("SEDWORDS_ENCODING", "utf-8"),
            enable_debug=_env_flag("SEDWORDS_DEBUG"),
            log_level=os.getenv("SEDWORDS_LOG_LEVEL", "WARNING").upper(),
        )

    def __post_init__(self):
        if len(self.marker) != 1:
            raise ValueError(f"marker must be a single character, got {self.marker!r}")
        if len(self.sentinel) != 1:
            raise ValueError(f"sentinel must be a single character, got {self.sentinel!r}")
        if self.min_length < 5:
            raise ValueError(f"min_length must be at least 5, got {self.min_length}")
        if self.column_width < 1:
            raise ValueError(f"column_width must be positive, got {self.column_width}")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.enable_debug else self.log_level


config = Config.from_env()
