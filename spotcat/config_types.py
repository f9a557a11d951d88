"""Typed configuration dataclasses for spotify-catalog.

Provides strongly-typed configuration objects for the CLI and for callers
that build a :class:`~spotcat.client.Client` from settings. The library core
never reads configuration on its own.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any


@dataclass
class ApiConfig:
    """Web API transport settings."""
    base_url: str = "https://api.spotify.com/v1/"
    token: str | None = None
    timeout: float | None = 30.0
    market_fallback: str | None = "US"  # None/"" disables the artist-albums market fallback

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class ErrorEnvelopeConfig:
    """Key names of the service's error body."""
    error_key: str = "error"
    status_key: str = "status"
    message_key: str = "message"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class AppConfig:
    """Root configuration with all subsections."""
    log_level: str = "INFO"
    api: ApiConfig = field(default_factory=ApiConfig)
    errors: ErrorEnvelopeConfig = field(default_factory=ErrorEnvelopeConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary matching the config format."""
        return {
            "log_level": self.log_level,
            "api": self.api.to_dict(),
            "errors": self.errors.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            api=ApiConfig(**data.get("api", {})),
            errors=ErrorEnvelopeConfig(**data.get("errors", {})),
        )


__all__ = [
    "AppConfig",
    "ApiConfig",
    "ErrorEnvelopeConfig",
]
