"""Configuration module for the KISSmetrics client.

Usage:
    from kissmetrics.core.config import KissmetricsSettings, Environment

    settings = KissmetricsSettings()
    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from kissmetrics.core.config.enums import Environment
from kissmetrics.core.config.settings import KissmetricsSettings

__all__ = [
    "Environment",
    "KissmetricsSettings",
]
