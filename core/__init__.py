"""Core infrastructure shared by the client — structured logging.

This package is client-agnostic. It must NEVER import from ``botwire/``.
"""

from core.logger import BotwireLogger

__all__ = [
    "BotwireLogger",
]
