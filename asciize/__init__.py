"""Convert images into text by matching font glyphs against each row band."""

from .config import RenderConfig, ScoreMode
from .errors import InternalError, NonProgressError, ResourceError, UsageError

__version__ = "0.1.0"

__all__ = [
    "RenderConfig",
    "ScoreMode",
    "InternalError",
    "NonProgressError",
    "ResourceError",
    "UsageError",
]
