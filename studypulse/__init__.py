"""studypulse: research-studies analytics dashboard backend."""

from .config import Config  # noqa: F401
from .app import create_app  # noqa: F401

__all__ = ["Config", "create_app", "__version__"]
__version__ = "0.1.0"
