"""commitsign - Resolve and run git commit signing from layered git configuration."""

__version__ = "0.1.0"
__author__ = "commitsign Contributors"

from commitsign.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
