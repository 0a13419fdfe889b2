"""Command line interface exports."""
from .main import app

__all__ = ["app"]
