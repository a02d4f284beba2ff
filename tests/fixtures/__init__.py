"""Shared pytest fixtures."""

from .core import *  # noqa: F401,F403
from .slug import *  # noqa: F401,F403
