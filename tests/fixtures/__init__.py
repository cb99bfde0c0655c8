"""Shared pytest fixtures and helpers for product store tests."""

from .core import *  # noqa: F401,F403
