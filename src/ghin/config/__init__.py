"""Configuration loading and logging setup."""

from .settings import load_config

__all__ = ['load_config']
