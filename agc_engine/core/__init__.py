"""Core AGC processing."""

from .agc_processor import AGCProcessor

__all__ = ["AGCProcessor"]
