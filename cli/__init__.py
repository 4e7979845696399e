"""
CLI module - interactive terminal interface
"""

from .interface import CircuitVisionCLI

__all__ = ["CircuitVisionCLI"]
