"""
Core engine module.

Contains the demo application loop.
"""

from .app import Application, DemoTab

__all__ = ["Application", "DemoTab"]
