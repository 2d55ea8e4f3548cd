"""Immediate-mode UI parts: geometry, options, commands, pools, layout, input, containers."""

__version__ = "0.1.0"