"""Opcodes, execution state and code analysis for an EVM interpreter."""

__version__ = "0.1.0"
__all__ = ["opcodes", "state", "analysis"]