"""
Top level package for the Developer Social Groups API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
