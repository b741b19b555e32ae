"""
Application package.

Organised by layer: ``core`` (configuration, logging, storage, errors),
``schemas`` (pydantic models), ``services`` (business rules) and
``api`` (versioned FastAPI routers).
"""

from .main import app  # noqa: F401
