"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Storage and configuration live in ``core``, request and
response models in ``schemas``, business rules in ``services`` and the
HTTP handlers in ``api/endpoints``.
"""

from .main import app, create_app  # noqa: F401
