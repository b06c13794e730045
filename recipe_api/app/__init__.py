"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database and error
handlers), ``schemas`` (request/response models), ``services``
(business logic over the record store) and ``api`` (versioned
routers).
"""

from .main import app  # noqa: F401
