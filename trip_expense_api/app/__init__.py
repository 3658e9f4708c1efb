"""
Application package.

Contains the application factory and its submodules: ``core``
(configuration, logging, storage, HTTP plumbing), ``schemas``,
``services`` and the ``api`` routers.
"""

from .main import app  # noqa: F401
