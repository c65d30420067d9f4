"""
Application package initializer.

The project is split into three layers so that each one only knows
about the layer directly beneath it:

* ``repositories`` translate book operations into SQL against SQLite;
* ``services`` enforce the business rules on incoming drafts;
* ``api`` exposes the HTTP routes and maps errors to status codes.

``core`` holds configuration, logging, the database bootstrap and the
error types shared by all layers.
"""

from .main import app, create_app  # noqa: F401
