"""Kernel errors – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        ├── HandlerNotFoundError
        └── ConfigError      (mp_search.config.validation)
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError

Search itself never raises: malformed parameters degrade to no-ops.
"""

from mp_search.kernel.errors.application import ApplicationError, HandlerNotFoundError
from mp_search.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "HandlerNotFoundError",
]
