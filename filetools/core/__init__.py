"""filetools Core - Shared utilities and infrastructure.

Import specific functions from submodules:
    from filetools.core.config import ConfigManager
    from filetools.core import constants
    from filetools.core import errors
    from filetools.core import file_ops
    from filetools.core import logging
    from filetools.core import path_utils
    from filetools.core import validators
"""

# Re-export main module references for convenience
from filetools.core import (
    config,
    constants,
    errors,
    file_ops,
    logging,
    path_utils,
    validators,
)

__all__ = [
    "config",
    "constants",
    "errors",
    "file_ops",
    "logging",
    "path_utils",
    "validators",
]
