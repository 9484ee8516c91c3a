"""pathglob Core - Shared constants and validation.

Import specific names from submodules:
    from pathglob.core.constants import ErrorCode, Limits
    from pathglob.core.validators import ValidationError
"""

from pathglob.core import constants, validators

__all__ = [
    "constants",
    "validators",
]
