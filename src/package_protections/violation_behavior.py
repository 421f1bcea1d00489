"""Per-package strictness levels for a protection."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .exceptions import InvalidBehaviorToken

__all__ = ["ViolationBehavior"]


class ViolationBehavior(str, Enum):
    """How strictly a protection is enforced for one package.

    - DISABLED: the protection does not apply to the package
    - FAIL_NEVER: recognized, but nothing is enforced for the package
    - FAIL_ON_NEW: only violations missing from the recorded baseline fail
    - FAIL_ON_ANY: every violation fails
    """

    DISABLED = "disabled"
    FAIL_NEVER = "fail_never"
    FAIL_ON_NEW = "fail_on_new"
    FAIL_ON_ANY = "fail_on_any"

    def serialize(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: Any) -> "ViolationBehavior":
        """Parse a serialized token.

        Raises:
            InvalidBehaviorToken: If the token is not one of the known values.
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            for behavior in cls:
                if behavior.value == token:
                    return behavior
        raise InvalidBehaviorToken(token, allowed=[behavior.value for behavior in cls])

    def is_fail_never(self) -> bool:
        return self is ViolationBehavior.FAIL_NEVER

    def is_fail_on_new(self) -> bool:
        return self is ViolationBehavior.FAIL_ON_NEW

    def is_fail_on_any(self) -> bool:
        return self is ViolationBehavior.FAIL_ON_ANY

    def is_enabled(self) -> bool:
        """True for every behavior except DISABLED."""
        return self is not ViolationBehavior.DISABLED

    def __str__(self) -> str:
        return self.value
