"""Exception hierarchy for protection resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from .models import PreconditionViolation


class PackageProtectionsError(Exception):
    """Base exception for all package-protections errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}'"
            f")"
        )


class InvalidBehaviorToken(PackageProtectionsError):
    """Raised when a serialized violation behavior is not recognized."""

    def __init__(self, token: Any, allowed: Sequence[str] = ()):
        message = f"Invalid violation behavior token: {token!r}"
        if allowed:
            message += f" (expected one of {', '.join(allowed)})"
        super().__init__(
            message,
            error_code="INVALID_BEHAVIOR_TOKEN",
            details={"token": token, "allowed": list(allowed)},
        )
        self.token = token


class PolicyValidationError(PackageProtectionsError):
    """Raised when one or more packages fail protection preconditions.

    Carries every collected violation so an operator can fix all of them in
    a single pass.
    """

    def __init__(self, violations: "List[PreconditionViolation]"):
        lines = ["Package protection preconditions failed:"]
        lines.extend(f"  - {violation.message}" for violation in violations)
        super().__init__(
            "\n".join(lines),
            error_code="POLICY_VALIDATION_ERROR",
            details={"violations": [violation.to_dict() for violation in violations]},
        )
        self.violations = list(violations)

    @property
    def messages(self) -> List[str]:
        return [violation.message for violation in self.violations]


class DuplicateFragmentName(PackageProtectionsError):
    """Raised when two protections emit a fragment with the same name."""

    def __init__(self, fragment_name: str, identifiers: Sequence[str]):
        super().__init__(
            f"Enforcement fragment '{fragment_name}' emitted by more than one "
            f"protection: {', '.join(identifiers)}",
            error_code="DUPLICATE_FRAGMENT_NAME",
            details={"fragment_name": fragment_name, "identifiers": list(identifiers)},
        )
        self.fragment_name = fragment_name


class UnknownProtectionError(PackageProtectionsError):
    """Raised when an identifier does not resolve to a registered protection."""

    def __init__(self, identifier: str):
        super().__init__(
            f"Unknown protection identifier: {identifier}",
            error_code="UNKNOWN_PROTECTION",
            details={"identifier": identifier},
        )
        self.identifier = identifier


class ProtectionRegistrationError(PackageProtectionsError):
    """Raised when a protection cannot be registered."""


class ConfigurationError(PackageProtectionsError):
    """Raised for unreadable or invalid process configuration."""


class PackageLoadError(PackageProtectionsError):
    """Raised when a package manifest cannot be loaded."""
