"""
Protection Registry

Holds the known protections in registration order and resolves
identifiers to their implementations.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

import structlog

from .exceptions import ProtectionRegistrationError, UnknownProtectionError
from .protections import NamespacedUnderPackageName, OutgoingDependencies, Protection, TypedPublicApi

logger = structlog.wrap_logger(logging.getLogger(__name__))

__all__ = ["ProtectionRegistry", "default_registry"]


class ProtectionRegistry:
    """Registry of protection implementations keyed by identifier."""

    def __init__(self, protections: Optional[Iterable[Protection]] = None):
        self.logger = logger.bind(component="registry")
        self._protections: Dict[str, Protection] = {}
        for protection in protections or ():
            self.register(protection)

    def register(self, protection: Protection) -> None:
        """Register a protection.

        Raises:
            ProtectionRegistrationError: If the identifier is already taken.
        """
        identifier = protection.identifier
        if identifier in self._protections:
            raise ProtectionRegistrationError(
                f"Protection {identifier} is already registered",
                details={"identifier": identifier},
            )
        self._protections[identifier] = protection
        self.logger.debug("Protection registered", identifier=identifier)

    def get(self, identifier: str) -> Protection:
        try:
            return self._protections[identifier]
        except KeyError:
            raise UnknownProtectionError(identifier) from None

    def identifiers(self) -> List[str]:
        return list(self._protections)

    def describe(self) -> List[Dict[str, Any]]:
        """Summaries of every registered protection, in registration order."""
        return [
            {
                "identifier": protection.identifier,
                "name": protection.humanized_name,
                "cop_name": protection.cop_name,
                "default_behavior": protection.default_behavior.serialize(),
                "globs": protection.included_globs_for_pack(),
            }
            for protection in self
        ]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._protections

    def __iter__(self) -> Iterator[Protection]:
        return iter(list(self._protections.values()))

    def __len__(self) -> int:
        return len(self._protections)


def default_registry() -> ProtectionRegistry:
    """Registry with every built-in protection."""
    return ProtectionRegistry(
        [
            OutgoingDependencies(),
            NamespacedUnderPackageName(),
            TypedPublicApi(),
        ]
    )
