"""Policy resolution: turn per-package declarations into one enforcement document.

Resolution is a pure, synchronous pass over in-memory packages. Every run
builds fresh ProtectedPackage values, so a resolver can be shared freely.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

import structlog

from .config.settings import ProtectionsConfig
from .exceptions import DuplicateFragmentName, PolicyValidationError
from .models import CopConfig, EnforcementDocument, Package, PackageMetadataKey, PreconditionViolation, ProtectedPackage
from .registry import ProtectionRegistry, default_registry

logger = structlog.wrap_logger(logging.getLogger(__name__))

__all__ = ["PolicyResolver", "resolve"]


class PolicyResolver:
    """Validates package configuration and merges protection fragments."""

    def __init__(
        self,
        registry: Optional[ProtectionRegistry] = None,
        config: Optional[ProtectionsConfig] = None,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.config = config if config is not None else ProtectionsConfig()

    def protect(self, packages: Sequence[Package]) -> List[ProtectedPackage]:
        """Attach resolved behaviors to every package.

        Raises:
            InvalidBehaviorToken: If any declared behavior cannot be parsed.
        """
        return [ProtectedPackage.from_package(package, self.registry) for package in packages]

    def collect_violations(
        self, protected_packages: Sequence[ProtectedPackage]
    ) -> List[PreconditionViolation]:
        """Check every (package, protection) pair.

        Ordered by package input order, then protection registration order.
        """
        violations: List[PreconditionViolation] = []
        for protected in protected_packages:
            if protected.unknown_protection_identifiers:
                violations.append(
                    PreconditionViolation(
                        package_name=protected.name,
                        identifier=PackageMetadataKey.PROTECTIONS.value,
                        message=(
                            f"Invalid configuration for package `{protected.name}`. "
                            "Unknown protection identifier(s): "
                            f"{', '.join(protected.unknown_protection_identifiers)}."
                        ),
                    )
                )
            for protection in self.registry:
                message = protection.validate_preconditions(
                    protected.violation_behavior_for(protection.identifier),
                    protected.package,
                    self.config,
                )
                if message is not None:
                    violations.append(
                        PreconditionViolation(
                            package_name=protected.name,
                            identifier=protection.identifier,
                            message=message,
                        )
                    )
        return violations

    def validate(self, packages: Sequence[Package]) -> List[PreconditionViolation]:
        """Return every precondition violation without generating configuration."""
        return self.collect_violations(self.protect(packages))

    def resolve(self, packages: Sequence[Package]) -> EnforcementDocument:
        """Validate all packages, then merge every protection's fragments.

        Raises:
            InvalidBehaviorToken: If a declared behavior cannot be parsed.
            PolicyValidationError: If any precondition fails; carries all of them.
            DuplicateFragmentName: If two protections emit the same fragment name.
        """
        log = logger.bind(package_count=len(packages), protection_count=len(self.registry))
        log.info("Resolving package protections")

        protected_packages = self.protect(packages)
        violations = self.collect_violations(protected_packages)
        if violations:
            log.warning("Package protection preconditions failed", violation_count=len(violations))
            raise PolicyValidationError(violations)

        fragments: List[CopConfig] = []
        owners: Dict[str, str] = {}
        for protection in self.registry:
            for fragment in protection.configure(protected_packages, self.config):
                if fragment.name in owners:
                    raise DuplicateFragmentName(
                        fragment.name, [owners[fragment.name], protection.identifier]
                    )
                owners[fragment.name] = protection.identifier
                fragments.append(fragment)

        log.info(
            "Package protections resolved",
            fragment_count=len(fragments),
            enabled_count=sum(1 for fragment in fragments if fragment.enabled),
        )
        return EnforcementDocument(fragments=fragments)


def resolve(
    packages: Sequence[Package],
    registry: Optional[ProtectionRegistry] = None,
    config: Optional[ProtectionsConfig] = None,
) -> EnforcementDocument:
    """Resolve packages against a registry in one call."""
    return PolicyResolver(registry=registry, config=config).resolve(packages)
