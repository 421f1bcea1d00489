"""Shared interface for every protection."""

from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..config.settings import ProtectionsConfig
from ..models import CopConfig, CopConfigKey, Package, ProtectedPackage
from ..violation_behavior import ViolationBehavior

__all__ = ["Protection"]


class Protection(ABC):
    """A named architectural boundary rule.

    Instances are stateless: they are built once and reused across
    resolution runs. Process-wide settings arrive through the
    ``config`` argument rather than ambient state.
    """

    default_behavior: ViolationBehavior = ViolationBehavior.FAIL_NEVER

    @property
    @abstractmethod
    def identifier(self) -> str:
        """Stable key used in package metadata and for lookups."""

    @property
    @abstractmethod
    def cop_name(self) -> str:
        """Name of the enforcement fragment this protection emits."""

    @property
    @abstractmethod
    def humanized_name(self) -> str: ...

    @property
    @abstractmethod
    def humanized_description(self) -> str: ...

    @abstractmethod
    def included_globs_for_pack(self) -> List[str]:
        """Globs, relative to a package directory, that this protection inspects."""

    @abstractmethod
    def validate_preconditions(
        self, behavior: ViolationBehavior, package: Package, config: ProtectionsConfig
    ) -> Optional[str]:
        """Return a message describing why the package's configuration is invalid.

        Must not mutate anything; returns None when the configuration is valid.
        """

    @abstractmethod
    def message_for_violation(self, file: str) -> str: ...

    def eligible_file_globs_for_package(self, package: Package) -> List[str]:
        return [posixpath.join(package.directory, glob) for glob in self.included_globs_for_pack()]

    def configure(
        self, packages: Sequence[ProtectedPackage], config: ProtectionsConfig
    ) -> List[CopConfig]:
        """Emit one fragment enabling the rule for every package not opted out."""
        include_packs: List[str] = []
        include_paths: List[str] = []
        for p in packages:
            if p.violation_behavior_for(self.identifier).is_fail_never():
                continue
            include_packs.append(p.name)
            include_paths.extend(self.eligible_file_globs_for_package(p.package))

        return [
            CopConfig(
                name=self.cop_name,
                enabled=bool(include_packs),
                metadata={
                    CopConfigKey.INCLUDE_PACKS: include_packs,
                    CopConfigKey.INCLUDE: include_paths,
                },
            )
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(identifier={self.identifier!r})"
