"""Dependency-direction protection."""

from __future__ import annotations

from typing import List, Optional

from ..config.settings import ProtectionsConfig
from ..models import Package, PackageMetadataKey
from ..violation_behavior import ViolationBehavior
from .base import Protection


class OutgoingDependencies(Protection):
    """Prevents a package from referencing packages it has not declared as dependencies."""

    IDENTIFIER = "prevent_this_package_from_violating_its_stated_dependencies"
    COP_NAME = "PackageProtections/StatedDependencies"

    @property
    def identifier(self) -> str:
        return self.IDENTIFIER

    @property
    def cop_name(self) -> str:
        return self.COP_NAME

    @property
    def humanized_name(self) -> str:
        return "Dependency Violations"

    @property
    def humanized_description(self) -> str:
        return (
            "To resolve these violations, should you add a dependency in the "
            "package's configuration?\n"
            "Is the code referencing the constant, and the constant itself, in the "
            "right packages?\n"
        )

    def included_globs_for_pack(self) -> List[str]:
        return ["app/**/*", "lib/**/*"]

    def validate_preconditions(
        self, behavior: ViolationBehavior, package: Package, config: ProtectionsConfig
    ) -> Optional[str]:
        if behavior.is_fail_never() or not behavior.is_enabled():
            return None
        if package.get(PackageMetadataKey.ENFORCE_DEPENDENCIES) is True:
            return None
        return (
            f"Package {package.name} must turn on "
            f"`{PackageMetadataKey.ENFORCE_DEPENDENCIES.value}` to use `{self.identifier}`."
        )

    def message_for_violation(self, file: str) -> str:
        return (
            f"`{file}` references a constant from a package that is not a stated dependency"
        )
