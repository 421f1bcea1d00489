"""Namespace-containment protection.

Files under a package must only declare namespaces nested under the
package's own namespace, or one of the globally permitted namespaces.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..config.settings import ProtectionsConfig
from ..models import CopConfig, CopConfigKey, Package, PackageMetadataKey, ProtectedPackage
from ..violation_behavior import ViolationBehavior
from .base import Protection

__all__ = ["NamespacedUnderPackageName"]


class NamespacedUnderPackageName(Protection):
    """Prevents a package from creating namespaces it does not own."""

    IDENTIFIER = "prevent_this_package_from_creating_other_namespaces"
    COP_NAME = "PackageProtections/NamespacedUnderPackageName"

    @property
    def identifier(self) -> str:
        return self.IDENTIFIER

    @property
    def cop_name(self) -> str:
        return self.COP_NAME

    @property
    def humanized_name(self) -> str:
        return "Multiple Namespaces Violations"

    @property
    def humanized_description(self) -> str:
        return (
            "These files cannot have ANY modules/classes that are not submodules of "
            "the package's allowed namespaces.\n"
            f"This is failing because these files are in the baseline under `{self.COP_NAME}`.\n"
            "If you want to be able to ignore these files, you'll need to open the file's "
            f"package configuration and change `{self.IDENTIFIER}` to "
            f"`{ViolationBehavior.FAIL_ON_NEW.serialize()}`.\n"
        )

    def included_globs_for_pack(self) -> List[str]:
        return ["app/**/*", "lib/**/*"]

    def validate_preconditions(
        self, behavior: ViolationBehavior, package: Package, config: ProtectionsConfig
    ) -> Optional[str]:
        if not behavior.is_enabled() and package.get(PackageMetadataKey.GLOBAL_NAMESPACES) is not None:
            return (
                f"Invalid configuration for package `{package.name}`. "
                f"`{self.identifier}` must be turned on to use "
                f"`{PackageMetadataKey.GLOBAL_NAMESPACES.value}` configuration."
            )

        if behavior.is_fail_never():
            return None

        # Other namespace checks assume enforcing packages live in a known tree.
        is_root_package = package.name == config.root_package_name
        in_allowed_directory = any(
            package.directory.startswith(expected)
            for expected in config.expected_package_directories
        )
        if is_root_package or in_allowed_directory:
            return None

        return (
            f"Package {package.name} must be located in one of "
            f"{', '.join(config.expected_package_directories)} "
            "(or be the root) to use this protection."
        )

    def configure(
        self, packages: Sequence[ProtectedPackage], config: ProtectionsConfig
    ) -> List[CopConfig]:
        """Enable the rule whenever any package opts in.

        A namespace violation is raised against the package whose namespace
        is invaded, which is not necessarily the package containing the file.
        One package opting out therefore cannot switch the rule off for the
        packages that opted in.
        """
        include_packs = [
            p.name
            for p in packages
            if not p.violation_behavior_for(self.identifier).is_fail_never()
        ]

        return [
            CopConfig(
                name=self.cop_name,
                enabled=bool(include_packs),
                metadata={
                    CopConfigKey.INCLUDE_PACKS: include_packs,
                    CopConfigKey.GLOBALLY_PERMITTED_NAMESPACES: list(
                        config.globally_permitted_namespaces
                    ),
                },
            )
        ]

    def message_for_violation(self, file: str) -> str:
        return f"`{file}` should be namespaced under the package namespace"
