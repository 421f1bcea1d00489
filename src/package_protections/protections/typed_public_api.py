"""Typed public API protection."""

from __future__ import annotations

from typing import List, Optional

from ..config.settings import ProtectionsConfig
from ..models import Package
from ..violation_behavior import ViolationBehavior
from .base import Protection


class TypedPublicApi(Protection):
    """Requires every file in a package's public API to carry type signatures."""

    IDENTIFIER = "prevent_this_package_from_exposing_an_untyped_api"
    COP_NAME = "PackageProtections/TypedPublicApi"

    @property
    def identifier(self) -> str:
        return self.IDENTIFIER

    @property
    def cop_name(self) -> str:
        return self.COP_NAME

    @property
    def humanized_name(self) -> str:
        return "Typed API Violations"

    @property
    def humanized_description(self) -> str:
        return (
            "These files cannot have untyped signatures because they are in the "
            "package's public API.\n"
            f"This is failing because these files are in the baseline under `{self.COP_NAME}`.\n"
        )

    def included_globs_for_pack(self) -> List[str]:
        return ["app/public/**/*"]

    def validate_preconditions(
        self, behavior: ViolationBehavior, package: Package, config: ProtectionsConfig
    ) -> Optional[str]:
        return None

    def message_for_violation(self, file: str) -> str:
        return f"`{file}` is public API and must be typed"
