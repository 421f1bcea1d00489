"""Domain models for protection resolution.

Packages come from the external metadata loader and are only read here.
ProtectedPackage, CopConfig and EnforcementDocument are rebuilt on every
resolution run and never persisted.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import InvalidBehaviorToken, PackageLoadError, UnknownProtectionError
from .violation_behavior import ViolationBehavior

if TYPE_CHECKING:  # pragma: no cover
    from .protections.base import Protection

__all__ = [
    "ROOT_PACKAGE_NAME",
    "PackageMetadataKey",
    "CopConfigKey",
    "Package",
    "ProtectedPackage",
    "PreconditionViolation",
    "CopConfig",
    "EnforcementDocument",
]

ROOT_PACKAGE_NAME = "."


class PackageMetadataKey(str, Enum):
    """Keys of a package's declared metadata that protections understand."""

    PROTECTIONS = "protections"
    GLOBAL_NAMESPACES = "global_namespaces"
    ENFORCE_DEPENDENCIES = "enforce_dependencies"


class CopConfigKey(str, Enum):
    """Keys emitted into enforcement fragment metadata."""

    INCLUDE_PACKS = "IncludePacks"
    INCLUDE = "Include"
    GLOBALLY_PERMITTED_NAMESPACES = "GloballyPermittedNamespaces"


@dataclass(frozen=True)
class Package:
    """A package as described by the metadata loader."""

    name: str
    directory: str
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
        if isinstance(self.directory, PurePath):
            object.__setattr__(self, "directory", self.directory.as_posix())

    def get(self, key: PackageMetadataKey, default: Any = None) -> Any:
        return self.metadata.get(key.value, default)


@dataclass(frozen=True)
class ProtectedPackage:
    """A package together with its resolved behavior for every protection."""

    package: Package
    behaviors: Mapping[str, ViolationBehavior] = field(hash=False)
    unknown_protection_identifiers: Tuple[str, ...] = ()

    @classmethod
    def from_package(
        cls, package: Package, protections: Iterable["Protection"]
    ) -> "ProtectedPackage":
        """Resolve the package's declared behaviors against known protections.

        Identifiers the package does not mention fall back to each
        protection's default behavior.

        Raises:
            InvalidBehaviorToken: If a declared behavior cannot be parsed.
            PackageLoadError: If the declared protections are not a mapping.
        """
        declared = package.get(PackageMetadataKey.PROTECTIONS) or {}
        if not isinstance(declared, Mapping):
            raise PackageLoadError(
                f"Invalid configuration for package `{package.name}`. "
                f"`{PackageMetadataKey.PROTECTIONS.value}` must be a mapping."
            )

        behaviors: Dict[str, ViolationBehavior] = {}
        for protection in protections:
            raw = declared.get(protection.identifier)
            if raw is None:
                behaviors[protection.identifier] = protection.default_behavior
                continue
            try:
                behaviors[protection.identifier] = ViolationBehavior.parse(raw)
            except InvalidBehaviorToken as exc:
                exc.details.update(package=package.name, identifier=protection.identifier)
                raise

        unknown = tuple(str(key) for key in declared if key not in behaviors)
        return cls(package=package, behaviors=behaviors, unknown_protection_identifiers=unknown)

    def violation_behavior_for(self, identifier: str) -> ViolationBehavior:
        try:
            return self.behaviors[identifier]
        except KeyError:
            raise UnknownProtectionError(identifier) from None

    @property
    def name(self) -> str:
        return self.package.name

    @property
    def directory(self) -> str:
        return self.package.directory

    @property
    def metadata(self) -> Mapping[str, Any]:
        return self.package.metadata

    @property
    def global_namespaces(self) -> Optional[List[str]]:
        value = self.package.get(PackageMetadataKey.GLOBAL_NAMESPACES)
        return list(value) if value is not None else None


@dataclass(frozen=True)
class PreconditionViolation:
    """A package's declared configuration is invalid for one protection."""

    package_name: str
    identifier: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class CopConfig(BaseModel):
    """Enforcement fragment handed to the static-analysis tool."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Enforcement rule name")
    enabled: bool = Field(..., description="Whether the rule runs at all")
    metadata: Dict[str, Any] = Field(
        default_factory=dict, description="Rule settings keyed by CopConfigKey or raw key"
    )

    @field_validator("metadata", mode="before")
    @classmethod
    def _normalize_keys(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                (key.value if isinstance(key, Enum) else key): item
                for key, item in value.items()
            }
        return value

    def get(self, key: CopConfigKey, default: Any = None) -> Any:
        return self.metadata.get(key.value, default)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Render in the analysis tool's `{name: {Enabled: ..., ...}}` shape."""
        body: Dict[str, Any] = {"Enabled": self.enabled}
        body.update(self.metadata)
        return {self.name: body}


class EnforcementDocument(BaseModel):
    """Merged output of every protection, ordered by registration."""

    model_config = ConfigDict(frozen=True)

    fragments: List[CopConfig] = Field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [fragment.name for fragment in self.fragments]

    def fragment(self, name: str) -> Optional[CopConfig]:
        for candidate in self.fragments:
            if candidate.name == name:
                return candidate
        return None

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        merged: Dict[str, Dict[str, Any]] = {}
        for fragment in self.fragments:
            merged.update(fragment.to_dict())
        return merged

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)
