"""
Package Protections: resolve per-package boundary rules into enforcement configuration.

Each package declares, per protection, how strictly violations are enforced.
This package validates those declarations and merges them into the single
configuration document a static-analysis tool consumes.
"""

__version__ = "0.1.0"

from .config import ConfigManager, ProtectionsConfig
from .exceptions import (
    ConfigurationError,
    DuplicateFragmentName,
    InvalidBehaviorToken,
    PackageLoadError,
    PackageProtectionsError,
    PolicyValidationError,
    ProtectionRegistrationError,
    UnknownProtectionError,
)
from .logging import get_logger, setup_logging
from .models import (
    ROOT_PACKAGE_NAME,
    CopConfig,
    CopConfigKey,
    EnforcementDocument,
    Package,
    PackageMetadataKey,
    PreconditionViolation,
    ProtectedPackage,
)
from .protections import NamespacedUnderPackageName, OutgoingDependencies, Protection, TypedPublicApi
from .registry import ProtectionRegistry, default_registry
from .resolver import PolicyResolver, resolve
from .violation_behavior import ViolationBehavior

__all__ = [
    "ConfigManager",
    "ProtectionsConfig",
    "setup_logging",
    "get_logger",
    "ViolationBehavior",
    "ROOT_PACKAGE_NAME",
    "Package",
    "PackageMetadataKey",
    "ProtectedPackage",
    "PreconditionViolation",
    "CopConfig",
    "CopConfigKey",
    "EnforcementDocument",
    "Protection",
    "NamespacedUnderPackageName",
    "OutgoingDependencies",
    "TypedPublicApi",
    "ProtectionRegistry",
    "default_registry",
    "PolicyResolver",
    "resolve",
    "PackageProtectionsError",
    "InvalidBehaviorToken",
    "PolicyValidationError",
    "DuplicateFragmentName",
    "UnknownProtectionError",
    "ProtectionRegistrationError",
    "ConfigurationError",
    "PackageLoadError",
]
