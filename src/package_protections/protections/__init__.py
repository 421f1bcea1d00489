"""Built-in protections."""

from .base import Protection
from .namespaced_under_package_name import NamespacedUnderPackageName
from .outgoing_dependencies import OutgoingDependencies
from .typed_public_api import TypedPublicApi

__all__ = [
    "Protection",
    "NamespacedUnderPackageName",
    "OutgoingDependencies",
    "TypedPublicApi",
]
