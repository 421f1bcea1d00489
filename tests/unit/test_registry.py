"""Tests for ProtectionRegistry."""

import pytest

from package_protections import (
    NamespacedUnderPackageName,
    ProtectionRegistrationError,
    ProtectionRegistry,
    TypedPublicApi,
    UnknownProtectionError,
    default_registry,
)


class TestProtectionRegistry:
    def test_preserves_registration_order(self):
        registry = ProtectionRegistry([TypedPublicApi(), NamespacedUnderPackageName()])

        assert registry.identifiers() == [
            TypedPublicApi.IDENTIFIER,
            NamespacedUnderPackageName.IDENTIFIER,
        ]
        assert [type(p) for p in registry] == [TypedPublicApi, NamespacedUnderPackageName]
        assert len(registry) == 2

    def test_get_resolves_identifier(self):
        registry = default_registry()

        protection = registry.get(NamespacedUnderPackageName.IDENTIFIER)

        assert isinstance(protection, NamespacedUnderPackageName)
        assert NamespacedUnderPackageName.IDENTIFIER in registry

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownProtectionError) as exc_info:
            default_registry().get("prevent_nothing")

        assert exc_info.value.identifier == "prevent_nothing"

    def test_duplicate_registration_rejected(self):
        registry = ProtectionRegistry([TypedPublicApi()])

        with pytest.raises(ProtectionRegistrationError):
            registry.register(TypedPublicApi())

    def test_default_registry_contents(self):
        summaries = default_registry().describe()

        assert [item["cop_name"] for item in summaries] == [
            "PackageProtections/StatedDependencies",
            "PackageProtections/NamespacedUnderPackageName",
            "PackageProtections/TypedPublicApi",
        ]
        assert all(item["default_behavior"] == "fail_never" for item in summaries)
