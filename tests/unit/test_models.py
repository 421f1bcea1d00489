"""Tests for packages, protected packages and enforcement fragments."""

from pathlib import PurePosixPath

import pytest
import yaml

from package_protections import (
    CopConfig,
    CopConfigKey,
    EnforcementDocument,
    InvalidBehaviorToken,
    NamespacedUnderPackageName,
    Package,
    PackageLoadError,
    ProtectedPackage,
    TypedPublicApi,
    UnknownProtectionError,
    ViolationBehavior,
)

NAMESPACE_ID = NamespacedUnderPackageName.IDENTIFIER


class TestPackage:
    def test_directory_path_is_normalized(self):
        package = Package(name="packs/a", directory=PurePosixPath("packs/a"))
        assert package.directory == "packs/a"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            Package(name="", directory="packs/a")

    def test_package_is_immutable(self):
        package = Package(name="packs/a", directory="packs/a")
        with pytest.raises(AttributeError):
            package.name = "packs/b"  # type: ignore[misc]


class TestProtectedPackage:
    def test_declared_behaviors_are_parsed(self, registry, make_package):
        package = make_package("packs/a", behavior=ViolationBehavior.FAIL_ON_ANY)

        protected = ProtectedPackage.from_package(package, registry)

        assert protected.violation_behavior_for(NAMESPACE_ID) is ViolationBehavior.FAIL_ON_ANY
        assert protected.name == "packs/a"
        assert protected.directory == "packs/a"

    def test_missing_declarations_use_protection_default(self, registry, make_package):
        protected = ProtectedPackage.from_package(make_package("packs/a"), registry)

        for protection in registry:
            assert (
                protected.violation_behavior_for(protection.identifier)
                is protection.default_behavior
            )

    def test_invalid_token_raises_with_context(self, registry, make_package):
        package = make_package("packs/a", protections={NAMESPACE_ID: "sometimes"})

        with pytest.raises(InvalidBehaviorToken) as exc_info:
            ProtectedPackage.from_package(package, registry)

        assert exc_info.value.details["package"] == "packs/a"
        assert exc_info.value.details["identifier"] == NAMESPACE_ID

    def test_non_mapping_protections_rejected(self, registry):
        package = Package(name="packs/a", directory="packs/a", metadata={"protections": ["x"]})

        with pytest.raises(PackageLoadError):
            ProtectedPackage.from_package(package, registry)

    def test_unknown_identifiers_are_recorded(self, registry, make_package):
        package = make_package("packs/a", protections={"prevent_everything": "fail_on_any"})

        protected = ProtectedPackage.from_package(package, registry)

        assert protected.unknown_protection_identifiers == ("prevent_everything",)

    def test_unregistered_lookup_raises(self, make_package):
        protected = ProtectedPackage.from_package(make_package("packs/a"), [TypedPublicApi()])

        with pytest.raises(UnknownProtectionError):
            protected.violation_behavior_for(NAMESPACE_ID)

    def test_global_namespaces_accessor(self, registry, make_package):
        with_override = make_package("packs/a", global_namespaces=["Foo"])
        without = make_package("packs/b")

        assert ProtectedPackage.from_package(with_override, registry).global_namespaces == ["Foo"]
        assert ProtectedPackage.from_package(without, registry).global_namespaces is None


class TestCopConfig:
    def test_enum_keys_are_stored_as_strings(self):
        fragment = CopConfig(
            name="PackageProtections/Custom",
            enabled=True,
            metadata={CopConfigKey.INCLUDE_PACKS: ["packs/a"], "Custom": 1},
        )

        assert fragment.metadata == {"IncludePacks": ["packs/a"], "Custom": 1}
        assert fragment.get(CopConfigKey.INCLUDE_PACKS) == ["packs/a"]

    def test_to_dict_shape(self):
        fragment = CopConfig(name="A", enabled=False, metadata={"IncludePacks": []})
        assert fragment.to_dict() == {"A": {"Enabled": False, "IncludePacks": []}}


class TestEnforcementDocument:
    def test_merges_fragments_in_order(self):
        document = EnforcementDocument(
            fragments=[
                CopConfig(name="B", enabled=True),
                CopConfig(name="A", enabled=False),
            ]
        )

        assert list(document.to_dict()) == ["B", "A"]
        assert document.names == ["B", "A"]
        assert document.fragment("A").enabled is False
        assert document.fragment("missing") is None

    def test_yaml_round_trips(self):
        document = EnforcementDocument(
            fragments=[CopConfig(name="A", enabled=True, metadata={"IncludePacks": ["x"]})]
        )

        assert yaml.safe_load(document.to_yaml()) == {
            "A": {"Enabled": True, "IncludePacks": ["x"]}
        }
