"""Tests for the default configure behavior and the remaining built-in protections."""

import pytest

from package_protections import (
    CopConfigKey,
    OutgoingDependencies,
    ProtectedPackage,
    TypedPublicApi,
    ViolationBehavior,
)


def protect_all(packages, protection):
    return [ProtectedPackage.from_package(package, [protection]) for package in packages]


class TestDefaultConfigure:
    def test_collects_packages_not_fail_never(self, config, make_package):
        protection = TypedPublicApi()
        identifier = protection.identifier
        packages = protect_all(
            [
                make_package("packs/a", protections={identifier: "fail_on_any"}),
                make_package("packs/b", protections={identifier: "fail_never"}),
                make_package("packs/c", protections={identifier: "fail_on_new"}),
            ],
            protection,
        )

        [fragment] = protection.configure(packages, config)

        assert fragment.name == "PackageProtections/TypedPublicApi"
        assert fragment.enabled is True
        assert fragment.get(CopConfigKey.INCLUDE_PACKS) == ["packs/a", "packs/c"]
        assert fragment.get(CopConfigKey.INCLUDE) == [
            "packs/a/app/public/**/*",
            "packs/c/app/public/**/*",
        ]

    def test_disabled_when_everyone_opts_out(self, config, make_package):
        protection = TypedPublicApi()
        packages = protect_all([make_package("packs/a"), make_package("packs/b")], protection)

        [fragment] = protection.configure(packages, config)

        assert fragment.enabled is False
        assert fragment.get(CopConfigKey.INCLUDE_PACKS) == []


class TestTypedPublicApi:
    @pytest.mark.parametrize("behavior", list(ViolationBehavior))
    def test_has_no_preconditions(self, config, make_package, behavior):
        package = make_package("anywhere/a")
        assert TypedPublicApi().validate_preconditions(behavior, package, config) is None

    def test_message(self):
        assert (
            TypedPublicApi().message_for_violation("packs/a/app/public/api.rb")
            == "`packs/a/app/public/api.rb` is public API and must be typed"
        )


class TestOutgoingDependencies:
    @pytest.mark.parametrize(
        "behavior", [ViolationBehavior.FAIL_ON_NEW, ViolationBehavior.FAIL_ON_ANY]
    )
    def test_requires_enforce_dependencies(self, config, make_package, behavior):
        package = make_package("packs/a")

        message = OutgoingDependencies().validate_preconditions(behavior, package, config)

        assert message == (
            "Package packs/a must turn on `enforce_dependencies` to use "
            "`prevent_this_package_from_violating_its_stated_dependencies`."
        )

    def test_enforcing_package_is_valid(self, config, make_package):
        package = make_package("packs/a", enforce_dependencies=True)

        assert (
            OutgoingDependencies().validate_preconditions(
                ViolationBehavior.FAIL_ON_ANY, package, config
            )
            is None
        )

    @pytest.mark.parametrize(
        "behavior", [ViolationBehavior.FAIL_NEVER, ViolationBehavior.DISABLED]
    )
    def test_inactive_behaviors_skip_checks(self, config, make_package, behavior):
        package = make_package("packs/a", enforce_dependencies=False)

        assert OutgoingDependencies().validate_preconditions(behavior, package, config) is None

    def test_globs(self, make_package):
        assert OutgoingDependencies().eligible_file_globs_for_package(
            make_package(".", directory=".")
        ) == ["./app/**/*", "./lib/**/*"]
