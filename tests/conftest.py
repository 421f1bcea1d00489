"""Shared fixtures for package-protections tests."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import pytest

from package_protections import (
    NamespacedUnderPackageName,
    Package,
    ProtectionsConfig,
    PolicyResolver,
    ViolationBehavior,
    default_registry,
)

NAMESPACE_ID = NamespacedUnderPackageName.IDENTIFIER


@pytest.fixture
def config() -> ProtectionsConfig:
    """Config with a single allowed package root, as used across scenarios."""
    return ProtectionsConfig(
        expected_package_directories=["packs/"],
        globally_permitted_namespaces=["Shared"],
    )


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def resolver(registry, config) -> PolicyResolver:
    return PolicyResolver(registry=registry, config=config)


@pytest.fixture
def make_package() -> Callable[..., Package]:
    """Build a package whose namespace behavior is set through metadata."""

    def _make(
        name: str,
        directory: Optional[str] = None,
        behavior: Optional[ViolationBehavior] = None,
        protections: Optional[Dict[str, str]] = None,
        **metadata: Any,
    ) -> Package:
        declared = dict(protections or {})
        if behavior is not None:
            declared[NAMESPACE_ID] = behavior.serialize()
        if declared:
            metadata["protections"] = declared
        return Package(name=name, directory=directory or name, metadata=metadata)

    return _make
