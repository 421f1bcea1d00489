"""Configuration management for package protections."""

from .manager import ConfigManager
from .settings import DEFAULT_EXPECTED_PACKAGE_DIRECTORIES, ProtectionsConfig

__all__ = ["ConfigManager", "ProtectionsConfig", "DEFAULT_EXPECTED_PACKAGE_DIRECTORIES"]
