"""Process-wide settings consumed by protections."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import ROOT_PACKAGE_NAME

DEFAULT_EXPECTED_PACKAGE_DIRECTORIES = ["packs/", "packages/", "gems/", "components/"]


def _split_list(value: Any) -> Any:
    if isinstance(value, str):
        return [token.strip() for token in value.split(",") if token.strip()]
    return value or []


class ProtectionsConfig(BaseModel):
    """Settings threaded into every precondition check and configure call.

    Read-only for the duration of a resolution run.
    """

    model_config = ConfigDict(frozen=True)

    globally_permitted_namespaces: List[str] = Field(
        default_factory=list,
        description="Namespaces any package may declare",
    )
    expected_package_directories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXPECTED_PACKAGE_DIRECTORIES),
        description="Directory prefixes namespace-enforcing packages must live under",
    )
    root_package_name: str = Field(
        default=ROOT_PACKAGE_NAME, min_length=1, description="Name of the root package"
    )
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(
        default="console", pattern="^(json|console)$", description="Log format"
    )

    @field_validator("globally_permitted_namespaces", "expected_package_directories", mode="before")
    @classmethod
    def _parse_lists(cls, value: Any) -> List[str]:
        return _split_list(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if value is None or value == "":
            value = "INFO"
        if not isinstance(value, str):
            raise ValueError(f"log_level must be a string, got {type(value).__name__}")
        level = value.upper()
        if level not in valid_levels:
            raise ValueError(f"log_level must be one of {sorted(valid_levels)}")
        return level
