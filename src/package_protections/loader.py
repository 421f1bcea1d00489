"""Package manifest loading.

Reads an already-discovered package list from a YAML manifest:

    packages:
      - name: packs/orders
        directory: packs/orders
        metadata:
          protections:
            prevent_this_package_from_creating_other_namespaces: fail_on_new
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

import structlog
import yaml

from .exceptions import PackageLoadError
from .models import Package

logger = structlog.wrap_logger(logging.getLogger(__name__))

__all__ = ["load_packages", "parse_packages"]


def parse_packages(data: Any, source: str = "<manifest>") -> List[Package]:
    """Build packages from parsed manifest data.

    Raises:
        PackageLoadError: If the data does not have the manifest shape.
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("packages"), list):
        raise PackageLoadError(f"Manifest {source} must contain a `packages` list")

    packages: List[Package] = []
    seen = set()
    for index, entry in enumerate(data["packages"]):
        if not isinstance(entry, Mapping):
            raise PackageLoadError(f"Manifest {source}: entry {index} must be a mapping")
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise PackageLoadError(f"Manifest {source}: entry {index} is missing a name")
        if name in seen:
            raise PackageLoadError(f"Manifest {source}: duplicate package {name}")
        directory = entry.get("directory")
        if directory is None:
            directory = name
        elif not isinstance(directory, str) or not directory:
            raise PackageLoadError(f"Manifest {source}: directory for {name} must be a non-empty string")
        metadata = entry.get("metadata") or {}
        if not isinstance(metadata, Mapping):
            raise PackageLoadError(f"Manifest {source}: metadata for {name} must be a mapping")
        seen.add(name)
        packages.append(Package(name=name, directory=directory, metadata=dict(metadata)))
    return packages


def load_packages(manifest_path: Union[str, Path]) -> List[Package]:
    """Load packages from a YAML manifest file.

    Raises:
        PackageLoadError: If the file cannot be read or parsed.
    """
    path = Path(manifest_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise PackageLoadError(f"Package manifest not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise PackageLoadError(f"Failed to read package manifest {path}: {e}") from e
    except yaml.YAMLError as e:
        raise PackageLoadError(f"Invalid YAML in package manifest {path}: {e}") from e

    packages = parse_packages(data, source=str(path))
    logger.info("Loaded package manifest", path=str(path), count=len(packages))
    return packages
