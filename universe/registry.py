from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml


def _normalize_module(data: Dict[str, Any], *, path: Path) -> Dict[str, Any]:
    name = data["name"]
    slug = data.get("slug") or name.replace("_", "-")
    mount = data.get("mount") or f"/{slug}"
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": name,
            "slug": slug,
            "mount": mount,
            "public": bool(public),
            "path": path,
        }
    )
    return normalized


def load_module_manifest(module_dir: Path) -> Dict[str, Any]:
    """Read ``module.yaml`` from a module directory.

    Missing or nameless manifests fall back to the directory name.
    """
    manifest = module_dir / "module.yaml"
    data: Dict[str, Any] = {}
    if manifest.exists():
        with open(manifest, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    if not data.get("name"):
        data["name"] = module_dir.name
    return _normalize_module(data, path=module_dir)

