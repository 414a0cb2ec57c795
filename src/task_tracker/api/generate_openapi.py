"""
Utility script to generate and write the OpenAPI schema for the task API.

The schema is produced from a development-mode application so that it is
available even when the running service has docs disabled.

Usage:
    python -m task_tracker.api.generate_openapi [output_path]

The default output path is interfaces/openapi.json under the current directory.
"""
from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .main import create_app, openapi_tags
from .settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("interfaces") / "openapi.json"


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Make sure every tag in openapi_tags is present in the schema without
    overriding tag definitions that are already there.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def generate_openapi(output_path: Optional[Union[str, Path]] = None) -> Path:
    """Write the OpenAPI schema to output_path and return the written path."""
    settings = replace(get_settings(), app_env="development")
    schema = create_app(settings=settings).openapi()
    _ensure_tags(schema)

    out_path = Path(output_path) if output_path is not None else DEFAULT_OUTPUT
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    logger.info("Wrote OpenAPI schema to %s", out_path)
    return out_path


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = generate_openapi(args[0] if args else None)
    print(f"Wrote OpenAPI schema to: {path}")


if __name__ == "__main__":
    main()
