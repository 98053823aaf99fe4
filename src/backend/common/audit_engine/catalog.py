from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .registry import RuleRegistry, default_registry


class RuleCatalogEntry(BaseModel):
    tag: str
    message: str
    reference: str = ""

    module: str
    class_name: str

    config_model: str
    config_schema: Dict[str, Any]


def build_catalog(registry: Optional[RuleRegistry] = None) -> List[RuleCatalogEntry]:
    """Catalog entries in rule execution order."""
    registry = registry or default_registry()
    entries: List[RuleCatalogEntry] = []
    for rule in registry.rules():
        cfg_model = type(rule).config_model
        entries.append(
            RuleCatalogEntry(
                tag=rule.tag,
                message=rule.message,
                reference=rule.reference,
                module=type(rule).__module__,
                class_name=type(rule).__name__,
                config_model=cfg_model.__name__,
                config_schema=cfg_model.model_json_schema(),
            )
        )
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    import yaml

    return yaml.safe_dump(catalog, sort_keys=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the accessibility rule catalog.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)

    catalog = [e.model_dump() for e in build_catalog()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
