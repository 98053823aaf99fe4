from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _split_tags(values: list[str] | None) -> set[str]:
    tags: set[str] = set()
    for value in values or []:
        tags.update(part.strip() for part in value.split(",") if part.strip())
    return tags


def load_document(path: Path):
    from adapters.dom_snapshot import load_snapshot
    from adapters.markup import load_html

    if path.suffix.lower() in (".html", ".htm"):
        return load_html(path)
    return load_snapshot(path)


def _dump(payload: list[dict], fmt: str) -> str:
    if fmt == "yaml":
        import yaml

        return yaml.safe_dump(payload, sort_keys=False)
    return json.dumps(payload, indent=2)


def main(argv: list[str] | None = None) -> int:
    _ensure_backend_on_path()

    import yaml

    from common.audit_engine import AuditConfig, RuleEvaluationError, audit, results_payload
    from common.audit_engine.config import get_audit_settings
    from common.logging import configure_logging

    settings = get_audit_settings()

    parser = argparse.ArgumentParser(
        description="Audit an HTML page or DOM snapshot against the accessibility rule catalog."
    )
    parser.add_argument("--file", required=True, type=Path, help="HTML file or JSON/YAML DOM snapshot.")
    parser.add_argument(
        "--rules",
        action="append",
        help="Rule tags to run (comma separated, repeatable). Defaults to all rules.",
    )
    parser.add_argument(
        "--skip",
        action="append",
        help="Rule tags to skip (comma separated, repeatable). Wins over --rules.",
    )
    parser.add_argument("--config", type=Path, default=settings.config_path, help="Rule config (JSON or YAML).")
    parser.add_argument("--format", choices=("json", "yaml"), default="json", help="Output format (default: json).")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level (default: INFO).")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if not args.file.exists():
        print(f"File not found: {args.file}", file=sys.stderr)
        return 2

    try:
        config = AuditConfig.from_file(args.config) if args.config else AuditConfig()
        root = load_document(args.file)
        results = audit(
            root,
            _split_tags(args.rules) or set(settings.selected_tags),
            _split_tags(args.skip) | set(settings.excluded_tags),
            config=config,
        )
    except (ValueError, OSError, yaml.YAMLError, RuleEvaluationError) as exc:
        # Exit status 1 is reserved for "rules failed".
        print(f"Audit aborted: {exc}", file=sys.stderr)
        return 2

    print(_dump(results_payload(results), args.format))
    return 1 if results else 0


if __name__ == "__main__":
    raise SystemExit(main())
