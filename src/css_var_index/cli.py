# src/css_var_index/cli.py
import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="css-var-index",
        description="Index CSS custom properties, find colored var() usages, and suggest names.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings .json/.json5 file (default: CSS_VAR_INDEX_SETTINGS or the packaged defaults)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--trace",
        default=None,
        metavar="TOPICS",
        help="Comma-separated trace topics (parser, registry, completion, or all)",
    )
    parser.add_argument(
        "--resolve-depth",
        type=int,
        default=None,
        dest="resolve_depth",
        help="Follow var() aliases up to N hops when resolving colors (default: off)",
    )
    parser.add_argument("--max-files", type=int, default=None, dest="max_files")

    sub = parser.add_subparsers(dest="command", required=True)

    p_index = sub.add_parser("index", help="List every indexed variable")
    p_index.add_argument("root", type=Path)

    p_usages = sub.add_parser("usages", help="List colored var() usages in a file")
    p_usages.add_argument("root", type=Path)
    p_usages.add_argument("file", type=Path)

    p_complete = sub.add_parser("complete", help="Completion candidates for text before the cursor")
    p_complete.add_argument("root", type=Path)
    p_complete.add_argument("text", help="Text immediately preceding the cursor")
    p_complete.add_argument("--rank", action="store_true", help="Narrow/rank by the typed partial")
    p_complete.add_argument("--limit", type=int, default=None)
    return parser


def _run(args: argparse.Namespace) -> object:
    from .extraction.general.utils.settings import load_settings
    from .extraction.orchestrator import index_workspace, read_unit
    from .host.completions import build_completion_items
    from .matching.completion import complete
    from .matching.ranking import rank_candidates
    from .matching.usages import find_usages

    settings = load_settings(args.config)
    settings = settings.with_overrides(resolve_depth=args.resolve_depth, max_files=args.max_files)
    registry = index_workspace(args.root, settings)

    if args.command == "index":
        return [
            {"name": d.name, "value": d.raw_value, "color": d.color, "source": d.source}
            for d in registry
        ]

    if args.command == "usages":
        text = read_unit(args.file, settings.encoding)
        if text is None:
            raise OSError(f"cannot read {args.file}")
        return [asdict(u) for u in find_usages(text, registry, max_matches=settings.max_matches)]

    result = complete(args.text, registry)
    if result is None:
        return None
    pool = list(result.candidates)
    if args.rank:
        pool = rank_candidates(result.context.partial, pool, limit=args.limit)
    elif args.limit is not None:
        pool = pool[: args.limit]
    return {
        "kind": result.context.kind.value,
        "partial": result.context.partial,
        "span": list(result.context.span),
        "items": [asdict(i) for i in build_completion_items(result.context, pool)],
    }


def main(argv=None):
    """CLI: index a directory of stylesheets and query it."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.trace:
        from .extraction.general.utils.log import enable_topics

        enable_topics(args.trace)

    try:
        out = _run(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(out, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
