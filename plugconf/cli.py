from __future__ import annotations
import argparse
import sys
import uvicorn
from .api import create_app
from .constants import DEFAULT_PROPERTIES
from .extensions import merge_values, split_names
from .logging_setup import setup_logging
from .models import MergeRequest
from .properties import PropertiesLoader, PropertyResolver, ProcessOverrides, SearchPathLocator, dump_properties
from .settings import Settings


def _parse_defines(defines) -> dict:
    result = {}
    for item in defines or []:
        key, sep, value = item.partition("=")
        if not sep:
            raise SystemExit(f"Invalid -D value (expected key=value): {item!r}")
        result[key] = value
    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="plugconf")
    sub = parser.add_subparsers(dest="cmd", required=True)

    get_p = sub.add_parser("get", help="Resolve a property (overrides, store, placeholders)")
    get_p.add_argument("key")
    get_p.add_argument("--default", default=None)
    get_p.add_argument("-D", dest="defines", action="append", metavar="KEY=VALUE",
                       help="Process-level override, may be repeated")

    dump_p = sub.add_parser("dump", help="Print a loaded properties store")
    dump_p.add_argument("--file", default=None, help=f"Logical name or absolute path (default: {DEFAULT_PROPERTIES})")
    dump_p.add_argument("--multi", action="store_true", help="Merge every match on the search path")

    merge_p = sub.add_parser("merge", help="Merge a requested extension list with defaults")
    merge_p.add_argument("requested")
    merge_p.add_argument("--defaults", default="")
    merge_p.add_argument("--available", default=None,
                         help="Registered extensions; omit to treat every default as registered")

    api_p = sub.add_parser("api", help="Run REST API (FastAPI)")
    api_p.add_argument("--host", default="127.0.0.1")
    api_p.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    settings = Settings()
    setup_logging(settings)

    if args.cmd == "get":
        resolver = PropertyResolver(settings=settings, overrides=ProcessOverrides(_parse_defines(args.defines)))
        value = resolver.get(args.key, args.default)
        if value is None:
            return 1
        print(value)
        return 0

    if args.cmd == "dump":
        resolver = PropertyResolver(settings=settings)
        loader = PropertiesLoader(SearchPathLocator.from_string(settings.search_path))
        props = loader.load(args.file or resolver.properties_path(),
                            allow_multi_file=args.multi or settings.allow_multi_file,
                            allow_empty_file=True)
        sys.stdout.write(dump_properties(props))
        return 0

    if args.cmd == "merge":
        req = MergeRequest(
            requested=args.requested,
            defaults=split_names(args.defaults),
            available=split_names(args.available) if args.available is not None else None,
        )
        print(",".join(merge_values(req.requested, req.defaults, req.extension_exists)))
        return 0

    if args.cmd == "api":
        app = create_app(settings)
        uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())
        return 0

    return 2
