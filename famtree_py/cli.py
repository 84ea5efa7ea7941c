import argparse
import logging
import os
import sys
from contextlib import contextmanager

from .config import load_config
from .errors import FamtreeError
from .pipeline import load_family
from .printer import FORMATS, render


@contextmanager
def _open_input(path: str, encoding: str):
    if path == "-":
        yield sys.stdin
    else:
        with open(path, "r", encoding=encoding) as f:
            yield f


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s: %(message)s")


def _run_report(args: argparse.Namespace) -> int:
    cfg = args.config_obj
    fmt = args.format or cfg.output_format
    if fmt not in FORMATS:
        print(f"famtree: unknown output format {fmt!r}", file=sys.stderr)
        return 2
    try:
        with _open_input(args.input, cfg.encoding) as f:
            report = render(load_family(f), fmt)
    except FamtreeError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.output == "-":
        sys.stdout.write(report)
    else:
        with open(args.output, "w", encoding=cfg.encoding) as f:
            f.write(report)
        logging.info("report written to %s", args.output)
    return 0


def _run_check(args: argparse.Namespace) -> int:
    cfg = args.config_obj
    try:
        with _open_input(args.input, cfg.encoding) as f:
            registry = load_family(f)
    except FamtreeError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"OK: {len(registry)} persons")
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    cfg = args.config_obj
    host = args.host if args.host is not None else cfg.host
    port = args.port if args.port is not None else cfg.port
    if args.config:
        # the app module loads its own config on import; point it at the same file
        os.environ["FAMTREE_CONFIG"] = args.config
    uvicorn.run("famtree_py.web.app:app", host=host, port=port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="famtree",
        description="Validate a family description and report each person's sex, parents and children",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose (debug) logging on stderr")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    report = subparsers.add_parser("report", help="Print the family report")
    report.add_argument("input", nargs="?", default="-", help="Input file or '-' for stdin (default)")
    report.add_argument("-f", "--format", choices=FORMATS, default=None, help="Output format (default from config: text)")
    report.add_argument("-o", "--output", default="-", help="Output file path or '-' for stdout")
    report.set_defaults(func=_run_report)

    check = subparsers.add_parser("check", help="Validate the input without printing the report")
    check.add_argument("input", nargs="?", default="-", help="Input file or '-' for stdin (default)")
    check.set_defaults(func=_run_check)

    serve = subparsers.add_parser("serve", help="Serve the report over HTTP")
    serve.add_argument("--host", default=None, help="Host to bind (default from config: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=None, help="Port to bind (default from config: 8000)")
    serve.set_defaults(func=_run_serve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 2
    args.config_obj = load_config(args.config)
    _configure_logging(args.config_obj.log_level, args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
