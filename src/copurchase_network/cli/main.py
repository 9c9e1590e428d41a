from __future__ import annotations

import argparse
import sys
from pathlib import Path


def cmd_version() -> int:
    from copurchase_network import __version__

    print(__version__)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from copurchase_network.server import configure_logging, serve

    configure_logging()
    serve(host=args.host, port=args.port)
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    """Load a network document and print its statistics as JSON."""
    from copurchase_network.query_engine import NetworkQueryEngine
    from copurchase_network.store import GraphStore, LoadError

    try:
        if args.path:
            try:
                raw = Path(args.path).read_bytes()
            except OSError as e:
                raise LoadError(f"cannot read {args.path}: {e.strerror}") from e
            store = GraphStore.from_bytes(raw)
        else:
            store = GraphStore.from_bundled()
    except LoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    stats = NetworkQueryEngine(store).statistics()
    print(stats.model_dump_json(by_alias=True, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="copurchase-network")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    srv = sub.add_parser("serve", help="Serve the bundled network over HTTP")
    srv.add_argument("--host", default=None)
    srv.add_argument("--port", type=int, default=None)
    srv.set_defaults(func=cmd_serve)

    insp = sub.add_parser("inspect", help="Load a network document and print its statistics")
    insp.add_argument("--path", default=None, help="Network JSON file (defaults to the bundled dataset)")
    insp.set_defaults(func=cmd_inspect)

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


def app() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    app()
