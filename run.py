"""Cavegen CLI entry point.

Generates cave dungeon levels to stdout, sweeps seeds for structural problems,
or serves levels over HTTP. Configuration comes from flags and ``CAVEGEN_*``
environment variables (optionally loaded from a .env file); flags win.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except Exception:  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False


def _load_version() -> str:
    from cavegen import __version__ as pkg_version

    return pkg_version


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Cavegen cave dungeon generator

    Seed random noise, smooth it into caves, connect every cave and scatter the
    player, items, enemies and exit across them.
    """

    epilog = dedent(
        """
        Environment variables:
          CAVEGEN_WIDTH                 Grid width (default: 64)
          CAVEGEN_HEIGHT                Grid height (default: 64)
          CAVEGEN_FILL_PERCENT          Initial wall percentage 0-100 (default: 45)
          CAVEGEN_SMOOTHING_ITERATIONS  Automaton passes (default: 5)
          CAVEGEN_MARKERS               Comma-separated marker names (default: player,dagger,enemy,key,door)
          CAVEGEN_SEED                  Fixed seed (default: derived from the clock)
          HOST / PORT                   Bind address for `server` (default: 0.0.0.0:5000)

        Examples:
          # Print a random 64x64 level
          python run.py generate

          # Reproducible 40x30 level as JSON
          python run.py generate --seed 1234 --width 40 --height 30 --format json

          # Check a few seeds for border, connectivity and marker problems
          python run.py diagnose 1 2 3

          # Serve levels over HTTP on port 8080
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="cavegen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Cavegen {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    def add_generation_flags(p):
        p.add_argument("--width", type=int, default=None, help="Grid width (default: env or 64)")
        p.add_argument("--height", type=int, default=None, help="Grid height (default: env or 64)")
        p.add_argument("--fill", type=int, default=None, help="Initial wall percentage 0-100")
        p.add_argument("--iterations", type=int, default=None, help="Smoothing passes (>= 0)")
        p.add_argument("--markers", default=None, help="Comma-separated marker names, e.g. player,key,door")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate one level and print it",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Fixed seed (default: env or clock)")
    add_generation_flags(gen_parser)
    gen_parser.add_argument("--format", choices=("ascii", "json"), default="ascii", help="Output format")
    gen_parser.set_defaults(command="generate")

    diag_parser = subparsers.add_parser(
        "diagnose",
        help="Check structural invariants for one or more seeds",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Exit status is non-zero if any seed shows a border, connectivity or marker problem.",
    )
    diag_parser.add_argument("seeds", nargs="+", type=int, help="Seeds to check")
    add_generation_flags(diag_parser)
    diag_parser.set_defaults(command="diagnose")

    server_parser = subparsers.add_parser(
        "server",
        help="Serve generated levels over HTTP",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args([*argv, "generate"])
    return args


def _config_from_args(args, seed=None):
    from cavegen.dungeon import GeneratorConfig, parse_markers

    markers = parse_markers(args.markers) if args.markers else None
    return GeneratorConfig.from_env(
        width=args.width,
        height=args.height,
        fill_percent=args.fill,
        smoothing_iterations=args.iterations,
        markers=markers,
        seed=seed,
    )


def _error(msg: str) -> None:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
    print(f"{prefix} {msg}", file=sys.stderr)


def cmd_generate(args) -> int:
    from cavegen.dungeon import ConfigurationError, Dungeon
    from cavegen.logging_utils import log

    try:
        dungeon = Dungeon(_config_from_args(args, seed=args.seed))
    except ConfigurationError as e:
        _error(str(e))
        return 2
    if args.format == "json":
        print(json.dumps(dungeon.to_json(), indent=2))
    else:
        print(dungeon.to_ascii())
    log.generation(dungeon, source="cli", format=args.format)
    return 0


def cmd_diagnose(args) -> int:
    from cavegen.dungeon import ConfigurationError, Dungeon
    from cavegen.dungeon.checks import analyze, is_clean
    from cavegen.logging_utils import log

    results = []
    for seed in args.seeds:
        try:
            dungeon = Dungeon(_config_from_args(args, seed=seed))
        except ConfigurationError as e:
            _error(str(e))
            return 2
        report = analyze(dungeon)
        report["ok"] = is_clean(report)
        log.generation(dungeon, event="diagnose", level="info" if report["ok"] else "warn", ok=report["ok"])
        results.append(report)
    print(json.dumps({"results": results}, indent=2))
    return 0 if all(r["ok"] for r in results) else 1


def cmd_server(args) -> int:
    from cavegen.logging_utils import log
    from cavegen.server import start_server

    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = int(args.port or os.getenv("PORT", "5000"))
    debug = bool(args.debug or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    title = f"{Fore.CYAN}{Style.BRIGHT}Cavegen Level Server{Style.RESET_ALL}" if _COLOR_ENABLED else "Cavegen Level Server"

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info("listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


COMMANDS = {
    "generate": cmd_generate,
    "diagnose": cmd_diagnose,
    "server": cmd_server,
}


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()
    return COMMANDS[args.command](args)


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
