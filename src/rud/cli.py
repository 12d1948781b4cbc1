"""Command-line interface for Rud."""

from __future__ import annotations

import argparse
import logging
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rud.errors import RudError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    log_level: str
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="rud",
        description="Translate Rud source to Rust",
    )
    p.add_argument("input", help="Input .rud file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover rud.toml)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        metavar="LEVEL",
        help="Logging level: debug, info, warning, error (default: warning)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and recompile")
    p.add_argument("--debug", action="store_true", help="Dump tokens and AST to stderr")
    return p


def parse_log_level(s: str) -> str:
    """Validate and normalize a log level name."""
    level = s.strip().lower()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid log level (expected one of {', '.join(LOG_LEVELS)}): {s}"
        )
    return level


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "rud.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Output file: config < CLI; config paths are relative to the input file
    output_file: Path | None = None
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_file = cfg_output.get("file")
        if isinstance(cfg_file, str):
            output_file = input_dir / cfg_file
    if args.output:
        output_file = Path(args.output)

    # Log level: config < CLI
    log_level = "warning"
    cfg_log = config.get("log")
    if isinstance(cfg_log, dict):
        cfg_level = cfg_log.get("level")
        if isinstance(cfg_level, str):
            log_level = parse_log_level(cfg_level)
    if args.log_level is not None:
        log_level = parse_log_level(args.log_level)

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        log_level=log_level,
        watch=args.watch,
        debug=args.debug,
    )


def compile_file(options: CliOptions) -> str:
    """Read, tokenize, parse, and render a Rud file to Rust."""
    from rud.debug import dump_ast, dump_tokens
    from rud.lexer import tokenize
    from rud.parser import parse
    from rud.render import render

    source = options.input_file.read_text(encoding="utf-8")

    if options.debug:
        dump_tokens(tokenize(source, str(options.input_file)), file=sys.stderr)

    nodes = parse(source, str(options.input_file))

    if options.debug:
        dump_ast(nodes, file=sys.stderr)

    return render(nodes)


def write_output(options: CliOptions, code: str) -> None:
    if options.output_file:
        options.output_file.write_text(code + "\n", encoding="utf-8")
        logger.info("wrote %s", options.output_file)
    else:
        sys.stdout.write(code + "\n")
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, recompile on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    write_output(options, compile_file(options))
                    print(f"Compiled {options.input_file}", file=sys.stderr)
                except RudError as exc:
                    print(exc.format(str(options.input_file)), file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(level=options.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if options.watch:
        watch_loop(options)
        return 0

    try:
        code = compile_file(options)
    except RudError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    write_output(options, code)
    return 0
