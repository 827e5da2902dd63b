"""Command-line interface for hclscan."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hclscan.errors import ScanError

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    exact_offsets: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="hclscan",
        description="Scan an HCL-style configuration file into tokens",
    )
    p.add_argument("input", help="Input .hcl file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--exact-offsets",
        action="store_true",
        default=None,
        help="Report true byte offsets instead of legacy-compatible ones",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover hclscan.toml)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log scanner activity to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "hclscan.toml"

    if not path.is_file():
        return {}

    logger.debug(f"Loading config from {path}")
    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
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

    # Offset mode: config < CLI
    exact_offsets = False
    cfg_scan = config.get("scan")
    if isinstance(cfg_scan, dict) and "exact_offsets" in cfg_scan:
        cfg_exact = cfg_scan["exact_offsets"]
        if not isinstance(cfg_exact, bool):
            raise argparse.ArgumentTypeError(
                f"invalid config value for scan.exact_offsets (expected true/false): {cfg_exact!r}"
            )
        exact_offsets = cfg_exact
    if args.exact_offsets is not None:
        exact_offsets = args.exact_offsets

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict) and "format" in cfg_output:
        cfg_format = cfg_output["format"]
        if cfg_format not in OUTPUT_FORMATS:
            raise argparse.ArgumentTypeError(
                f"invalid config value for output.format (expected text or json): {cfg_format!r}"
            )
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        exact_offsets=exact_offsets,
        verbose=args.verbose,
    )


def scan_file(options: CliOptions) -> str:
    """Read and scan a file, returning the formatted token listing."""
    from hclscan.debug import format_token, tokens_to_json
    from hclscan.scanner import scan

    # Undecoded read keeps \r\n intact
    source = options.input_file.read_bytes().decode("utf-8")
    tokens = scan(source, exact_offsets=options.exact_offsets)

    if options.output_format == "json":
        return tokens_to_json(tokens) + "\n"
    return "".join(format_token(t) + "\n" for t in tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        listing = scan_file(options)
    except ScanError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(listing, encoding="utf-8")
    else:
        sys.stdout.write(listing)

    return 0
