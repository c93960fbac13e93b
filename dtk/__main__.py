# -*- coding: utf-8 -*-
"""
DTK CLI - Headless access to every DTK tool.

Usage::

    python -m dtk tools sys
    python -m dtk base64 encode "Hello World"
    python -m dtk base64 decode SGVsbG8gV29ybGQ=
    python -m dtk distance 40.7128 -74.0060 34.0522 -118.2437
    python -m dtk capacity --dau 1000000 --ratio 10:1 --payload 1024
    echo '{"a": 1}' | python -m dtk json format -

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dtk.core import capacity, codec, geo
from dtk.core.config import DtkConfig, load_config
from dtk.core.digest import HashAlgorithm, hash_text
from dtk.core.identifiers import generate_ulids, generate_uuids
from dtk.core.jsonfmt import format_json, minify_json
from dtk.core.registry import search_tools
from dtk.report import capacity_summary, distance_summary, tool_listing

_log = logging.getLogger("dtk.cli")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dtk",
        description="DTK - Developer toolkit: codecs, digests, IDs and calculators.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON config file (default: ~/.dtk/dtk_config.json).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("tools", help="List tools, optionally filtered.")
    p.add_argument("query", nargs="?", default="", help="Name or category filter.")

    p = sub.add_parser("base64", help="Base64 encode or decode.")
    p.add_argument("action", choices=["encode", "decode"])
    p.add_argument("text", help="Input text, or '-' for stdin.")
    p.add_argument(
        "--bytes",
        action="store_true",
        dest="raw_bytes",
        help="Decode: write raw bytes instead of UTF-8 text.",
    )

    p = sub.add_parser("url", help="URL (form) encode or decode.")
    p.add_argument("action", choices=["encode", "decode"])
    p.add_argument("text", help="Input text, or '-' for stdin.")

    p = sub.add_parser("hash", help="Digest text with MD5, SHA-256 or SHA-512.")
    p.add_argument("text", help="Input text, or '-' for stdin.")
    p.add_argument(
        "--algorithm", "-a",
        default=None,
        help="md5, sha256 or sha512 (default from config).",
    )

    p = sub.add_parser("uuid", help="Generate random UUIDs.")
    p.add_argument(
        "--count", "-n",
        type=int,
        default=None,
        help="Number of UUIDs (default from config).",
    )

    p = sub.add_parser("ulid", help="Generate time-ordered ULIDs.")
    p.add_argument(
        "--count", "-n",
        type=int,
        default=None,
        help="Number of ULIDs (default from config).",
    )

    p = sub.add_parser("json", help="Pretty-print or minify JSON.")
    p.add_argument("action", choices=["format", "minify"])
    p.add_argument("text", help="JSON document, or '-' for stdin.")

    p = sub.add_parser("distance", help="Haversine distance between two points.")
    p.add_argument("lat1")
    p.add_argument("lon1")
    p.add_argument("lat2")
    p.add_argument("lon2")

    p = sub.add_parser("capacity", help="Back-of-the-envelope capacity estimate.")
    p.add_argument("--dau", required=True, help="Daily active users.")
    p.add_argument("--ratio", required=True, help="Read:write ratio, e.g. 10:1.")
    p.add_argument(
        "--payload",
        required=True,
        help="Size of one written record in bytes.",
    )

    return parser


def _read_text(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _configure_logging(level: str, log_file: Optional[Path]) -> None:
    handlers: list = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def _run(args: argparse.Namespace, cfg: DtkConfig) -> str:
    """Dispatch one subcommand and return its output text."""
    if args.command == "tools":
        return tool_listing(search_tools(args.query))

    if args.command == "base64":
        text = _read_text(args.text)
        if args.action == "encode":
            return codec.encode(text)
        if args.raw_bytes:
            sys.stdout.buffer.write(codec.decode(text.strip(), as_text=False))
            sys.stdout.flush()
            return ""
        return codec.decode(text.strip())

    if args.command == "url":
        text = _read_text(args.text)
        if args.action == "encode":
            return codec.url_encode(text)
        return codec.url_decode(text)

    if args.command == "hash":
        algorithm = HashAlgorithm.from_name(args.algorithm or cfg.hash_algorithm)
        return hash_text(_read_text(args.text), algorithm)

    if args.command == "uuid":
        count = args.count if args.count is not None else cfg.uuid_count
        return "\n".join(generate_uuids(count))

    if args.command == "ulid":
        count = args.count if args.count is not None else cfg.uuid_count
        return "\n".join(generate_ulids(count))

    if args.command == "json":
        text = _read_text(args.text)
        if args.action == "format":
            return format_json(text, indent=cfg.json_indent)
        return minify_json(text)

    if args.command == "distance":
        point1 = geo.parse_coordinate(args.lat1, args.lon1)
        point2 = geo.parse_coordinate(args.lat2, args.lon2)
        return distance_summary(
            geo.distance(point1, point2), cfg.distance_decimals
        )

    if args.command == "capacity":
        inputs = capacity.parse_inputs(args.dau, args.ratio, args.payload)
        return capacity_summary(capacity.estimate(inputs), cfg.rate_decimals)

    raise ValueError(f"Unknown command {args.command!r}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    _configure_logging(args.log_level, args.log_file)
    cfg = load_config(args.config)
    _log.debug("Running %s with %s", args.command, cfg)

    try:
        output = _run(args, cfg)
    except ValueError as e:
        _log.info("%s failed: %r", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
