# trapper/cli/args.py
from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Optional, Tuple

from trapper.app.config import SenderConfig, load_config
from trapper.core.errors import ArgumentError
from trapper.model import DEFAULT_PORT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trapper-send",
        description="Send metric samples to a collector over the trapper protocol.",
    )
    parser.add_argument("-c", "--config", help="YAML sender config (server, port, timeout_s, ...).")
    parser.add_argument("-z", "--server", help="Collector (server or proxy) address.")
    parser.add_argument("-p", "--port", type=int, default=None, help=f"Collector port (default {DEFAULT_PORT}).")
    parser.add_argument("--timeout", type=float, default=None, help="Socket timeout in seconds.")

    parser.add_argument("-s", "--host", help="Host name the samples belong to.")
    parser.add_argument("-k", "--key", help="Item key.")
    parser.add_argument("-o", "--value", help="Item value.")

    parser.add_argument("-i", "--input-file", help="Read samples from file ('-' for stdin).")
    parser.add_argument("-T", "--with-timestamps", action="store_true",
                        help="Input lines carry a clock column.")
    parser.add_argument("-N", "--with-ns", action="store_true",
                        help="Input lines carry an ns column after clock (needs -T).")

    parser.add_argument("--clock", type=int, default=None, help="Batch timestamp (Unix seconds).")
    parser.add_argument("--ns", type=int, default=None, help="Batch timestamp nanoseconds.")

    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def resolve_config(args: argparse.Namespace) -> SenderConfig:
    """
    Merge the optional config file with command-line flags.
    Flags win over file values.
    """
    if args.config:
        cfg = load_config(args.config)
    elif args.server:
        cfg = SenderConfig(server=args.server)
    else:
        raise ArgumentError(
            "No collector address given.",
            hint="Pass -z/--server or a config file with 'server'.",
        )

    if args.server:
        cfg = replace(cfg, server=args.server)
    if args.port is not None:
        cfg = replace(cfg, port=args.port)
    if args.timeout is not None:
        if args.timeout <= 0:
            raise ArgumentError(f"--timeout must be positive, got {args.timeout}")
        cfg = replace(cfg, timeout_s=args.timeout)
    if args.host:
        cfg = replace(cfg, host=args.host)
    return cfg


def parse_args(argv: Optional[list[str]] = None) -> Tuple[argparse.Namespace, SenderConfig]:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.with_ns and not args.with_timestamps:
        parser.error("-N/--with-ns requires -T/--with-timestamps")
    if args.input_file and (args.key or args.value):
        parser.error("-i/--input-file cannot be combined with -k/-o")
    if not args.input_file and (args.key is None or args.value is None):
        parser.error("either -i/--input-file or both -k/--key and -o/--value are required")

    return args, resolve_config(args)
