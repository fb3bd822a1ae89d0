# trapper/cli/main.py
from __future__ import annotations

import logging
import sys
from typing import List, Optional

from trapper.app.info import parse_info
from trapper.cli.args import parse_args
from trapper.cli.input_file import read_input
from trapper.core.errors import ArgumentError, TrapperError
from trapper.model import Sample
from trapper.protocol import Protocol, SenderClient


def collect_samples(args, default_host: Optional[str]) -> List[Sample]:
    if not args.input_file:
        if not default_host:
            raise ArgumentError("No host given.", hint="Pass -s/--host or set 'host' in the config file.")
        return [Sample(default_host, args.key, args.value)]

    opts = dict(
        with_timestamps=args.with_timestamps,
        with_ns=args.with_ns,
        default_host=default_host,
    )
    if args.input_file == "-":
        return read_input(sys.stdin, **opts)
    try:
        with open(args.input_file, "r", encoding="utf-8") as f:
            return read_input(f, **opts)
    except OSError as e:
        raise ArgumentError(f"Cannot read input file {args.input_file!r}", hint=str(e)) from None


def main(argv: Optional[list[str]] = None) -> int:
    try:
        args, cfg = parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        samples = collect_samples(args, cfg.host)
        client = SenderClient(
            cfg.server,
            cfg.port,
            timeout_s=cfg.timeout_s,
            protocol=Protocol.default(max_payload=cfg.max_payload),
        )
        response = client.send(samples, clock=args.clock, ns=args.ns)
    except TrapperError as e:
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1

    info = response.get("info")
    print(f'Response from "{client.target}": "{info}"')
    summary = parse_info(info)
    if summary is not None:
        print(f"sent: {summary.processed}; skipped: {summary.failed}; total: {summary.total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
