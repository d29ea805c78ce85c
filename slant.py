from __future__ import annotations

import argparse
import json
import logging

from rich.console import Console
from rich.logging import RichHandler

from slantlib.configLoader import DEFAULT_CONFIG_PATH, loadConfig
from slantlib.errors import ConfigError
from slantlib.report import RichReport


def setupLogging(verbose: bool, console: Console) -> None:
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="slant", description="Load a slant configuration and show it.")
    parser.add_argument("-f", dest="configPath", default=DEFAULT_CONFIG_PATH, help="configuration file")
    parser.add_argument("--json", dest="emitJson", action="store_true", help="print the configuration as JSON")
    parser.add_argument("-v", dest="verbose", action="store_true", help="debug logging")
    parser.add_argument("hosts", nargs="*", help="hosts to monitor instead of the configured servers")
    args = parser.parse_args(argv)

    console = Console(stderr=True)
    setupLogging(args.verbose, console)

    try:
        cfg = loadConfig(args.configPath, args.hosts)
    except ConfigError:
        return 1

    if args.emitJson:
        print(json.dumps(cfg.toDict(), indent=2))
    else:
        RichReport(source=args.configPath).print(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
