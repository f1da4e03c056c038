import argparse
import logging
import pathlib

import trio

from .events import describe
from .keytable import is_action_key, key_text
from .recorded import Replayer, decode_trace
from .settings import Settings

logger = logging.getLogger(__name__)


def load_settings(path):
    if path is None:
        return None
    settings = Settings.load(path)
    logging.getLogger().setLevel(settings.log_level)
    return settings


def configure_logging(level=logging.INFO):
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


keytext_parser = argparse.ArgumentParser(description="Print the name and action-key flag of virtual key codes.")
keytext_parser.add_argument("codes", nargs="+", type=lambda v: int(v, 0), metavar="CODE")
keytext_parser.add_argument("--settings", type=pathlib.Path)


def print_key_text():
    args = keytext_parser.parse_args()
    configure_logging()
    settings = load_settings(args.settings)
    labels = settings.labels if settings is not None else None
    for code in args.codes:
        print(f"{code:#06x}\t{key_text(code, labels)}\t{'action' if is_action_key(code) else '-'}")


trace_parser = argparse.ArgumentParser(description="Print the events of a recorded key event trace.")
trace_parser.add_argument("trace", type=pathlib.Path)
trace_parser.add_argument("--settings", type=pathlib.Path)
trace_parser.add_argument("--replay", action="store_true", help="wait out the recorded gaps between events")
trace_parser.add_argument("--speed", type=float, default=1.0)


def print_trace():
    args = trace_parser.parse_args()
    configure_logging()
    settings = load_settings(args.settings)
    labels = settings.labels if settings is not None else None

    if not args.replay:
        events = decode_trace(args.trace.read_bytes())
        logger.debug("%d events in %s", len(events), args.trace)
        for event in events:
            print(f"{event.when}\t{describe(event, labels=labels)}")
        return

    async def runner():
        replayer = Replayer.load(args.trace, speed=args.speed)
        async for event in replayer.keystream():
            print(f"{event.when}\t{describe(event, labels=labels)}")

    trio.run(runner)
