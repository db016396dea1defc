import argparse
import curses
import os
import sys

from clipmade import __version__
from clipmade.app import run_ui
from clipmade.capture import CaptureListener
from clipmade.change_signal import ChangeSignal
from clipmade.clipboard import Clipboard
from clipmade.config import load_config
from clipmade.debug_log import DebugLogger
from clipmade.errors import ClipmadeError
from clipmade.history import HistoryStore
from clipmade.search import SearchEngine
from clipmade.single_instance import SingleInstance


def main():
    p = argparse.ArgumentParser(description="Clipboard history with pinyin search")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="config",
                   help="Configuration name or path (searches ~/.clipmade/, ./, or use full path)")
    p.add_argument("--history", metavar="PATH", default=None,
                   help="History file - overrides config")
    p.add_argument("--no-phonetic", action="store_true", default=False,
                   help="Match queries literally only (no pinyin)")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to clipmade_debug.log in current directory")
    args = p.parse_args()

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        p.error(str(e))

    # CLI arguments override config values
    if args.history is not None:
        config.storage.history_file = args.history
    if args.no_phonetic:
        config.search.phonetic = False

    logger = DebugLogger()
    if args.debug:
        logger.start()

    try:
        with SingleInstance(config.lock_path):
            _run(config, logger)
    except ClipmadeError as e:
        logger.log("FATAL", str(e))
        sys.exit(f"clipmade: {e}")
    finally:
        logger.stop()


def _run(config, logger: DebugLogger):
    store = HistoryStore.load(config.history_path, debug_logger=logger)
    clipboard = Clipboard.create()
    signal = ChangeSignal()
    listener = CaptureListener(store, clipboard, signal, debug_logger=logger)
    listener.start()

    engine = SearchEngine(store.snapshot(), phonetic=config.search.phonetic)
    # Esc clears the query; keep it responsive
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(run_ui, store, engine, clipboard, signal, listener, config, logger)
    finally:
        listener.stop()
