"""
main.py
-------
Entry point for Orbit-Bloom.

Usage:
    python main.py                  # Endless mode, stages loop
    python main.py --stage-pause    # Pause on the Stage Clear screen between stages
"""

import argparse
import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from src.core.debug.debug_logger import DebugLogger, LoggerConfig
from src.core.runtime.game_loop import GameLoop


def main():
    parser = argparse.ArgumentParser(description="Orbit-Bloom arcade shooter")
    parser.add_argument("--stage-pause", action="store_true",
                        help="Pause on a Stage Clear screen between stages")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable VERBOSE (per-frame) logging")
    args = parser.parse_args()

    if args.verbose:
        LoggerConfig.LOG_LEVEL = "VERBOSE"

    DebugLogger.section("Starting Orbit-Bloom")
    GameLoop(pause_on_stage_clear=args.stage_pause).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
