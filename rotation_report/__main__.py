"""Report entrypoint printing the end-of-shift rotation report."""

from __future__ import annotations

import logging
import os
import sys

from .config import load_config
from .escalation import LevelNotFound, ScheduleNotFound
from .runner import generate_report
from .sources import create_source


def main() -> int:
    """Print the rotation report and return the process exit status."""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
    config_path = os.environ.get("ROTATION_REPORT_CONFIG")
    config = load_config(config_path)
    logging.info(
        "Rotation report starting (log level: %s, config: %s, level: %s)",
        log_level,
        config_path or "defaults",
        config.target_level,
    )
    source = create_source(config=config)

    try:
        report = generate_report(source, config)
    except LevelNotFound as err:
        print(err)
        return 1
    except ScheduleNotFound as err:
        print(err)
        return 2

    print(report, end="")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
