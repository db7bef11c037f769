from __future__ import annotations

import json
import logging
import random
import sys
import time
from typing import TextIO

from app.config import FORMAT_JSON, FORMAT_LABELED, Settings, load_settings
from logic.payload import field_to_payload
from logic.placement import generate_field
from logic.render import render_field, render_field_labeled
from models import Field, PlacementError


logger = logging.getLogger(__name__)


def _resolve_log_level(level_name: str) -> int:
    """Map a level name (``DEBUG``) or number (``10``) to a logging level."""
    if level_name.isdigit():
        return int(level_name)
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(level=_resolve_log_level(level_name))


def format_output(field: Field, output_format: str) -> str:
    if output_format == FORMAT_JSON:
        return json.dumps(field_to_payload(field), indent=2) + "\n"
    if output_format == FORMAT_LABELED:
        return render_field_labeled(field)
    return render_field(field)


def run(settings: Settings, out: TextIO) -> int:
    rng = random.Random(settings.seed)
    start = time.perf_counter_ns()
    try:
        field = generate_field(rng)
    except PlacementError as error:
        logger.error("Fleet placement failed: %s", error)
        return 1
    elapsed_us = (time.perf_counter_ns() - start) // 1000

    if settings.timing:
        out.write(f"{elapsed_us} us.\n")
    out.write(format_output(field, settings.output_format))
    return 0


def main() -> int:
    try:
        settings = load_settings()
    except ValueError as error:
        _configure_logging("WARNING")
        logger.error("Invalid configuration: %s", error)
        return 2

    _configure_logging(settings.log_level)
    logger.info(
        "Placing fleet seed=%s format=%s timing=%s",
        settings.seed, settings.output_format, settings.timing,
    )
    return run(settings, sys.stdout)


if __name__ == '__main__':
    sys.exit(main())
