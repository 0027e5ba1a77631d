# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging

from volcengine_provider.infrastructures.vconfig import get_config

_VALID_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def init_logging(level: str) -> None:
    lvl = level.upper().strip()
    if lvl not in _VALID_LEVELS:
        lvl = "INFO"

    logging.basicConfig(
        level=getattr(logging, lvl),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    # Route httpx/httpcore through the root formatter
    for name in ("httpx", "httpcore"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True

    vlogger.info("logging initialized level=%s", lvl)


def init_logging_from_config() -> None:
    init_logging(get_config().log_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


vlogger = get_logger("volcengine_provider")
