#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorutility/shared/logger.py

import sys

from colorutility.core import config as c


def _use_color(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def log(level: str, message: str) -> None:
    """
    Print a tagged library message. 'info' and 'success' go to stdout,
    everything else to stderr. ANSI colors are only used on a terminal.
    """
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag = f"[{c.LOG_TAG}][{level}]"
    if not _use_color(stream):
        print(f"{tag} {message}", file=stream)
        return
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}{tag}{c.RESET} {msg_color}{message}{c.RESET}", file=stream)
