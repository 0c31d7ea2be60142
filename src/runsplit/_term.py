from __future__ import annotations

import os
import sys
from typing import TextIO

_COLOR: bool | None = None


def supports_color(stream: TextIO | None = None) -> bool:
    global _COLOR
    if _COLOR is not None:
        return _COLOR
    out = stream if stream is not None else sys.stdout
    if os.environ.get("NO_COLOR", "") != "" or os.environ.get("TERM", "") == "dumb":
        return False
    isatty = getattr(out, "isatty", None)
    return bool(isatty is not None and isatty())


def force_color(enabled: bool | None) -> None:
    """Pin color on or off; ``None`` goes back to autodetection."""
    global _COLOR
    _COLOR = enabled


def style(text: str, *codes: int) -> str:
    if not codes or not supports_color():
        return text
    return "\033[" + ";".join(map(str, codes)) + f"m{text}\033[0m"


def green(text: str) -> str:
    return style(text, 32)


def red(text: str) -> str:
    return style(text, 31)


def cyan(text: str) -> str:
    return style(text, 36)


def dim(text: str) -> str:
    return style(text, 2)


def bold(text: str) -> str:
    return style(text, 1)
