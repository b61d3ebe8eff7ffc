from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """No usable clipboard; caller should show the text for manual copy."""


def _clipboard_command() -> list[str] | None:
    if sys.platform == "darwin":
        candidates = [["pbcopy"]]
    elif sys.platform.startswith("win"):
        candidates = [["clip"]]
    else:
        candidates = []
        if os.environ.get("WAYLAND_DISPLAY"):
            candidates.append(["wl-copy"])
        candidates += [["xclip", "-selection", "clipboard"], ["xsel", "--clipboard", "--input"]]
    for cmd in candidates:
        if shutil.which(cmd[0]):
            return cmd
    return None


def copy_text(text: str) -> None:
    """Put text on the system clipboard or raise ClipboardError."""
    cmd = _clipboard_command()
    if cmd is None:
        raise ClipboardError("No clipboard tool found (pbcopy, clip, wl-copy, xclip or xsel)")
    try:
        proc = subprocess.run(cmd, input=text.encode("utf-8"), check=False, capture_output=True, timeout=5)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Clipboard command %s failed: %s", cmd[0], e)
        raise ClipboardError(str(e)) from e
    if proc.returncode != 0:
        detail = proc.stderr.decode("utf-8", errors="replace").strip()
        logger.warning("Clipboard command %s exited %s: %s", cmd[0], proc.returncode, detail)
        raise ClipboardError(detail or f"{cmd[0]} exited with {proc.returncode}")
