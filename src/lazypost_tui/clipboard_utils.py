"""
Cross-platform clipboard utilities with OSC52 support for SSH sessions.
Works on Linux, macOS, and Windows.
"""

import base64
import logging
import platform
import subprocess
from typing import Callable, List, Tuple

import pyperclip

logger = logging.getLogger(__name__)

# (success, error_message)
CopyResult = Tuple[bool, str]
ClipboardWriter = Callable[[str], CopyResult]

_UNIX_COMMANDS = {
    "Linux": [
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
    "Darwin": [["pbcopy"]],
}


def copy_to_clipboard(text: str) -> CopyResult:
    """
    Copy text to clipboard using the best available method.

    Order: OSC52 escape sequence, pyperclip, then xclip/xsel/pbcopy.
    Never raises; failures are reported in the returned tuple.
    """
    if _try_osc52(text):
        return True, ""

    try:
        pyperclip.copy(text)
        return True, ""
    except pyperclip.PyperclipException as e:
        logger.debug("pyperclip unavailable: %s", e)

    for command in _UNIX_COMMANDS.get(platform.system(), []):
        if _run_copy_command(command, text):
            return True, ""

    return False, "No clipboard method available. Install xclip/xsel or use a terminal with OSC52 support"


def _try_osc52(text: str) -> bool:
    """
    Write an OSC52 sequence straight to the controlling terminal.
    This works in most modern terminals, including over SSH.
    """
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    osc52 = f"\033]52;c;{encoded}\007"
    device = "CON" if platform.system() == "Windows" else "/dev/tty"

    try:
        with open(device, "w", encoding="utf-8") as tty:
            tty.write(osc52)
            tty.flush()
        return True
    except OSError:
        return False


def _run_copy_command(command: List[str], text: str) -> bool:
    try:
        subprocess.run(command, input=text.encode("utf-8"), check=True, timeout=1)
        return True
    except (FileNotFoundError, subprocess.SubprocessError):
        return False
