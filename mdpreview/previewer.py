"""opens the rendered page with the host's default viewer."""

import logging
import shutil
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from mdpreview.console import ConsoleHandler
from mdpreview.core.errors import PreviewError

logger = logging.getLogger(__name__)

# seconds to wait after launching so the viewer can start before we exit
PREVIEW_DELAY = 2.0


@dataclass(frozen=True)
class Opener:
    """command that opens a file with its registered default application."""

    command: str
    leading_args: tuple[str, ...] = ()

    def args_for(self, file_path: str) -> list[str]:
        """returns the arguments (without the executable) to open file_path."""
        return [*self.leading_args, file_path]


OPENERS: dict[str, Opener] = {
    "linux": Opener("xdg-open"),
    "darwin": Opener("open"),
    # empty title so a quoted path is not taken as the window title
    "win32": Opener("cmd.exe", ("/C", "start", "")),
}


def get_opener(platform: Optional[str] = None) -> Opener:
    """
    returns the opener for platform (defaults to sys.platform).

    Raises:
        PreviewError: if the platform has no known opener
    """
    platform = platform or sys.platform
    try:
        return OPENERS[platform]
    except KeyError:
        raise PreviewError(f"unsupported platform: {platform!r}") from None


def preview(
    file_path: Union[str, Path],
    platform: Optional[str] = None,
    console: Optional[ConsoleHandler] = None,
) -> None:
    """
    opens file_path in the default viewer and waits briefly for it to start.

    Args:
        file_path: file to open
        platform: platform key overriding sys.platform
        console: console used to show a status spinner while waiting

    Raises:
        PreviewError: on unsupported platform, missing opener or launch failure
    """
    opener = get_opener(platform)
    args = opener.args_for(str(file_path))

    executable = shutil.which(opener.command)
    if executable is None:
        raise PreviewError(f"executable {opener.command!r} not found")

    logger.debug("running %s %s", executable, args)
    try:
        subprocess.run([executable, *args], check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise PreviewError(
            f"running {opener.command!r} with args {args}: {e}"
        ) from e

    console = console or ConsoleHandler(quiet=True)
    with console.status(f"Opening {file_path}..."):
        time.sleep(PREVIEW_DELAY)
