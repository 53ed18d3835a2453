"""Bridge to the external dmenu-style picker (fuzzel by default).

Candidate lines go to the picker's stdin, the chosen (or typed) line comes
back on stdout once it exits. Dismissing the picker yields empty output.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from .errors import PickerError


logger = logging.getLogger('niri_action.picker')

DEFAULT_PICKER_COMMAND = ["fuzzel", "--dmenu"]


class Picker:
    """Runs the picker once per ``pick`` call and waits for it to exit."""

    def __init__(self, command: Optional[Sequence[str]] = None):
        """Initialize picker.

        Args:
            command: Picker argv (default: fuzzel --dmenu)
        """
        self.command = list(command or DEFAULT_PICKER_COMMAND)

    async def pick(self, lines: List[str]) -> str:
        """Present candidate lines and return the user's pick.

        Args:
            lines: Candidate lines, one entity per line

        Returns:
            The picked line without its trailing newline, or "" if cancelled

        Raises:
            PickerError: If the picker cannot be started
        """
        logger.debug(f"Running picker {self.command[0]} with {len(lines)} candidate(s)")

        try:
            proc = await asyncio.create_subprocess_exec(
                *self.command,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            raise PickerError(f"Can't open picker: '{self.command[0]}' not found")
        except OSError as e:
            raise PickerError(f"Can't open picker '{self.command[0]}': {e}")

        stdout, _ = await proc.communicate("\n".join(lines).encode())
        output = stdout.decode("utf-8", errors="replace").rstrip("\n")

        if proc.returncode != 0:
            # fuzzel exits non-zero when dismissed
            logger.debug(f"Picker exited with status {proc.returncode}")

        logger.debug(f"Picker returned {output!r}")
        return output
