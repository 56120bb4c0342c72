"""External syntax highlighter service."""

from __future__ import annotations

import logging
import subprocess

from histscope.storage.models import HighlightResult

logger = logging.getLogger(__name__)


class Highlighter:
    """Pipe command text through an external highlighter such as ``bat``.

    Highlighting is best effort: every failure yields the raw text.
    """

    def __init__(self, command_line: str, timeout: int | None = None) -> None:
        self.args = command_line.split()
        self.timeout = timeout if timeout and timeout > 0 else None

    def highlight(self, text: str) -> HighlightResult:
        """Return highlighted ``text``, or ``text`` unchanged on failure."""
        if not self.args:
            return HighlightResult(text=text, reason="Highlighter disabled")

        # exec, not shell; "--" ends the highlighter's options
        cmd = [*self.args, "--"]
        try:
            proc = subprocess.run(
                cmd,
                input=text,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug("Highlighter timed out after %ss: %s", self.timeout, cmd)
            return HighlightResult(text=text, reason=f"Timed out after {self.timeout}s")
        except OSError as e:
            logger.debug("Highlighter failed to run: %s (%s)", cmd, e)
            return HighlightResult(text=text, reason=str(e))

        if proc.returncode != 0:
            logger.debug("Highlighter exited with %d: %s", proc.returncode, cmd)
            return HighlightResult(text=text, reason=f"Exit status {proc.returncode}")

        return HighlightResult(text=proc.stdout, highlighted=True)


def highlight_command(command: str, highlighter: str, timeout: int | None = None) -> HighlightResult:
    """Highlight a shell command with the configured highlighter command line."""
    return Highlighter(highlighter, timeout).highlight(command)
