"""
Xpectate Command Runner.

Spawns the configured command line as a detached process.
Requires Python 3.11+.
"""

import os
import subprocess

from xpectate.utils.logger import LoggerMixin
from xpectate.watcher.errors import CommandError


def split_command(command: str | None) -> list[str]:
    """Split a command line on whitespace. No quoting is understood."""
    if not command:
        return []
    return command.split()


class CommandRunner(LoggerMixin):
    """
    Fire-and-forget launcher for a shell command line.

    The process is never waited on, its output is not captured and the
    number of concurrently running processes is not bounded.
    """

    def spawn(self, tokens: list[str]) -> subprocess.Popen:
        """
        Start the command through the host shell.

        Args:
            tokens: Program name followed by its arguments

        Returns:
            Handle of the started process

        Raises:
            CommandError: If the process could not be started
        """
        if not tokens:
            raise CommandError("empty command")

        kwargs: dict = {"shell": True}
        if os.name == "posix":
            kwargs["start_new_session"] = True

        try:
            return subprocess.Popen(" ".join(tokens), **kwargs)
        except OSError as e:
            raise CommandError(f"failed to spawn {tokens[0]!r}: {e}") from e

    def run(self, command: str) -> subprocess.Popen | None:
        """
        Run a command line, logging instead of raising on failure.

        Args:
            command: Whitespace separated command line

        Returns:
            Process handle, or None if nothing was started
        """
        tokens = split_command(command)
        self.log.info("running_command", command=tokens)

        try:
            return self.spawn(tokens)
        except CommandError as e:
            self.log.error("command_spawn_failed", command=tokens, error=str(e))
            return None
