"""
Xpectate.

Runs a shell command when files under a watched path change.
Requires Python 3.11+.
"""

from xpectate.watcher import SetupError, watch

__version__ = "0.1.0"

__all__ = ["SetupError", "watch", "__version__"]
