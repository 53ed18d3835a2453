"""niri-action - fuzzel-driven selections of niri windows, workspaces and outputs.

This package provides:
- A single-connection client for the niri IPC socket
- Listing formatters and picker-output resolution
- Focus, steal and move operations driven by a dmenu-style picker
"""

__version__ = "0.1.7"
__author__ = "niri-action contributors"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
