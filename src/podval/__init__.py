"""podval: validation of podcast-namespace tags in decoded RSS feeds."""

from __future__ import annotations

__version__ = "0.1.0"
