"""Maximum lengths of free-text attributes, in characters.

These numbers come from the namespace documentation and are part of the
output contract: changing one changes which feeds are reported.
"""

from __future__ import annotations

# Funding message, person name, trailer title, location name, license text, ...
MAX_TEXT_LENGTH = 128

# Short labels such as alternate enclosure ``rel`` and ``title``.
MAX_LABEL_LENGTH = 32

# ``podcast:txt`` content.
MAX_TXT_LENGTH = 4000
