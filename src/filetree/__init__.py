from __future__ import annotations

from filetree.domain.constants import APP_VERSION as __version__

__all__ = ["__version__"]
