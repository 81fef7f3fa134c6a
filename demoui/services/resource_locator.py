from __future__ import annotations

import os
from typing import List, Optional, Protocol

from .. import config


class ResourceLocator(Protocol):
    def locate(self, name: str) -> Optional[str]: ...


class DirectoryResourceLocator:
    """
    Resolves resource names against an ordered list of directories.
    The first directory containing a regular file with the requested name wins.
    """

    def __init__(self, *search_dirs: str) -> None:
        self.search_dirs: List[str] = [str(d) for d in search_dirs if d]

    def locate(self, name: str) -> Optional[str]:
        """Return the full path for `name`, or None if no search dir has it."""
        if not name:
            return None
        for base_dir in self.search_dirs:
            candidate = os.path.join(base_dir, name)
            if os.path.isfile(candidate):
                return candidate
        return None

    def __repr__(self) -> str:
        return f"DirectoryResourceLocator({', '.join(self.search_dirs)})"


def default_locator() -> DirectoryResourceLocator:
    """
    Locator used by the running application.

    Order:
    1) DEMOUI_RESOURCE_DIR (if set)
    2) the resources/ folder shipped with the package
    """
    return DirectoryResourceLocator(config.RESOURCE_DIR, config.BUNDLED_RESOURCE_DIR)
