"""Project version metadata."""

from __future__ import annotations

VERSION = "1.0.0"
RELEASE_NAME = "Índices BCB v1.0.0"

__version__ = VERSION
__codename__ = RELEASE_NAME
# Keep in sync with ``pyproject.toml``'s ``project.version``.
DEFAULT_VERSION = __version__
