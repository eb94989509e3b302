"""Loading and sharing of the textures used by the terminal windows."""

from __future__ import annotations

from pathlib import Path

import pygame

_FALLBACK_SIZE = (600, 800)
_PAGE_COLOR = (255, 255, 255)
_INK_COLOR = (0, 0, 0)

_STORAGE_KEY = "storage"
_shared: dict[str, TextureStorage] = {}


class TextureStorage:
    """Icons and document pages, loaded once and shared by all windows."""

    def __init__(
        self,
        document_icon=None,
        minimize_icon=None,
        popup_icon=None,
        close_icon=None,
        minigame_icon=None,
        documents=None,
    ):
        self._document_icon = document_icon
        self._minimize_icon = minimize_icon
        self._popup_icon = popup_icon
        self._close_icon = close_icon
        self._minigame_icon = minigame_icon
        self._documents: dict[str, pygame.Surface] = dict(documents or {})

    def document(self) -> pygame.Surface | None:
        return self._document_icon

    def minimize(self) -> pygame.Surface | None:
        return self._minimize_icon

    def popup(self) -> pygame.Surface | None:
        return self._popup_icon

    def close(self) -> pygame.Surface | None:
        return self._close_icon

    def minigame(self) -> pygame.Surface | None:
        return self._minigame_icon

    def document_by_name(self, name: str) -> pygame.Surface | None:
        return self._documents.get(name)

    def fallback_document(self) -> pygame.Surface:
        """A blank outlined page shown when a document is missing."""
        page = pygame.Surface(_FALLBACK_SIZE)
        page.fill(_PAGE_COLOR)
        pygame.draw.rect(page, _INK_COLOR, page.get_rect(), 5)
        return page


def _load_optional(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


def load_texture_storage(assets_dir) -> TextureStorage:
    """Load every icon and document under ``assets_dir`` and share the result.

    Documents are keyed by the part of their file name before the first dot.
    A missing documents directory or an unreadable document raises.
    """
    assets = Path(assets_dir)
    documents: dict[str, pygame.Surface] = {}
    for entry in sorted((assets / "documents").iterdir()):
        texture = pygame.image.load(str(entry))
        name = entry.name.split(".")[0]
        print(f"Load document: {name}")
        documents[name] = texture

    storage = TextureStorage(
        document_icon=_load_optional(assets / "document_icon.png"),
        minimize_icon=_load_optional(assets / "minimize.png"),
        popup_icon=_load_optional(assets / "warning.png"),
        close_icon=_load_optional(assets / "close.png"),
        minigame_icon=_load_optional(assets / "minigame.png"),
        documents=documents,
    )
    set_texture_storage(storage)
    return storage


def set_texture_storage(storage: TextureStorage | None) -> None:
    """Make ``storage`` the shared texture storage (``None`` clears it)."""
    if storage is None:
        _shared.pop(_STORAGE_KEY, None)
    else:
        _shared[_STORAGE_KEY] = storage


def texture_storage() -> TextureStorage:
    """Return the shared texture storage."""
    try:
        return _shared[_STORAGE_KEY]
    except KeyError:
        raise RuntimeError("texture storage has not been loaded") from None