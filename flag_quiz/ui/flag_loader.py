"""Asynchronous download of flag images."""

from __future__ import annotations

from collections import OrderedDict
import logging
from typing import Generic, TypeVar

from PySide6.QtCore import QObject, QSize, Qt, QUrl, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from flag_quiz.constants.ui_constants import FLAG_CACHE_LIMIT

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class FlagCache(Generic[_T]):
    """Least-recently-used mapping of flag URL to image, capped at ``limit`` entries."""

    def __init__(self, limit: int = FLAG_CACHE_LIMIT) -> None:
        if limit < 1:
            raise ValueError("Cache limit must be at least 1.")
        self._limit = limit
        self._entries: OrderedDict[str, _T] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, url: str) -> _T | None:
        entry = self._entries.get(url)
        if entry is not None:
            self._entries.move_to_end(url)
        return entry

    def put(self, url: str, value: _T) -> None:
        self._entries[url] = value
        self._entries.move_to_end(url)
        while len(self._entries) > self._limit:
            self._entries.popitem(last=False)


class FlagLoader(QObject):
    """Fetches flag images and caches them by URL.

    Images are scaled down to ``display_size`` before they are cached, and
    only the most recently requested URL is reported, so a slow download for
    an earlier question never replaces the current flag.
    """

    flag_loaded = Signal(str, QPixmap)
    flag_failed = Signal(str)

    def __init__(
        self,
        display_size: QSize,
        parent: QObject | None = None,
        cache_limit: int = FLAG_CACHE_LIMIT,
    ) -> None:
        super().__init__(parent)
        self._manager = QNetworkAccessManager(self)
        self._display_size = display_size
        self._cache: FlagCache[QPixmap] = FlagCache(cache_limit)
        self._requested_url: str | None = None

    def load(self, url: str) -> None:
        self._requested_url = url
        cached = self._cache.get(url)
        if cached is not None:
            self.flag_loaded.emit(url, cached)
            return
        reply = self._manager.get(QNetworkRequest(QUrl(url)))
        reply.finished.connect(lambda r=reply, u=url: self._handle_finished(u, r))

    def _handle_finished(self, url: str, reply: QNetworkReply) -> None:
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                logger.warning("Flag download failed for %s: %s", url, reply.errorString())
                if url == self._requested_url:
                    self.flag_failed.emit(url)
                return

            pixmap = QPixmap()
            if not pixmap.loadFromData(reply.readAll()):
                logger.warning("Flag image at %s could not be decoded", url)
                if url == self._requested_url:
                    self.flag_failed.emit(url)
                return

            scaled = pixmap.scaled(
                self._display_size,
                Qt.KeepAspectRatio,
                Qt.SmoothTransformation,
            )
            self._cache.put(url, scaled)
            if url == self._requested_url:
                self.flag_loaded.emit(url, scaled)
        finally:
            reply.deleteLater()
