# File: media_store.py
"""File storage for journal photos and voice notes.

Media files live under <config>/thunderpick_move_media. Journal entries only
store the returned reference (a file name), never file contents. All file I/O
runs in the executor. Failures are logged and reported as None: a journal
entry without media is a valid end state, not an error.
"""

from __future__ import annotations

from pathlib import Path
import shutil
from typing import TYPE_CHECKING
import uuid

from . import const

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant


class MediaStore:
    """Save and read media files referenced by journal entries."""

    def __init__(self, hass: HomeAssistant, directory: str | None = None) -> None:
        """Initialize the media store.

        Args:
            hass: Home Assistant core object.
            directory: Absolute media directory (default: config/MEDIA_DIRECTORY).
        """
        self.hass = hass
        self._directory = Path(directory or hass.config.path(const.MEDIA_DIRECTORY))

    @property
    def directory(self) -> Path:
        """Directory holding the media files."""
        return self._directory

    def _new_path(self, extension: str) -> Path:
        return self._directory / f"{uuid.uuid4().hex}{extension}"

    def _resolve(self, reference: str) -> Path | None:
        """Map a reference to a file inside the media directory, or None."""
        candidate = (self._directory / reference).resolve()
        if candidate.parent != self._directory.resolve():
            return None
        return candidate

    # -------------------------------------------------------------------------
    # Executor jobs
    # -------------------------------------------------------------------------

    def _write_bytes(self, data: bytes, extension: str) -> str:
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._new_path(extension)
        target.write_bytes(data)
        return target.name

    def _copy_file(self, source_path: str, extension: str) -> str:
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._new_path(extension)
        shutil.copyfile(source_path, target)
        return target.name

    def _read_bytes(self, reference: str) -> bytes | None:
        path = self._resolve(reference)
        if path is None:
            const.LOGGER.warning("Rejected media reference outside store: %s", reference)
            return None
        return path.read_bytes()

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def async_save_image(self, data: bytes) -> str | None:
        """Write JPEG bytes; return the new reference or None on failure."""
        try:
            return await self.hass.async_add_executor_job(
                self._write_bytes, data, const.MEDIA_IMAGE_EXTENSION
            )
        except OSError as err:
            const.LOGGER.warning("Failed to save journal image: %s", err)
            return None

    async def async_import_image(self, source_path: str) -> str | None:
        """Copy an existing image file into the store."""
        try:
            return await self.hass.async_add_executor_job(
                self._copy_file, source_path, const.MEDIA_IMAGE_EXTENSION
            )
        except OSError as err:
            const.LOGGER.warning("Failed to import image %s: %s", source_path, err)
            return None

    async def async_save_audio(self, source_path: str) -> str | None:
        """Copy a recorded audio file into the store."""
        try:
            return await self.hass.async_add_executor_job(
                self._copy_file, source_path, const.MEDIA_AUDIO_EXTENSION
            )
        except OSError as err:
            const.LOGGER.warning("Failed to save audio %s: %s", source_path, err)
            return None

    async def async_read(self, reference: str) -> bytes | None:
        """Return the bytes behind a reference, or None if unreadable."""
        try:
            return await self.hass.async_add_executor_job(self._read_bytes, reference)
        except OSError as err:
            const.LOGGER.warning("Failed to read media %s: %s", reference, err)
            return None
