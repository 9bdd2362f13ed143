"""Data sources and the raw document loader."""

from __future__ import annotations

import json
import logging
import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from .errors import DecodeError, NotFoundError

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes], Any]

LOCALES_DIR = "locales"
RBNF_DIR = "rbnf"


@runtime_checkable
class DataSource(Protocol):
    """Read-only access to CLDR documents by relative path."""

    def exists(self, path: str) -> bool: ...

    def read(self, path: str) -> bytes: ...


class DirectorySource:
    """Documents stored under one or more directories.

    Directories are searched in order, so a client data directory listed
    first overrides the documents shipped in later directories.
    """

    def __init__(self, *roots: Path | str) -> None:
        if not roots:
            raise ValueError("DirectorySource needs at least one directory.")
        self.roots = tuple(Path(root).expanduser() for root in roots)

    def __repr__(self) -> str:
        return f"DirectorySource({', '.join(str(root) for root in self.roots)})"

    def resolve(self, path: str) -> Path | None:
        for root in self.roots:
            candidate = root / path
            if candidate.is_file():
                return candidate
        return None

    def exists(self, path: str) -> bool:
        return self.resolve(path) is not None

    def read(self, path: str) -> bytes:
        resolved = self.resolve(path)
        if resolved is None:
            raise NotFoundError(f"Document {path!r} was not found in {self!r}", path=path)
        return resolved.read_bytes()


class ArchiveSource:
    """Documents stored inside a ZIP archive, optionally under a prefix."""

    def __init__(self, archive_path: Path | str, prefix: str = "") -> None:
        self.archive_path = Path(archive_path)
        self.prefix = prefix.strip("/")
        try:
            with zipfile.ZipFile(self.archive_path) as archive:
                self._members = frozenset(archive.namelist())
        except zipfile.BadZipFile as e:
            raise NotFoundError(
                f"Failed to open zip file '{self.archive_path}'. It may be corrupted."
            ) from e
        except FileNotFoundError as e:
            raise NotFoundError(f"Archive '{self.archive_path}' does not exist.") from e

    def __repr__(self) -> str:
        return f"ArchiveSource({self.archive_path}, prefix={self.prefix!r})"

    def _member(self, path: str) -> str:
        return f"{self.prefix}/{path}" if self.prefix else path

    def exists(self, path: str) -> bool:
        return self._member(path) in self._members

    def read(self, path: str) -> bytes:
        member = self._member(path)
        if member not in self._members:
            raise NotFoundError(f"Document {path!r} was not found in {self!r}", path=path)
        with zipfile.ZipFile(self.archive_path) as archive:
            return archive.read(member)


def decode_json(data: bytes) -> Any:
    """Decode a JSON document."""
    return json.loads(data.decode("utf-8"))


def locale_filename(locale: str) -> str:
    return f"{locale}.json"


class RawRecordLoader:
    """Reads raw document trees from a data source.

    Args:
        source: Where documents are stored.
        decode: Converts document bytes into a tree of dicts, lists and
            scalars. Defaults to JSON.
    """

    def __init__(self, source: DataSource, decode: Decoder = decode_json) -> None:
        self.source = source
        self.decode = decode

    def locale_path(self, locale: str) -> str:
        return f"{LOCALES_DIR}/{locale_filename(locale)}"

    def has_locale(self, locale: str) -> bool:
        return self.source.exists(self.locale_path(locale))

    def load_document(self, path: str) -> Any:
        """Read and decode a document.

        Raises:
            NotFoundError: If the document does not exist.
            DecodeError: If the document cannot be decoded.
        """
        data = self.source.read(path)
        try:
            return self.decode(data)
        except (ValueError, UnicodeDecodeError) as e:
            raise DecodeError(f"Document {path!r} could not be decoded: {e}") from e

    def load_locale(self, locale: str) -> Any:
        """Read the raw tree for a locale.

        Raises:
            NotFoundError: If no document exists for the locale.
        """
        path = self.locale_path(locale)
        if not self.source.exists(path):
            raise NotFoundError(
                f"Locale definition was not found for {locale!r}", path=path
            )
        logger.debug("Loading locale %s from %s", locale, path)
        return self.load_document(path)

    def load_rbnf(self, locale: str) -> bytes:
        """Read the raw RBNF XML document for a locale."""
        path = f"{RBNF_DIR}/{locale}.xml"
        if not self.source.exists(path):
            raise NotFoundError(f"RBNF rules were not found for {locale!r}", path=path)
        return self.source.read(path)
