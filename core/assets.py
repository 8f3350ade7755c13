"""Immutable, process-wide store of the bundled front-end files."""

from __future__ import annotations

import hashlib
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from .errors import AssetNotFound

logger = logging.getLogger("standalone_gui.assets")

DEFAULT_PREFIX = "files"


def _normalize(path: str) -> str:
    return path.lstrip("/")


class AssetStore:
    """Read-only mapping of logical path (``files/css/gui.css``) to bytes.

    The content is copied once on construction and never changes afterwards,
    so the store can be read from any number of request threads without
    locking.
    """

    def __init__(self, files: Mapping[str, bytes], *, loaded_at: Optional[datetime] = None) -> None:
        contents: Dict[str, bytes] = {}
        etags: Dict[str, str] = {}
        for path, data in files.items():
            key = _normalize(path)
            blob = bytes(data)
            contents[key] = blob
            etags[key] = hashlib.sha1(blob).hexdigest()
        self._contents = MappingProxyType(contents)
        self._etags = MappingProxyType(etags)
        stamp = loaded_at or datetime.now(timezone.utc)
        # HTTP dates have whole-second resolution.
        self._loaded_at = stamp.replace(microsecond=0)

    # Construction --------------------------------------------------------
    @classmethod
    def from_mapping(cls, files: Mapping[str, bytes]) -> "AssetStore":
        return cls(files)

    @classmethod
    def from_directory(cls, root: Union[str, os.PathLike], prefix: str = DEFAULT_PREFIX) -> "AssetStore":
        """Load every regular file below ``root``, keyed as ``prefix/<relative path>``."""
        root_path = Path(root)
        if not root_path.is_dir():
            raise FileNotFoundError(f"asset directory does not exist: {root_path}")
        files: Dict[str, bytes] = {}
        for file_path in sorted(root_path.rglob("*")):
            if not file_path.is_file():
                continue
            relative = file_path.relative_to(root_path).as_posix()
            key = f"{prefix.strip('/')}/{relative}" if prefix else relative
            files[key] = file_path.read_bytes()
        logger.info({"evt": "assets_loaded", "root": str(root_path), "count": len(files)})
        return cls(files)

    # Lookup --------------------------------------------------------------
    def get(self, path: str) -> bytes:
        """Return the full content stored under ``path`` or raise `AssetNotFound`."""
        try:
            return self._contents[_normalize(path)]
        except KeyError:
            raise AssetNotFound(path) from None

    def etag(self, path: str) -> str:
        try:
            return self._etags[_normalize(path)]
        except KeyError:
            raise AssetNotFound(path) from None

    @property
    def loaded_at(self) -> datetime:
        return self._loaded_at

    def paths(self) -> list[str]:
        return sorted(self._contents)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and _normalize(path) in self._contents

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    def __len__(self) -> int:
        return len(self._contents)


__all__ = ["AssetStore", "DEFAULT_PREFIX"]
