"""Flat-file storage for processed records.

Blobs live as JSON files directly under a single base directory. Writes go
to a temporary file in the same directory and are renamed into place, so a
concurrent reader sees either the old or the new content, never a partial
write. Concurrent writers to the same name race; the last rename wins.

Filenames passed to retrieve() are untrusted: absolute paths, ``..``
segments and anything resolving outside the base directory are rejected.
"""

import logging
import os
import tempfile
from pathlib import Path, PurePath
from typing import Any, Optional

from finrecord.errors import NotFoundError, PathTraversalError, StorageError
from finrecord.processing.encryptor import serialize_record

logger = logging.getLogger(__name__)


class FileStore:
    """Stores and reads JSON blobs under a fixed base directory."""

    def __init__(self, base_dir: Path, default_filename: str = "processedData.json") -> None:
        self.base_dir = Path(base_dir)
        self.default_filename = default_filename

    def resolve(self, filename: str) -> Path:
        """Map an untrusted relative filename to a path inside base_dir."""
        if not filename or "\x00" in filename:
            raise PathTraversalError(filename)

        candidate = PurePath(filename)
        # Backslashes are separators for some clients even on POSIX
        segments = filename.replace("\\", "/").split("/")
        if candidate.is_absolute() or candidate.drive or ".." in segments:
            raise PathTraversalError(filename)

        base = self.base_dir.resolve()
        target = (base / candidate).resolve()
        if target == base or base not in target.parents:
            raise PathTraversalError(filename)
        return target

    def store(self, data: Any, filename: Optional[str] = None) -> str:
        """Write ``data`` as JSON, replacing any existing file.

        Returns the filename relative to the base directory, suitable for
        passing back to retrieve().
        """
        name = filename or self.default_filename
        target = self.resolve(name)
        content = serialize_record(data)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, target)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except UnicodeEncodeError as exc:
            raise StorageError("Data contains text that cannot be encoded as UTF-8") from exc
        except OSError as exc:
            logger.error(f"Failed to store data at {target}: {exc}")
            raise StorageError(f"Failed to store data: {exc.strerror or exc}") from exc

        logger.info(f"Stored {len(content)} characters to {target}")
        return target.relative_to(self.base_dir.resolve()).as_posix()

    def retrieve(self, filename: str) -> str:
        """Return the raw text of a stored file.

        Raises PathTraversalError for unsafe names and NotFoundError when
        the file does not exist.
        """
        target = self.resolve(filename)
        if not target.is_file():
            logger.info(f"Requested file not found: {target}")
            raise NotFoundError(filename)

        try:
            content = target.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise NotFoundError(filename) from exc
        except UnicodeDecodeError as exc:
            logger.error(f"Stored file {target} is not valid UTF-8")
            raise StorageError(f"File '{filename}' is not valid UTF-8") from exc
        except OSError as exc:
            logger.error(f"Failed to read {target}: {exc}")
            raise StorageError(f"Failed to read data: {exc.strerror or exc}") from exc

        logger.info(f"Retrieved {len(content)} characters from {target}")
        return content
