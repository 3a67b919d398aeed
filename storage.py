# storage.py
import logging
import os
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, List

from config import COPY_CHUNK_SIZE
from utils import is_safe_basename

logger = logging.getLogger(__name__)

EPOCH = datetime.fromtimestamp(0, timezone.utc)


class FileStore:
    """Flat directory of shared files. No locking: the last writer wins."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def ensure(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        if not is_safe_basename(name):
            raise ValueError(f"not a sanitized basename: {name!r}")
        return self.root / name

    def list_files(self) -> List[str]:
        """Names of regular files only, ascending. Names the download route could not
        map back to the same file (e.g. containing "\\") are left out."""
        with os.scandir(self.root) as it:
            names = [
                e.name for e in it
                if e.is_file(follow_symlinks=False) and is_safe_basename(e.name)
            ]
        return sorted(names)

    def create_or_replace(self, name: str, content: BinaryIO) -> int:
        """Truncate-and-copy `content` into `name`. A failed copy may leave a partial file."""
        path = self.path_for(name)
        with open(path, "wb") as out:
            shutil.copyfileobj(content, out, COPY_CHUNK_SIZE)
            written = out.tell()
        logger.debug("wrote %d bytes to %s", written, path)
        return written

    def open_for_read(self, name: str) -> BinaryIO:
        path = self.path_for(name)
        # regular files only, same as the listing
        if path.is_symlink() or not path.is_file():
            raise FileNotFoundError(name)
        return open(path, "rb")

    @staticmethod
    def stat_mod_time(handle) -> datetime:
        """Best-effort mtime of an open handle; EPOCH if it cannot be read."""
        try:
            st = os.fstat(handle.fileno())
        except (OSError, ValueError, AttributeError):
            return EPOCH
        return datetime.fromtimestamp(st.st_mtime, timezone.utc)
