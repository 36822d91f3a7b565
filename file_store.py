import os
import logging
from collections import namedtuple
from datetime import datetime

from werkzeug.utils import safe_join

logger = logging.getLogger(__name__)


class StoredFile(namedtuple("StoredFile", ["name", "modified"])):
    __slots__ = ()

    @property
    def modified_at(self):
        return datetime.fromtimestamp(self.modified)


class FileStore:
    """Flat directory of uploaded files. The filesystem is the only state."""

    def __init__(self, directory):
        self.directory = os.path.abspath(directory)

    def ensure_directory(self):
        # anything other than "already exists" propagates and stops startup
        os.makedirs(self.directory, exist_ok=True)

    def resolve(self, name):
        if not name or name in (".", "..") or "\x00" in name:
            return None
        for sep in (os.sep, os.altsep):
            if sep and sep in name:
                return None
        return safe_join(self.directory, name)

    def list_files(self):
        try:
            names = os.listdir(self.directory)
        except OSError as e:
            logger.warning("Could not list %s: %s", self.directory, e)
            return []
        files = []
        for name in names:
            try:
                st = os.stat(os.path.join(self.directory, name))
            except OSError:
                # removed between listdir and stat
                continue
            files.append(StoredFile(name, st.st_mtime))
        files.sort(key=lambda f: f.modified, reverse=True)
        return files

    def save(self, name, upload):
        """Write a werkzeug ``FileStorage`` under ``name``, replacing any file of that name."""
        path = self.resolve(name)
        if path is None:
            logger.warning("Rejected upload name %r", name)
            return False
        try:
            upload.save(path)
        except OSError as e:
            logger.warning("Could not save %r: %s", name, e)
            return False
        logger.info("Saved %s", path)
        return True

    def delete(self, name):
        path = self.resolve(name)
        if path is None:
            logger.warning("Rejected delete name %r", name)
            return False
        try:
            os.remove(path)
        except OSError as e:
            logger.warning("Could not delete %r: %s", name, e)
            return False
        logger.info("Deleted %s", path)
        return True
