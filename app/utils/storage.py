# app/utils/storage.py
import logging
import os
import time

logger = logging.getLogger(__name__)


class LocalImageStorage:
    """Writes uploaded images into a local directory.

    Names are prefixed with the upload time in milliseconds, so two uploads
    of the same file within one millisecond collide.
    """

    def __init__(self, directory: str):
        self.directory = directory

    def store(self, data: bytes, suggested_name: str) -> str:
        os.makedirs(self.directory, exist_ok=True)
        stored_name = f"{int(time.time() * 1000)}-{os.path.basename(suggested_name)}"
        with open(os.path.join(self.directory, stored_name), "wb") as f:
            f.write(data)
        logger.info("Stored image %s (%d bytes)", stored_name, len(data))
        return stored_name
