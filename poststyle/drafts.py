"""Draft storage.

Keeps the current post on disk so a crash or an accidental quit does not
lose it. Writes go to a temporary file that is renamed over the draft, so a
draft is either the old or the new version, never half written.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import platformdirs

from .constants import ComposerConstants
from .document import PostDocument

logger = logging.getLogger(__name__)


def default_draft_dir() -> Path:
    return Path(platformdirs.user_data_dir(ComposerConstants.APP_NAME, ComposerConstants.APP_AUTHOR))


class DraftStore:
    """Saves and restores one draft document as JSON."""

    def __init__(self, directory: Optional[Union[str, Path]] = None,
                 filename: str = ComposerConstants.DRAFT_FILENAME):
        self._dir = Path(directory) if directory is not None else default_draft_dir()
        self.path = self._dir / filename

    def save(self, document: PostDocument) -> bool:
        """Write the draft atomically.

        Args:
            document: Document to store.

        Returns:
            True if the write succeeded, False otherwise.
        """
        temp_filename = None
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode='w',
                encoding='utf-8',
                dir=self._dir,
                suffix=ComposerConstants.DRAFT_TEMP_SUFFIX,
                delete=False
            ) as temp_file:
                temp_filename = temp_file.name
                json.dump(document.to_dict(), temp_file, ensure_ascii=False, indent=2)
                temp_file.flush()
                os.fsync(temp_file.fileno())

            # Atomic rename
            os.replace(temp_filename, self.path)
            logger.debug(f"Draft saved to {self.path}")
            return True

        except OSError as e:
            logger.warning(f"Could not save draft to {self.path}: {e}")
            if temp_filename is not None:
                try:
                    os.remove(temp_filename)
                except OSError:
                    pass
            return False

    def load(self) -> Optional[PostDocument]:
        """Read the draft.

        Returns:
            The stored document, or None if there is no draft or it cannot be
            read.
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read draft {self.path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning("Draft file has invalid format (not a dict), ignoring")
            return None
        try:
            return PostDocument.from_dict(data)
        except ValueError as e:
            logger.warning(f"Draft file has invalid content, ignoring: {e}")
            return None

    def exists(self) -> bool:
        return self.path.exists()

    def delete(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            # Best effort; a stale draft is only offered for restore
            logger.warning(f"Could not delete draft {self.path}: {e}")
