"""
DocumentWriter: saves edited documents with backup and atomic writes.
"""

import os
import shutil
import tempfile
from pathlib import Path
from datetime import datetime
from typing import Optional, Tuple

from linesmith.logging_config import logger
from .config import get_editor_config


class DocumentWriter:
    """
    Write document text back to disk.

    Features:
    - Timestamped backup before each write
    - Atomic writes (temp file + rename)
    - Line ending preservation (LF/CRLF)
    """

    def __init__(self, config: Optional[dict] = None):
        """
        Initialize writer with optional config.

        Args:
            config: Optional config overrides (merges with the editor config)
        """
        self.config = {**get_editor_config(), **(config or {})}

    def write(self, file_path: str, content: str, line_ending: str = '\n') -> Tuple[bool, Optional[str]]:
        """
        Replace a file's content.

        Args:
            file_path: Target file
            content: New content, LF line breaks
            line_ending: Line ending to write ('\\n' or '\\r\\n')

        Returns:
            (success, backup_path)
        """
        backup_path = None
        if self.config["backup_enabled"]:
            backup_path = self.create_backup(file_path)
            if not backup_path:
                logger.error("Backup creation failed, aborting write")
                return False, None

        success = self._atomic_write(file_path, self._normalize_line_endings(content, line_ending))

        if success:
            logger.info(f"Saved {file_path}")
        elif backup_path:
            self._restore_backup(backup_path, file_path)

        return success, backup_path

    def create_backup(self, file_path: str) -> Optional[str]:
        """
        Create a timestamped backup of a file.

        Returns:
            Path to backup file or None if failed
        """
        path = Path(file_path)
        if not path.exists():
            logger.error(f"Cannot backup non-existent file: {file_path}")
            return None

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        backup_dir = Path(self.config["backup_dir"])
        backup_path = backup_dir / f"{path.name}.{timestamp}.backup"

        try:
            backup_dir.mkdir(parents=True, exist_ok=True)
            shutil.copy2(str(path), str(backup_path))
            logger.debug(f"Created backup: {backup_path}")
            return str(backup_path)
        except OSError as e:
            logger.error(f"Failed to create backup: {e}")
            return None

    def _atomic_write(self, file_path: str, content: str) -> bool:
        """
        Write file atomically using temp file + rename.

        Returns:
            True if successful
        """
        path = Path(file_path)

        try:
            # Temp file in the target directory keeps the rename on one filesystem
            fd, temp_path = tempfile.mkstemp(
                dir=str(path.parent),
                prefix=f".{path.name}.",
                suffix=".tmp"
            )
        except OSError as e:
            logger.error(f"Failed to create temp file: {e}")
            return False

        try:
            # newline='' keeps the line endings exactly as normalised
            with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
            os.replace(temp_path, str(path))
            logger.debug(f"Atomic write completed: {file_path}")
            return True
        except OSError as e:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            logger.error(f"Failed during atomic write: {e}")
            return False

    def _restore_backup(self, backup_path: str, target_path: str) -> bool:
        """Restore file from backup."""
        try:
            shutil.copy2(backup_path, target_path)
            logger.info(f"Restored {target_path} from backup")
            return True
        except OSError as e:
            logger.error(f"Failed to restore backup: {e}")
            return False

    def _normalize_line_endings(self, content: str, line_ending: str) -> str:
        """
        Normalize line endings to match detected style.

        Args:
            content: Content to normalize
            line_ending: Target line ending ('\\n' or '\\r\\n')

        Returns:
            Normalized content
        """
        content = content.replace('\r\n', '\n')
        if line_ending == '\r\n':
            content = content.replace('\n', '\r\n')
        return content
