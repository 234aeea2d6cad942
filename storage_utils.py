import json
import logging
import shutil
from pathlib import Path

from fc_utils import DeserializationError, Flashcard, FlashcardManager

FORMAT_VERSION = 1
BACKUP_SUFFIX = ".backup"
RESTORED_MESSAGE = "Data restored from backup file."

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def log_reporter(level, message):
    logger.log(_LOG_LEVELS.get(level, logging.ERROR), message)


class FlashcardStorage:
    def __init__(self, filepath: Path | str = "flashcards.json", reporter=None):
        self.filepath = Path(filepath)
        self.backup_path = self.filepath.with_name(self.filepath.name + BACKUP_SUFFIX)
        self.reporter = reporter or log_reporter

    def _report(self, level, message):
        # every report also lands in the log
        if self.reporter is not log_reporter:
            log_reporter(level, message)
        self.reporter(level, message)

    # ---------- Format ----------
    def _serialize(self, manager):
        return {
            "version": FORMAT_VERSION,
            "flashcards": [card.to_dict() for card in manager],
        }

    def _deserialize(self, data):
        if not isinstance(data, dict):
            raise DeserializationError("Data file does not contain a flashcard collection")
        version = data.get("version")
        if version != FORMAT_VERSION:
            raise DeserializationError(f"Unsupported data file version: {version!r}")
        records = data.get("flashcards")
        if not isinstance(records, list):
            raise DeserializationError("Data file has no flashcard list")
        return [Flashcard.from_dict(record) for record in records]

    def _read(self, path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (ValueError, RecursionError) as e:
            raise DeserializationError(str(e)) from e
        return self._deserialize(data)

    # ---------- Save ----------
    def save(self, manager, backup=True):
        if backup and self.filepath.exists():
            try:
                shutil.copyfile(self.filepath, self.backup_path)
            except OSError as e:
                self._report("warning", f"Warning: Could not create backup file: {e}")

        try:
            # encode fully before the primary is opened and truncated
            payload = json.dumps(self._serialize(manager), indent=4, ensure_ascii=False).encode("utf-8")
            self._write(payload)
        except (OSError, ValueError) as e:
            self._report("error", f"Error saving data: {e}")
            self._restore_primary()
            return False

        logger.debug("Saved %d flashcards to %s", len(manager), self.filepath)
        return True

    def _write(self, payload):
        with open(self.filepath, "wb") as f:
            f.write(payload)

    def _restore_primary(self):
        if not self.backup_path.exists():
            return
        try:
            shutil.copyfile(self.backup_path, self.filepath)
        except OSError as e:
            self._report("critical", f"Critical error: Could not restore from backup: {e}")
            return
        self._report("info", RESTORED_MESSAGE)

    # ---------- Load ----------
    def _try_load(self, path):
        try:
            return self._read(path)
        except (OSError, DeserializationError) as e:
            self._report("error", f"Error loading data from {path.name}: {e}")
            return None

    def load(self):
        manager = FlashcardManager()
        if not self.filepath.exists() and not self.backup_path.exists():
            logger.info("No data file at %s, starting empty", self.filepath)
            return manager

        cards = self._try_load(self.filepath)
        if cards is not None:
            manager.replace_all(cards)
            logger.info("Loaded %d flashcards from %s", len(manager), self.filepath)
            return manager

        if self.backup_path.exists():
            cards = self._try_load(self.backup_path)
            if cards is not None:
                manager.replace_all(cards)
                self._report("info", RESTORED_MESSAGE)
                # keep the good backup; the primary is what is broken
                self.save(manager, backup=False)
        return manager
