import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATA_FILE = "flashcards.json"
DEFAULT_LOG_FILE = "flashcards.log"
DEFAULT_THEME = "minty"


@dataclass(frozen=True)
class Settings:
    data_file: str = DEFAULT_DATA_FILE
    log_file: str = DEFAULT_LOG_FILE
    log_level: str = "INFO"
    theme: str = DEFAULT_THEME


def get_settings():
    return Settings(
        data_file=os.getenv("FLASHCARDS_DATA_FILE", DEFAULT_DATA_FILE),
        log_file=os.getenv("FLASHCARDS_LOG_FILE", DEFAULT_LOG_FILE),
        log_level=os.getenv("FLASHCARDS_LOG_LEVEL", "INFO").upper(),
        theme=os.getenv("FLASHCARDS_THEME", DEFAULT_THEME),
    )
