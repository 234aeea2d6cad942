import logging
from config import get_settings
from log_utils import initialize_logging
from storage_utils import FlashcardStorage
from gui_utils import FlashcardGUI

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    initialize_logging(settings.log_file, settings.log_level)

    # no window yet, so hold startup messages until the GUI can show them
    startup_messages = []
    storage = FlashcardStorage(settings.data_file,
                               reporter=lambda level, message: startup_messages.append((level, message)))
    manager = storage.load()
    logger.info("Starting with %d flashcards", len(manager))

    gui = FlashcardGUI(manager, storage, themename=settings.theme)
    for level, message in startup_messages:
        gui.root.after(0, gui.show_message, level, message)
    gui.run()

if __name__ == "__main__":
    main()
