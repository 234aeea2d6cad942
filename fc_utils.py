from collections import Counter, deque
from datetime import date

MAX_HISTORY = 100
DATE_FORMAT = "%Y-%m-%d"


class FlashcardError(Exception):
    pass


class ValidationError(FlashcardError, ValueError):
    pass


class DeserializationError(FlashcardError):
    pass


def _clean(value, field_name):
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} cannot be empty")
    return str(value).strip()


class Flashcard:
    def __init__(self, question, answer, history=None):
        self._question = _clean(question, "Question")
        self._answer = _clean(answer, "Answer")
        self._history = deque(maxlen=MAX_HISTORY)
        if history:
            self._history.extend(history)
        else:
            self.record_update()

    def __repr__(self):
        return f"Flashcard(question={self._question!r}, answer={self._answer!r})"

    # ---------- Fields ----------
    @property
    def question(self):
        return self._question

    @question.setter
    def question(self, value):
        self._question = _clean(value, "Question")
        self.record_update()

    @property
    def answer(self):
        return self._answer

    @answer.setter
    def answer(self, value):
        self._answer = _clean(value, "Answer")
        self.record_update()

    @property
    def update_history(self):
        return tuple(self._history)

    def edit(self, question, answer):
        """Set both fields together; nothing changes unless both are valid."""
        question = _clean(question, "Question")
        answer = _clean(answer, "Answer")
        self._question = question
        self._answer = answer
        self.record_update()

    def record_update(self, when: date | None = None):
        # deque drops the oldest entry once MAX_HISTORY is reached
        self._history.append(when or date.today())

    # ---------- Serialization ----------
    def to_dict(self):
        return {
            "question": self._question,
            "answer": self._answer,
            "update_history": [d.strftime(DATE_FORMAT) for d in self._history],
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise DeserializationError(f"Flashcard record must be an object, got {type(data).__name__}")
        raw_history = data.get("update_history")
        if not isinstance(raw_history, list) or not raw_history:
            raise DeserializationError("Flashcard record has no update history")
        try:
            history = [date.fromisoformat(d) for d in raw_history]
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Invalid date in update history: {e}") from e
        try:
            return cls(data.get("question"), data.get("answer"), history=history)
        except ValidationError as e:
            raise DeserializationError(f"Invalid flashcard record: {e}") from e


class FlashcardManager:
    def __init__(self, flashcards=None):
        self._flashcards = list(flashcards or [])

    def __len__(self):
        return len(self._flashcards)

    def __iter__(self):
        return iter(self._flashcards)

    @property
    def flashcards(self):
        return tuple(self._flashcards)

    def create(self, question, answer):
        card = Flashcard(question, answer)
        self._flashcards.append(card)
        return card

    def update(self, card, new_question, new_answer):
        """
        Replace both fields of ``card`` at once. A blank answer never leaves
        a half-edited card behind, and a successful edit records a single
        history entry.
        """
        card.edit(new_question, new_answer)

    def delete(self, card):
        for i, existing in enumerate(self._flashcards):
            if existing is card:
                del self._flashcards[i]
                return

    def record_update(self, card):
        card.record_update()

    def replace_all(self, flashcards):
        self._flashcards = list(flashcards)

    def total_updates(self):
        return sum(len(card.update_history) for card in self._flashcards)

    def aggregate_updates_by_date(self):
        counts = Counter(
            d.strftime(DATE_FORMAT)
            for card in self._flashcards
            for d in card.update_history
        )
        return sorted(counts.items())
