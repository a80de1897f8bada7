from .errors import InitializationError
from .session import (FALLBACK_ROOT_WORD, DEFAULT_START_WORDS, GameSession, load_start_words,
                      start_session)

__all__ = ["InitializationError", "FALLBACK_ROOT_WORD", "DEFAULT_START_WORDS", "GameSession",
           "load_start_words", "start_session"]
