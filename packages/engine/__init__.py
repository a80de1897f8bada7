from .rules import Outcome, normalize, is_original, is_possible, classify, accept
from .feedback import feedback

__all__ = ["Outcome", "normalize", "is_original", "is_possible", "classify", "accept",
           "feedback"]
