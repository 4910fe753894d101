from .models import AnswerRecord, Choice, Difficulty, Operation, Outcome, Question, SessionStats
from .config import DistractorConfig, QuizConfig, RangeConfig, TierCaps
from .distractors import DistractorEngine, build_choices
from .arithmetic_generator import ArithmeticGenerator
from .generator import MathQuizGenerator
from .session import QuizSession, QuizSessionError, SessionSettings
from .history import HistoryStore
from .report import export_txt, success_percentage

__all__ = [
    "AnswerRecord",
    "Choice",
    "Difficulty",
    "Operation",
    "Outcome",
    "Question",
    "SessionStats",
    "DistractorConfig",
    "QuizConfig",
    "RangeConfig",
    "TierCaps",
    "DistractorEngine",
    "build_choices",
    "ArithmeticGenerator",
    "MathQuizGenerator",
    "QuizSession",
    "QuizSessionError",
    "SessionSettings",
    "HistoryStore",
    "export_txt",
    "success_percentage",
]
