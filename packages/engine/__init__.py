from .codes import CODE_LENGTH, DIGITS, NUM_CODES, is_valid, validate_code, enumerate_all
from .errors import InvalidInput, InvalidCode, InvalidFeedback, GameOver
from .scoring import Feedback, SOLVED, score, validate_feedback, format_feedback, parse_feedback
from .constraints import Turn, is_consistent, filter_candidates, partition
from .secret import generate_secret
from .game import PlayerGame
from .solver import Solver, AwaitingFeedback, Continue, Solved, Contradiction

__all__ = [
    "CODE_LENGTH", "DIGITS", "NUM_CODES", "is_valid", "validate_code", "enumerate_all",
    "InvalidInput", "InvalidCode", "InvalidFeedback", "GameOver",
    "Feedback", "SOLVED", "score", "validate_feedback", "format_feedback", "parse_feedback",
    "Turn", "is_consistent", "filter_candidates", "partition",
    "generate_secret", "PlayerGame",
    "Solver", "AwaitingFeedback", "Continue", "Solved", "Contradiction",
]
