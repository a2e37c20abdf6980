from flowledger.ai.prompts.analysis import ANALYSIS_SYSTEM, ANALYSIS_USER
from flowledger.ai.prompts.question import QUESTION_SYSTEM, QUESTION_USER
from flowledger.ai.prompts.statement_parsing import STATEMENT_PARSING_SYSTEM, STATEMENT_PARSING_USER

__all__ = [
    "ANALYSIS_SYSTEM",
    "ANALYSIS_USER",
    "QUESTION_SYSTEM",
    "QUESTION_USER",
    "STATEMENT_PARSING_SYSTEM",
    "STATEMENT_PARSING_USER",
]
