"""
User-Friendly Error Handler.

Turns exceptions raised while reading a word list into short messages
with a suggestion, for the command line.
"""

from typing import Dict, Optional
import logging

from sedwords.errors import WordListUnavailableError

logger = logging.getLogger(__name__)


def format_user_friendly_error(
    error: Exception,
    technical_details: Optional[str] = None
) -> Dict:
    """
    Convert technical error to user-friendly message.

    Returns:
        {
            "message": str,          # User-facing message
            "suggestion": str,       # What to try next
            "technical": str,        # Original error text
            "severity": str,         # "critical", "error", "warning"
        }
    """
    error_str = str(error)

    for pattern, friendly_error in ERROR_MAPPINGS.items():
        if pattern.lower() in error_str.lower():
            result = friendly_error.copy()
            result["technical"] = technical_details or error_str
            logger.debug(f"Mapped error to user-friendly: {result['message']}")
            return result

    if isinstance(error, WordListUnavailableError):
        return {
            "message": f"Failed to open {error.path}",
            "suggestion": "Check that the word list path is correct and readable",
            "technical": technical_details or error_str,
            "severity": "critical",
        }

    return {
        "message": "Unexpected error while processing the word list",
        "suggestion": "Run again with --verbose for details",
        "technical": technical_details or error_str,
        "severity": "error",
    }


# Error mappings: pattern -> user-friendly info
ERROR_MAPPINGS = {
    "no such file": {
        "message": "Word list not found",
        "suggestion": "Check the path; one word per line is expected",
        "severity": "critical",
    },
    "permission denied": {
        "message": "No permission to read the word list",
        "suggestion": "Check the file permissions",
        "severity": "critical",
    },
    "is a directory": {
        "message": "The word list path is a directory",
        "suggestion": "Pass a file with one word per line",
        "severity": "critical",
    },
    "codec can't decode": {
        "message": "The word list is not valid text in the configured encoding",
        "suggestion": "Convert the file to UTF-8 or set SEDWORDS_ENCODING",
        "severity": "error",
    },
}


def format_error_for_logging(error: Exception, context: str = "") -> str:
    """
    Format error for the log.

    Args:
        error: The exception
        context: Where it happened

    Returns:
        Multi-line error string
    """
    friendly = format_user_friendly_error(error)

    lines = [
        friendly['message'],
        f"Suggestion: {friendly['suggestion']}",
        f"Technical: {friendly['technical']}",
    ]

    if context:
        lines.insert(0, f"Context: {context}")

    return "\n".join(lines)
