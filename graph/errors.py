from security import AccessDeniedException
from utils.errors import EntityExistsException, EntityNotFoundException
from logger import get_logger

logger = get_logger()

NOT_FOUND = "NOT_FOUND"
FORBIDDEN = "FORBIDDEN"
BAD_REQUEST = "BAD_REQUEST"
VALIDATION_ERROR = "ValidationError"
INTERNAL_ERROR = "INTERNAL_ERROR"


def classify(original_error) -> str:
    """Error type reported to clients for an exception raised while resolving."""
    if original_error is None:
        # Raised by GraphQL itself: parsing, validation or argument coercion
        return VALIDATION_ERROR
    if isinstance(original_error, EntityNotFoundException):
        return NOT_FOUND
    if isinstance(original_error, AccessDeniedException):
        return FORBIDDEN
    if isinstance(original_error, EntityExistsException):
        return BAD_REQUEST
    if isinstance(original_error, ValueError):
        return VALIDATION_ERROR
    return INTERNAL_ERROR


def format_error(error) -> dict:
    """The error as sent to clients, with `extensions.classification` added."""
    classification = classify(error.original_error)
    if classification == INTERNAL_ERROR:
        logger.error(f"GraphQL error: {error.message}", exc_info=error.original_error)
        # Internal details stay in the log
        error.message = "Internal server error"
    formatted = dict(error.formatted)
    formatted["extensions"] = {**formatted.get("extensions", {}), "classification": classification}
    return formatted
