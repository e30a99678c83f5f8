"""Error types raised by the snippet registry and their HTTP status mapping."""

# Status used for any error whose name is not listed in ERROR_STATUS_CODES.
# Unclassified errors are reported with 200 and an error payload, which is the
# behavior clients of the snippet endpoints already rely on.
FALLBACK_STATUS_CODE = 200


class SnippetError(Exception):
    name = "SnippetError"


class BrokenBoundary(SnippetError):
    """Snippet start/end markers in a source file do not match up."""

    name = "BrokenBoundary"


ERROR_STATUS_CODES: dict[str, int] = {
    BrokenBoundary.name: 422,
}


def error_name(error: Exception) -> str:
    return getattr(error, "name", type(error).__name__)


def status_for_error(error: Exception) -> int:
    return ERROR_STATUS_CODES.get(error_name(error), FALLBACK_STATUS_CODE)


def get_error_message(error: Exception) -> str:
    return str(error) or type(error).__name__
