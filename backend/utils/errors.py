import re

# Credentials that can appear in request URLs echoed back by requests exceptions
_CREDENTIAL_PATTERN = re.compile(r"((?:api_key|token|key)=)[^&\s]+", re.IGNORECASE)


def _sanitize_error_message(error: Exception | str | None) -> str | None:
    """Redact credentials from an error message before sending it to clients.

    Args:
        error: Exception object or message

    Returns:
        Message with credential query parameters replaced by "***", or None
    """
    if error is None:
        return None
    return _CREDENTIAL_PATTERN.sub(r"\1***", str(error))
