# credcheck/errors.py
"""
Error taxonomy for the check and metadata handlers.

Every error carries the HTTP status the routers answer with. Malformed model
output is not an error: the LLM agent recovers it into a fallback result.
"""


class CheckError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CheckError):
    """Missing or invalid `article` field."""
    status_code = 400


class ConfigurationError(CheckError):
    """Server-side credential not configured."""
    status_code = 500


class FetchError(CheckError):
    """Reader service answered non-2xx or could not be reached."""
    status_code = 500


class UpstreamError(CheckError):
    """LLM service answered non-2xx or could not be reached."""
    status_code = 500
