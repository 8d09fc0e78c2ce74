"""
Errors surfaced to the user while collecting brands.
"""

GENERIC_AGENT_ERROR = "An error occurred while processing your request."
UPLOAD_FAILED = "Failed to upload file. Please try again."


class BrandCollectorError(Exception):
    """Base class for user-visible collection failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(BrandCollectorError):
    """The brand list or uploaded file was rejected before any network call."""

    status_code = 400


class UploadError(BrandCollectorError):
    status_code = 502

    def __init__(self, message: str = UPLOAD_FAILED):
        super().__init__(message)


class AgentCallError(BrandCollectorError):
    status_code = 502


class ExtractionError(BrandCollectorError):
    """The agent answered but no brand records could be recovered."""

    status_code = 422

    def __init__(self, message: str, shape: str):
        super().__init__(message)
        self.shape = shape
