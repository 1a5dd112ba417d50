"""Domain errors raised by the analysis, document and application services."""


class InvalidResumeTextError(TypeError):
    """Raised when the analysis engine is handed something other than a string."""


class DocumentNotFoundError(LookupError):
    """Raised when a document id has no stored row."""


class DocumentTextMissingError(ValueError):
    """Raised when a document exists but has no extracted text to analyze."""


class ApplicationNotFoundError(LookupError):
    """Raised when a job application id has no stored row."""


class JobStatusNotFoundError(LookupError):
    """Raised when a job status key is not defined."""


class InvalidApplicationError(ValueError):
    """Raised when an application write names an unknown status or changes nothing."""


class LLMServiceError(RuntimeError):
    """Raised when the hosted LLM cannot produce a usable reply."""


def ensure_text(text: object) -> str:
    if not isinstance(text, str):
        raise InvalidResumeTextError(
            f"resume text must be str, got {type(text).__name__}"
        )
    return text
