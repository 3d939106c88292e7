"""Error taxonomy shared by the ingestion, provider and controller layers.

Every error carries an i18n ``key`` so the controller can turn it into a
localized message at the action boundary. Library code only raises.
"""

from __future__ import annotations

from hiresight.i18n import translate


class HiresightError(Exception):
    """Base class for all user-facing failures."""

    key = "error.unknown"

    def __init__(self, detail: str = "", *, key: str | None = None):
        super().__init__(detail or self.key)
        self.detail = detail
        if key is not None:
            self.key = key

    def localized(self, language: str = "en") -> str:
        return translate(self.key, language)


class MissingInput(HiresightError, ValueError):
    """A required field was empty before any call was attempted."""

    _FIELD_KEYS = {
        "jobDescription": "error.jobDescriptionMissing",
        "resume": "error.resumeMissing",
        "transcript": "error.transcriptMissing",
        "chatMessage": "error.chatMessageMissing",
        "analysis": "error.analysisMissing",
    }

    def __init__(self, field: str, detail: str = ""):
        super().__init__(
            detail or f"Missing required input: {field}",
            key=self._FIELD_KEYS.get(field, "error.inputMissing"),
        )
        self.field = field


class UnsupportedFormat(HiresightError, ValueError):
    key = "error.unsupportedFormat"

    def __init__(self, extension: str):
        super().__init__(f"Unsupported file format: {extension or '(none)'}")
        self.extension = extension


class DocumentReadError(HiresightError, OSError):
    key = "error.fileRead"


class FetchError(HiresightError):
    key = "error.urlFetch"


class UnsafeURLError(FetchError):
    key = "error.urlBlocked"


class ExtractionError(HiresightError):
    key = "error.urlExtraction"


class MissingCredential(HiresightError):
    def __init__(self, provider: str):
        super().__init__(
            f"No API key configured for provider {provider!r}",
            key=f"error.{provider}KeyMissing",
        )
        self.provider = provider


class ProviderRequestFailure(HiresightError):
    key = "error.providerRequest"


class ResponseParseFailure(HiresightError, ValueError):
    key = "error.responseParse"


class ActionInProgress(HiresightError):
    key = "error.actionInProgress"
