"""Error types surfaced by the chat pipeline.

Only two failures are ever visible to a caller:

- ``InputError``: the request is missing required data. Raised before any
  upstream call is made.
- ``UpstreamGenerationError``: the generation service could not produce an
  answer. Aborts the request.

Translation failures are not errors. The translation gateway logs them and
hands back the untranslated text.
"""

from typing import Optional


class HRAssistantError(Exception):
    """Base class for all pipeline errors."""


class InputError(HRAssistantError):
    """A required request field is missing or empty."""


class UpstreamGenerationError(HRAssistantError):
    """The generation service failed or returned an unusable result."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.details = details or message
