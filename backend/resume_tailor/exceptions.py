"""Error taxonomy shared by the prompt builder, provider adapter and wizard."""

from typing import Optional


class ResumeTailorError(Exception):
    """Base class for every error surfaced to the user as a notification."""

    default_message = "Something went wrong. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredentialError(ResumeTailorError):
    """No API key was supplied for the selected provider."""

    default_message = "Please enter your API key first"


class MissingInputError(ResumeTailorError):
    """A required text field is empty."""

    default_message = "Please enter input first"


class ProviderError(ResumeTailorError):
    """
    The provider rejected the request or could not be reached.

    Attributes:
        message: Error message extracted from the provider response, or a
            generic one when the body could not be parsed
        status_code: HTTP status returned by the provider, if any
    """

    default_message = "API request failed"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class WizardBusyError(ResumeTailorError):
    """A provider call for this wizard session is already in flight."""

    default_message = "A request is already in progress for this step"


class WizardStateError(ResumeTailorError):
    """The requested transition is not valid from the current wizard state."""

    default_message = "This action is not available at the current step"
