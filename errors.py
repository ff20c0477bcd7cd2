"""Errors raised while validating and dispatching a question request."""


class WorkflowError(Exception):
    """Base class for every failure shown in the error banner."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WorkflowError):
    """Form input is incomplete; raised before any network activity."""


class ConfigurationError(WorkflowError):
    """The webhook URL is missing from the deployment."""


class TransportError(WorkflowError):
    """The webhook answered with a failure status or rejected the request."""


class UnknownError(WorkflowError):
    """Anything else that went wrong during a submission attempt."""
