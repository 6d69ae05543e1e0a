class BfhlError(Exception):
    """Base for failures that are reported back to the caller as a 400 envelope."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(BfhlError):
    """The request body does not select exactly one operation."""


class InvalidArgumentError(BfhlError):
    """An operation's input fails its type, shape or range contract."""


class AiRequestFailedError(BfhlError):
    """The AI provider call failed or its answer could not be used."""


class EmptyResponseError(BfhlError):
    """Nothing was left of an AI answer after normalization."""
