class DecodingError(Exception):
    """Base exception for response decoding errors."""


class MalformedPayloadError(DecodingError):
    """Raised when text cannot be decoded into a response envelope.

    Carries the offending text so that the recovery layer can embed it in
    the failure envelope it synthesizes.
    """

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text
