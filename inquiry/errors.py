"""
Failure taxonomy shared by both handlers.

Every error here is terminal for the invocation: nothing retries. The answer
handler is the only caller that catches one (ModelInvocationError) and keeps going.
"""


class InquiryError(Exception):
    """Base class for all inquiry pipeline failures."""


class InvalidInput(InquiryError):
    """The trigger event carried no inquiry id."""


class NotFound(InquiryError):
    """No inquiry record exists for the given id."""

    def __init__(self, inquiry_id: str):
        super().__init__(f"inquiry not found: {inquiry_id}")
        self.inquiry_id = inquiry_id


class EmptyContent(InquiryError):
    """The inquiry record has no review text to work on."""

    def __init__(self, inquiry_id: str):
        super().__init__(f"no review text found: {inquiry_id}")
        self.inquiry_id = inquiry_id


class StoreError(InquiryError):
    """Reading from or writing to the inquiry table failed."""


class ModelInvocationError(InquiryError):
    """A Bedrock call failed or returned something we could not use."""
