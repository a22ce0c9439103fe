"""Pydantic models for outbound notification email."""

from pydantic import BaseModel, ConfigDict, Field


class EmailAttachment(BaseModel):
    """Reference to a file on disk to attach to the notification."""

    filename: str = Field(..., min_length=1)
    path: str = Field(..., min_length=1)


class OutboundEmail(BaseModel):
    """A fully composed notification, independent of the mail transport."""

    model_config = ConfigDict(str_strip_whitespace=True)

    from_address: str
    to: str = Field(..., min_length=1)
    # Passed through exactly as stored on the customer record
    cc: str | None = None
    subject: str
    html: str
    text: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    attachment: EmailAttachment | None = None
