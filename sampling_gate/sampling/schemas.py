"""
Sampling Schemas.

Pydantic models for the sampling wire format: the messages an extension sends,
the request envelope, the reviewer decision, and the responses. Content blocks
follow the MCP shape and are tagged by their ``type`` field. Text and image are
first-class; any other kind is accepted and carried through untouched.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

DENIAL_TEXT = "Sampling request denied by user."
DENIED_MODEL = "none"
DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant"
PENDING_MESSAGE = "Sampling request received. Awaiting user approval."
STOP_REASON_END_TURN = "end_turn"
STOP_REASON_USER_DENIED = "user_denied"


class Role(str, Enum):
    user = "user"
    assistant = "assistant"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Role"]:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class SamplingAction(str, Enum):
    approve = "approve"
    edit = "edit"
    deny = "deny"


class TextContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ImageContent(BaseModel):
    """Base64 encoded image with its MIME type."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["image"] = "image"
    data: str
    mime_type: str = Field(..., alias="mimeType")


class OpaqueContent(BaseModel):
    """Any content kind without a dedicated model; extra fields are preserved."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str

    def payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def _content_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if kind in ("text", "image"):
        return kind
    return "other"


SamplingContent = Annotated[
    Union[
        Annotated[TextContent, Tag("text")],
        Annotated[ImageContent, Tag("image")],
        Annotated[OpaqueContent, Tag("other")],
    ],
    Discriminator(_content_tag),
]


class SamplingMessage(BaseModel):
    """A single message exchanged with an extension."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="The role of the message sender (user or assistant).")
    content: SamplingContent = Field(..., description="The message content (text, image, etc.).")

    @classmethod
    def text(cls, role: Role, text: str) -> "SamplingMessage":
        return cls(role=role, content=TextContent(text=text))


class SamplingRequest(BaseModel):
    """
    Sampling request issued by an extension.

    Nothing here is sent to a model until a reviewer approves or edits it.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "session_id": "20250101_1",
                "extension_name": "developer",
                "messages": [{"role": "user", "content": {"type": "text", "text": "2+2?"}}],
                "max_tokens": 256,
            }
        },
    )

    session_id: str = Field(..., description="The session ID for the current agent session.")
    extension_name: str = Field(..., description="The extension that is making the sampling request.")
    messages: List[SamplingMessage] = Field(..., description="The messages to send to the model.")
    model_preferences: Optional[List[str]] = Field(default=None, description="Optional model preferences.")
    system_prompt: Optional[str] = Field(default=None, description="Optional system prompt.")
    include_context: Optional[str] = Field(default=None, description="Whether to include context.")
    temperature: Optional[float] = Field(default=None, description="Temperature for the model.")
    max_tokens: int = Field(..., description="Maximum tokens to generate.")
    stop_sequences: Optional[List[str]] = Field(default=None, description="Stop sequences.")
    metadata: Optional[Any] = Field(default=None, description="Additional opaque metadata.")


class SamplingApprovalRequest(BaseModel):
    """
    Reviewer decision on a sampling request.

    ``action`` stays a plain string so that an unknown value is reported as a bad
    decision by the service instead of failing schema validation.
    """

    session_id: str = Field(..., description="The session ID for the current agent session.")
    original_request: SamplingRequest = Field(..., description="The original sampling request.")
    action: str = Field(..., description="The reviewer's action: approve, deny, or edit.", examples=["approve"])
    edited_messages: Optional[List[SamplingMessage]] = Field(
        default=None,
        description="Replacement messages, required when action is 'edit'.",
    )


class SamplingResponse(BaseModel):
    """Result of a resolved sampling request."""

    message: SamplingMessage = Field(..., description="The generated (or denial) message.")
    model: str = Field(..., description="The model used for generation, 'none' for denials.")
    stop_reason: Optional[str] = Field(default=None, description="The reason generation stopped.")


class SamplingPendingResponse(BaseModel):
    """Acknowledgement returned by intake while the request awaits review."""

    status: Literal["pending"] = "pending"
    message: str = PENDING_MESSAGE
