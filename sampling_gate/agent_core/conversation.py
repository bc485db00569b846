"""Internal conversation message model.

This is the message representation handed to model providers. It is richer than
the sampling wire format: a message carries an ordered list of content blocks, and
builders return new messages instead of mutating in place.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ConversationRole(str, Enum):
    user = "user"
    assistant = "assistant"


class TextBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ImageBlock(BaseModel):
    """Inline image. ``data`` is base64 encoded."""

    model_config = ConfigDict(frozen=True)

    type: Literal["image"] = "image"
    data: str
    mime_type: str


class RawBlock(BaseModel):
    """Content kind the conversation model has no dedicated block for.

    The original payload is kept as-is so providers that understand it can still
    make use of it.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["raw"] = "raw"
    kind: str
    payload: Dict[str, Any] = Field(default_factory=dict)


MessageContent = Annotated[Union[TextBlock, ImageBlock, RawBlock], Field(discriminator="type")]


class Message(BaseModel):
    """A single conversation turn."""

    model_config = ConfigDict(frozen=True)

    role: ConversationRole
    content: List[MessageContent] = Field(default_factory=list)
    created: int = Field(default_factory=lambda: int(time.time()))

    @classmethod
    def user(cls) -> "Message":
        return cls(role=ConversationRole.user)

    @classmethod
    def assistant(cls) -> "Message":
        return cls(role=ConversationRole.assistant)

    def with_content(self, content: MessageContent) -> "Message":
        return self.model_copy(update={"content": [*self.content, content]})

    def with_text(self, text: str) -> "Message":
        return self.with_content(TextBlock(text=text))

    def with_image(self, data: str, mime_type: str) -> "Message":
        return self.with_content(ImageBlock(data=data, mime_type=mime_type))

    def as_concat_text(self) -> str:
        """Join all text blocks with newlines, ignoring everything else."""
        return "\n".join(block.text for block in self.content if isinstance(block, TextBlock))
