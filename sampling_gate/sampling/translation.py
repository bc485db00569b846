"""Translation between sampling wire messages and conversation messages.

Inbound messages are never rejected for their content kind: text and images get
dedicated blocks and everything else rides along as a raw block. Outbound, only
the first block of the reply is used, and anything that has no wire form becomes
empty text so that an odd provider reply does not fail the whole request.
"""

from __future__ import annotations

from typing import List, Sequence

from sampling_gate.agent_core.conversation import (
    ConversationRole,
    ImageBlock,
    Message,
    MessageContent,
    RawBlock,
    TextBlock,
)

from .schemas import (
    ImageContent,
    Role,
    SamplingContent,
    SamplingMessage,
    TextContent,
)

_ROLE_TO_CONVERSATION = {
    Role.user: ConversationRole.user,
    Role.assistant: ConversationRole.assistant,
}


def to_message_content(content: SamplingContent) -> MessageContent:
    """Convert a wire content block into a conversation block, keyed on its ``type`` tag."""
    if content.type == "text":
        return TextBlock(text=content.text)
    if content.type == "image":
        return ImageBlock(data=content.data, mime_type=content.mime_type)
    return RawBlock(kind=content.type, payload=content.payload())


def to_conversation_message(message: SamplingMessage) -> Message:
    """Convert one wire message into a conversation message with the same role."""
    converted = Message(role=_ROLE_TO_CONVERSATION[message.role])
    if message.content.type == "text":
        return converted.with_text(message.content.text)
    return converted.with_content(to_message_content(message.content))


def to_conversation_messages(messages: Sequence[SamplingMessage]) -> List[Message]:
    return [to_conversation_message(message) for message in messages]


def to_sampling_content(message: Message) -> SamplingContent:
    """Wire content for a provider reply, taken from its first block."""
    if not message.content:
        return TextContent(text="")

    first = message.content[0]
    if first.type == "text":
        return TextContent(text=first.text)
    if first.type == "image":
        return ImageContent(data=first.data, mime_type=first.mime_type)
    return TextContent(text="")
