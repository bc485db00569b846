"""Pydantic AI adapter for the provider capability.

This module implements the ``Provider`` protocol on top of Pydantic AI's direct
model request API, translating the internal conversation model into Pydantic AI
message parts and back.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import List, Optional, Sequence, Tuple, Union

from pydantic_ai import ModelSettings
from pydantic_ai.direct import model_request
from pydantic_ai.messages import (
    BinaryContent,
    ModelMessage,
    ModelRequest,
    ModelResponse,
    SystemPromptPart,
    TextPart,
    UserContent,
    UserPromptPart,
)
from pydantic_ai.models import Model, ModelRequestParameters
from pydantic_ai.tools import ToolDefinition

from ..conversation import ConversationRole, ImageBlock, Message, RawBlock, TextBlock
from ..provider import ProviderUsage, ToolSpec

logger = logging.getLogger(__name__)


class PydanticAIProvider:
    """Pydantic AI implementation of the Provider protocol."""

    def __init__(self, model: Union[Model, str], model_settings: Optional[ModelSettings] = None):
        """Initialize the provider.

        Args:
            model: Pydantic AI model instance or a ``provider:model`` string
            model_settings: Optional settings passed on every request
        """
        self.model = model
        self.model_settings = model_settings

    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[ToolSpec],
    ) -> Tuple[Message, ProviderUsage]:
        """Run one completion through Pydantic AI."""
        history = self._to_model_messages(system, messages)
        parameters = ModelRequestParameters(function_tools=[self._to_tool_definition(tool) for tool in tools])

        logger.debug(f"Sending {len(history)} message(s) to {self._model_label()}")
        response = await model_request(
            self.model,
            history,
            model_settings=self.model_settings,
            model_request_parameters=parameters,
        )

        reply = Message.assistant()
        for part in response.parts:
            if isinstance(part, TextPart):
                reply = reply.with_text(part.content)

        usage = ProviderUsage(
            model=response.model_name or self._model_label(),
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            total_tokens=response.usage.total_tokens,
        )
        return reply, usage

    def _model_label(self) -> str:
        if isinstance(self.model, str):
            return self.model
        return self.model.model_name

    @staticmethod
    def _to_tool_definition(tool: ToolSpec) -> ToolDefinition:
        return ToolDefinition(
            name=tool.name,
            description=tool.description,
            parameters_json_schema=tool.input_schema or {"type": "object", "properties": {}},
        )

    def _to_model_messages(self, system: str, messages: Sequence[Message]) -> List[ModelMessage]:
        """Convert the conversation into Pydantic AI request/response messages.

        The system prompt is attached to the first request. A conversation that
        starts with an assistant turn gets a request holding only the system
        prompt in front of it.
        """
        history: List[ModelMessage] = []
        system_part = SystemPromptPart(content=system)

        for message in messages:
            if message.role == ConversationRole.user:
                parts = [UserPromptPart(content=self._to_user_content(message))]
                if system_part is not None:
                    parts.insert(0, system_part)
                    system_part = None
                history.append(ModelRequest(parts=parts))
            else:
                if system_part is not None:
                    history.append(ModelRequest(parts=[system_part]))
                    system_part = None
                history.append(ModelResponse(parts=[TextPart(content=self._to_text(message))]))

        if system_part is not None:
            history.append(ModelRequest(parts=[system_part]))
        return history

    @staticmethod
    def _to_user_content(message: Message) -> List[UserContent]:
        content: List[UserContent] = []
        for block in message.content:
            if isinstance(block, TextBlock):
                content.append(block.text)
            elif isinstance(block, ImageBlock):
                content.append(BinaryContent(data=base64.b64decode(block.data), media_type=block.mime_type))
            elif isinstance(block, RawBlock):
                content.append(json.dumps(block.payload))
        return content

    @staticmethod
    def _to_text(message: Message) -> str:
        texts = []
        for block in message.content:
            if isinstance(block, TextBlock):
                texts.append(block.text)
            elif isinstance(block, RawBlock):
                texts.append(json.dumps(block.payload))
            else:
                logger.debug(f"Dropping {block.type} block from assistant turn, not supported by Pydantic AI")
        return "\n".join(texts)


def build_provider(model_name: Optional[str], max_tokens: Optional[int] = None) -> Optional[PydanticAIProvider]:
    """Build a provider for a ``provider:model`` name, or ``None`` when unset."""
    if not model_name:
        return None
    model_settings = ModelSettings(max_tokens=max_tokens) if max_tokens else None
    logger.debug(f"Creating Pydantic AI provider for {model_name}")
    return PydanticAIProvider(model_name, model_settings=model_settings)
