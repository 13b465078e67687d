"""
Chat orchestration for a single chat turn.

Flow:
1. Resolve the conversation (unknown ids start a fresh one)
2. Ask the completion gateway for a reply using the stored history
3. Append the user and assistant turns, creating or updating the record
4. Return the response envelope
"""
import logging
from typing import Optional

from luna.models import DEFAULT_TOPIC, Conversation, Message, MessageRole
from luna.schemas.chat import ChatRequest, ChatResponse
from luna.services.completion_gateway import CompletionGateway
from luna.services.titles import derive_title
from luna.storage import ConversationStore

logger = logging.getLogger(__name__)


class ChatService:
    """
    Ties the conversation store and the completion gateway together.

    Gateway failures never reach this class; anything raised here comes from
    the store and is left for the transport layer to report.
    """

    def __init__(self, store: ConversationStore, gateway: CompletionGateway):
        self.store = store
        self.gateway = gateway

    async def send_message(self, request: ChatRequest) -> ChatResponse:
        """
        Handle one chat turn.

        Args:
            request: Validated chat request

        Returns:
            ChatResponse with the assistant reply and the conversation id
        """
        conversation = await self._resolve_conversation(request.conversation_id)

        topic = request.topic or (conversation.topic if conversation is not None else None)
        history = conversation.messages if conversation is not None else []
        reply = await self.gateway.complete(request.message, topic=topic, history=history)

        user_message = Message(role=MessageRole.USER, content=request.message)
        assistant_message = Message(role=MessageRole.ASSISTANT, content=reply.response)

        if conversation is not None:
            conversation = await self.store.update(conversation.id, {
                "messages": [*conversation.messages, user_message, assistant_message],
                "title": conversation.title or derive_title(request.message),
            })
            if conversation is None:
                # Deleted while the reply was being generated
                raise LookupError(f"Conversation {request.conversation_id} disappeared during chat turn")
        else:
            conversation = await self.store.create(
                title=derive_title(request.message),
                topic=request.topic or DEFAULT_TOPIC.value,
                messages=[user_message, assistant_message],
            )
            logger.info("Started conversation %s (topic=%s)", conversation.id, conversation.topic)

        return ChatResponse(
            response=reply.response,
            conversation_id=conversation.id,
            resources=reply.resources,
        )

    async def _resolve_conversation(self, conversation_id: Optional[str]) -> Optional[Conversation]:
        if not conversation_id:
            return None

        conversation = await self.store.get(conversation_id)
        if conversation is None:
            logger.info("Unknown conversation %s, starting a new one", conversation_id)
        return conversation
