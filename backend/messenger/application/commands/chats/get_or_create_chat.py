"""
Get-or-create Chat Command.

Returns the one chat between the caller and another user, creating it on
first request.

Steps:
1. Parse participant id (InvalidArgumentError if missing or malformed)
2. Build the canonical ParticipantPair (InvalidArgumentError for self-chat)
3. Look up the chat for the pair; return it if present
4. Otherwise make sure the participant exists and insert a new chat
5. If the insert loses a race (DuplicateChatError), re-read the winner's chat

Concurrency:
    Two simultaneous requests for the same pair can both miss in step 3.
    The repository rejects the second insert through the unique
    (user_lower_id, user_higher_id) constraint, and that request returns the
    chat created by the first one. Only one chat per pair is ever stored.
"""

import logging
from dataclasses import dataclass

from messenger.application.common.identifiers import parse_user_id
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.application.services.chat_summaries import (
    ChatSummary,
    ChatSummaryService,
)
from messenger.domain.entities.chat import Chat
from messenger.domain.exceptions import (
    DuplicateChatError,
    EntityNotFoundError,
    StoreFailureError,
)
from messenger.domain.ports.repositories import ChatRepository, UserRepository
from messenger.domain.value_objects.participant_pair import ParticipantPair
from messenger.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetOrCreateChatCommand(Command[ChatSummary]):
    user_id: UserId
    participant_id: str


class GetOrCreateChatHandler(CommandHandler[ChatSummary]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        user_repository: UserRepository,
        summaries: ChatSummaryService,
    ):
        self._chat_repository = chat_repository
        self._user_repository = user_repository
        self._summaries = summaries

    async def execute(self, command: GetOrCreateChatCommand) -> ChatSummary:
        participant_id = parse_user_id(command.participant_id, label="participant")
        pair = ParticipantPair.of(command.user_id, participant_id)

        chat = await self._chat_repository.get_by_pair(pair)
        if chat is None:
            chat = await self._create(pair, participant_id)

        return await self._summaries.summarize_one(chat, viewer=command.user_id)

    async def _create(self, pair: ParticipantPair, participant_id: UserId) -> Chat:
        participant = await self._user_repository.get_by_id(participant_id)
        if participant is None:
            raise EntityNotFoundError("Participant not found")

        chat = Chat.start(pair)
        try:
            await self._chat_repository.create(chat)
        except DuplicateChatError:
            logger.info(f"Chat for pair {pair} created concurrently, re-reading")
            existing = await self._chat_repository.get_by_pair(pair)
            if existing is None:
                # The constraint fired but the row is not visible: nothing sane to return
                raise StoreFailureError("chat.get_by_pair after duplicate insert")
            return existing

        logger.info(f"Created chat {chat.id} for pair {pair}")
        return chat
