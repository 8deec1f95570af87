"""
DuplicateChatError - Raised by ChatRepository.create when a chat for the same
participant pair already exists.

Not an error for callers: it is the signal to re-read and return the chat
another request created first.
"""


class DuplicateChatError(Exception):
    """A chat for this participant pair has already been persisted."""

    def __init__(self, pair_key: str):
        super().__init__(f"Chat already exists for pair {pair_key}")
        self.pair_key = pair_key
