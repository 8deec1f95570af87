"""Direct messaging backend: pairwise chats and messages between users."""
