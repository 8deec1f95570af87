"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Operations that may write (get-or-create chat, send message, sync user)
- queries/   → Read operations (list chats, list messages, list users)
- services/  → Shared orchestration (chat summaries)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes) and id parsing

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and repositories
"""
