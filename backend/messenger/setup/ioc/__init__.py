"""
Dishka providers and container factory.

Import from the submodules: ``providers`` is store-agnostic, ``container``
pulls in the generated Prisma client.
"""
