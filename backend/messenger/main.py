"""
ASGI entry point.

    uvicorn messenger.main:app --host 0.0.0.0 --port 3000

The container is created at module level, before the app starts, because
Dishka adds middleware and that must happen before startup.
"""

from messenger.fastapi_app import create_fastapi_app
from messenger.setup.ioc.container import create_container

container = create_container()
app = create_fastapi_app(container)
