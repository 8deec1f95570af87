"""
Main entry point for the FastAPI application.
Run this file to start the server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn messenger.main:app --host 0.0.0.0 --port 3000 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from messenger.config.settings import Config

if __name__ == "__main__":
    debug = Config.APP_ENV == "development"

    uvicorn.run(
        "messenger.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
