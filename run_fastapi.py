#!/usr/bin/env python3
"""
Run the folder API locally with auto-reload.
"""

import os

import uvicorn

if __name__ == "__main__":
    # Set default environment variables if not set
    os.environ.setdefault("ENVIRONMENT", "development")
    os.environ.setdefault("DATABASE_HOST", "postgresql://localhost:5432")
    os.environ.setdefault("DATABASE_NAME", "folders")
    os.environ.setdefault("LOGGING_USE_CONFIG", "false")

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "3000")), reload=True, log_level="info")
