#!/usr/bin/env python3
"""
Run script for the sample message service
"""
import uvicorn

from sample.config.settings import settings
from sample.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
