#!/usr/bin/env python3
"""Run the prediction API server."""

import uvicorn

from settings import HOST, LOG_LEVEL, PORT
from settings.logging import setup_logging

setup_logging(level=LOG_LEVEL, to_file=True)

if __name__ == "__main__":
    uvicorn.run("web.server:app", host=HOST, port=PORT)
