#!/usr/bin/env python3
"""Start the Wall Placement Engine API server."""

import logging

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "placement.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["placement"],
    )
