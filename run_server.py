#!/usr/bin/env python3
"""
Portfolio tools server launcher
Runs the FastAPI app (tool catalog + execution API) under uvicorn
"""
import os
import sys

# Fix encoding issues on servers with ASCII locale
os.environ.setdefault('PYTHONIOENCODING', 'utf-8')

import asyncio
import logging
import uvicorn
from portfolio.config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main():
    logger.info("Starting portfolio tools server...")
    logger.info(f"Python {sys.version}, encoding={sys.getdefaultencoding()}")
    logger.info(f"HTTP server will run on http://{settings.http_host}:{settings.http_port}")

    config = uvicorn.Config(
        "portfolio.main:app",
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    await server.serve()

if __name__ == "__main__":
    asyncio.run(main())
