#!/usr/bin/env python3
"""
Feedrank API server: entrypoint for python -m feedrank_server.server.
"""

import uvicorn

from .config import ServerConfig


def main() -> None:
    config = ServerConfig.from_env()
    uvicorn.run(
        "feedrank_server.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
