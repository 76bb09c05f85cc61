"""Command-line entry point: ``task-api`` serves the application with uvicorn."""

import logging

import uvicorn

from .config import Settings


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    uvicorn.run(
        "task_api.api.app:app",
        host=settings.service_host,
        port=settings.service_port,
    )


if __name__ == "__main__":
    main()
