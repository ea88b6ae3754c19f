"""
gate_opener.api.__main__

Entrypoint for running the FastAPI application via `python -m gate_opener.api`.
"""

from __future__ import annotations

import uvicorn

from gate_opener.api.app import create_app
from gate_opener.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
