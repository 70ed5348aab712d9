"""Entrypoint: run the proposal discovery server."""

import uvicorn

from proposal_discovery.api.app import create_app
from proposal_discovery.config.settings import Settings


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
