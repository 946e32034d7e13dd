from __future__ import annotations

import uvicorn

from statusboard.core.config import settings


def main() -> None:
    uvicorn.run("statusboard.api.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
