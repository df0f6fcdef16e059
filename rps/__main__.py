"""
Run the server: python -m rps
Host and port come from HOST / PORT (see rps.core.config).
"""

import uvicorn

from rps.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "rps.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
