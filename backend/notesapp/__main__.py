"""
Entry point: python -m notesapp

Runs uvicorn with host and port taken from settings. If the note store is
unreachable at startup, the lifespan raises and uvicorn exits non-zero.
"""

import uvicorn

from notesapp.config import settings


def main() -> None:
    uvicorn.run(
        "notesapp.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
