import logging

import uvicorn

from .config import settings


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("yestv").info("YES TV API listening on %s:%s", settings.APP_HOST, settings.APP_PORT)
    uvicorn.run("yestv.main:app", host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    main()
