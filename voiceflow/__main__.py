import uvicorn

from .config import get_settings
from .logging_config import configure_logging


def main() -> None:
    configure_logging()
    settings = get_settings()
    uvicorn.run("voiceflow.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
