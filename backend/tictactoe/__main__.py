"""Run the API with uvicorn: ``python -m tictactoe``."""

import uvicorn

from tictactoe.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "tictactoe.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
