"""Run the API with uvicorn: python -m src.app"""
import uvicorn

from src.app.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.app.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
