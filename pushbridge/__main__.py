import uvicorn

from pushbridge.core.config import settings


def main() -> None:
    uvicorn.run("pushbridge.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
