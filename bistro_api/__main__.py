import uvicorn

from .config import SETTINGS


def main():
    uvicorn.run(
        "bistro_api.main:app",
        host=SETTINGS["server"]["host"],
        port=SETTINGS["server"]["port"],
        log_level=SETTINGS["logging"]["level"].lower(),
    )


if __name__ == "__main__":
    main()
