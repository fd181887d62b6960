import os

from dotenv import load_dotenv
import uvicorn

from inventory_service.config import Settings
from inventory_service.server.api import create_app

if __name__ == "__main__":
    load_dotenv()
    settings = Settings.from_env()
    settings.photos_dir.mkdir(parents=True, exist_ok=True)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=os.environ.get("LOG_LEVEL", "info"),
    )
