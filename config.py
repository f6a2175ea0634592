# config.py
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Optional

load_dotenv()


class Settings(BaseSettings):
    app_name: str = "Plate Region Lookup"

    # --- Region table ---
    # JSON file with the same shape as constants.PLATE_REGIONS; built-in table if unset
    region_table_path: Optional[str] = os.getenv("REGION_TABLE_PATH")

    # --- History / favorites ---
    history_file: str = os.getenv("HISTORY_FILE", "data/plate_history.json")
    history_limit: int = 10
    favorites_limit: int = 5

    # --- API Settings ---
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", 5000))
    log_level: str = os.getenv("LOG_LEVEL", "info")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()

import logging
import sys

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

logger.info("Configuration loaded successfully.")
logger.info(f"Region table: {settings.region_table_path or 'built-in'}")
logger.info(f"History file: {settings.history_file}")
logger.info(
    f"History limit: {settings.history_limit}, favorites limit: {settings.favorites_limit}"
)
