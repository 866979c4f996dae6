# src/capacity_chart/utils/config.py
"""
Settings for the capacity chart package.

Values come from the environment (prefix ``CAPACITY_``) or a ``.env`` file in
the project root; everything has a working default so the bundled assets load
out of the box.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from project root
BASE_DIR = Path(__file__).resolve().parents[3]
load_dotenv(BASE_DIR / ".env")

ASSETS_DIR = Path(__file__).resolve().parents[1] / "data" / "assets"


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CAPACITY_",
        env_ignore_empty=True,
        extra="ignore",
    )

    capacity_data_path: Path = ASSETS_DIR / "capacity-data.json"
    job_data_path: Path = ASSETS_DIR / "job-data.json"

    output_dir: Path = Path("output")
    debug_export_filename: str = "capacity-debug-data.json"
    excel_export_filename: str = "capacity-debug-data.xlsx"

    def __repr__(self):
        return f"<AppConfig capacity={self.capacity_data_path.name} jobs={self.job_data_path.name}>"


# Singleton
config = AppConfig()
