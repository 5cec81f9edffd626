from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="TitleCatalog", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")

    # MongoDB
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        validation_alias="MONGO_URI",
    )
    mongo_db: str = Field(default="title_catalog", validation_alias="MONGO_DB")
    mongo_titles_collection: str = Field(
        default="titles",
        validation_alias="MONGO_TITLES_COLLECTION",
    )
    mongo_actors_collection: str = Field(
        default="actors",
        validation_alias="MONGO_ACTORS_COLLECTION",
    )
    mongo_title_actors_collection: str = Field(
        default="title_actors",
        validation_alias="MONGO_TITLE_ACTORS_COLLECTION",
    )

    # Media files
    movie_folder: str = Field(
        default="./movies",
        validation_alias="MOVIE_FOLDER",
        description="Base directory or fsspec URL of movie media files.",
    )
    series_folder: str = Field(
        default="./series",
        validation_alias="SERIES_FOLDER",
        description="Base directory or fsspec URL of series media files.",
    )
    media_storage_options: dict = Field(
        default_factory=dict,
        validation_alias="MEDIA_STORAGE_OPTIONS",
    )

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"{self.app_env}.log"


# Global settings instance
settings = Settings()
