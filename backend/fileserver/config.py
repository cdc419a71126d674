from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field, AliasChoices
import os


class HandlerSettings(BaseModel):
    root_directory: str = Field(
        default_factory=lambda: os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "files")
    )
    # serve paths as-is, including ".." segments that leave the root
    legacy_path_resolution: bool = False


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_name: str = "NoAuth File Server"

    # Server
    host: str = Field(
        default="127.0.0.1",
        validation_alias=AliasChoices("HOST", "host"),
    )
    port: int = Field(
        default=8080,
        validation_alias=AliasChoices("PORT", "port"),
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    # Static file handler (HANDLER__ROOT_DIRECTORY, HANDLER__LEGACY_PATH_RESOLUTION)
    handler: HandlerSettings = Field(default_factory=HandlerSettings)


settings = Settings()
