from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TRANSEDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage client
    api_base_url: str = "http://localhost:3124"
    request_timeout: float = 10.0

    # Translations
    main_language: str = "en"
    translations_dir: str = "translations"

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 3124
    app_debug: bool = False

    # Logging
    log_level: str = "INFO"


settings = Settings()
