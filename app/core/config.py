from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_ENV: str = "dev"
    API_VERSION: str = "v1.0.0"
    LOG_LEVEL: str = "INFO"

    # Empty key means the remote path is disabled and every request is answered locally.
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_TIMEOUT_SECONDS: int = 25

    ASSESSMENT_TEMPERATURE: float = 0.3
    CHAT_TEMPERATURE: float = 0.7

    # Optional questionnaire front-end (served at /)
    STATIC_DIR: str = ""
    STATIC_INDEX: str = "hackathontest.html"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
