from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_ENV: str = "dev"
    API_VERSION: str = "v1.0.0"
    LOG_LEVEL: str = "INFO"

    # Provider secret; absence is reported per request, not at boot.
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_TIMEOUT_SECONDS: int = 25
    COMPLETION_DEADLINE_SECONDS: float = 30.0

    CHAT_MAX_TURNS: int = 10
    CHAT_MAX_TOKENS: int = 1024
    JOURNAL_MAX_TOKENS: int = 512
    LLM_TEMPERATURE: float = 0.7

    DISCONNECT_POLL_SECONDS: float = 0.5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
