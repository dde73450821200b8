from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # Database
    DB_USER: str = Field("polyglot_admin")
    DB_PASSWORD: str = Field("PolyglotPass2024")
    DB_NAME: str = Field("polyglot")
    DB_HOST: str = Field("postgres")
    DB_PORT: int = Field(5432)
    DATABASE_URL: str | None = Field(None)

    # GhanaNLP translation/speech API
    GHANANLP_BASE_URL: str = Field("https://translation-api.ghananlp.org")
    GHANANLP_API_KEY_DEV: str | None = Field(None)
    GHANANLP_API_KEY_BASIC: str | None = Field(None)
    GHANANLP_TIMEOUT_SEC: float | None = Field(None)

    # Google Cloud (Vertex AI summaries)
    GOOGLE_APPLICATION_CREDENTIALS: str | None = Field(None)
    GOOGLE_PROJECT_ID: str | None = Field(None)
    VERTEX_AI_LOCATION: str = Field("us-central1")

    # App
    API_HOST: str = Field("0.0.0.0")
    API_PORT: int = Field(8000)
    DEBUG: bool = Field(False)
    METRICS_PORT: int | None = Field(None)
    JWT_SECRET_KEY: str = Field("supersecret")
    JWT_ALGORITHM: str = Field("HS256")
    JWT_EXP_DAYS: int = Field(7)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


settings = Settings()
