from pydantic import EmailStr, NameEmail
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "oAZis Cleaning Checklist"
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 587
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    MAIL_FROM: NameEmail = "oAZis Properties <no-reply@oazisproperties.com>"
    ADMIN_EMAIL: EmailStr = "admin@oazisproperties.com"
    # IANA zone used for the summary timestamp; server local time when unset
    TIMEZONE: str | None = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
