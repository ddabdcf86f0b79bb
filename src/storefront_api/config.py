"""Settings — explicit configuration object built once at startup."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JwtSettings(BaseModel):
    """Secret and verification options handed to PyJWT."""

    secret: str = "change-me"
    algorithms: list[str] = Field(default_factory=lambda: ["HS256"])
    audience: str | None = None
    issuer: str | None = None
    leeway: int = 0
    require: list[str] = Field(default_factory=list)


class AuthSettings(BaseModel):
    jwt: JwtSettings = Field(default_factory=JwtSettings)
    # Only the second word of the Authorization header is used unless set.
    strict_scheme: bool = False
    session_token_key: str = "apiToken"


class SessionSettings(BaseModel):
    secret_key: str = "change-me"
    cookie_name: str = "storefront_session"
    max_age: int = 14 * 24 * 60 * 60
    https_only: bool = False


class CheckoutSettings(BaseModel):
    """Pricing constants; ``tax_rate`` is a fraction of the subtotal."""

    tax_rate: float = 0.0
    delivery_charge: float = 0.0


class DashboardSettings(BaseModel):
    checkout: CheckoutSettings = Field(default_factory=CheckoutSettings)


class MultipartSettings(BaseModel):
    data_field: str = "data"


class Settings(BaseSettings):
    """All settings, loaded from the environment and the .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    server_mode: Literal["development", "production"] = "production"
    log_level: str = "INFO"
    acme_challenge_result: str = ""

    auth: AuthSettings = Field(default_factory=AuthSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    multipart: MultipartSettings = Field(default_factory=MultipartSettings)

    @property
    def is_development(self) -> bool:
        return self.server_mode == "development"


def load_settings(**overrides: Any) -> Settings:
    """Build a fresh Settings object; keyword overrides win over the environment."""
    return Settings(**overrides)
