"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain import SubscriberEmail
from src.paths import ENV_FILE

MILLISECONDS_PER_SECOND = 1000


class ApplicationSettings(BaseSettings):
    """Settings for the HTTP application.

    :param base_url: Public URL of the service, used to build confirmation links.
    :param host: Interface to bind the server to.
    :param port: Port to bind the server to.
    :param environment: Deployment environment name.
    """

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="http://127.0.0.1:8000", description="Public base URL")
    host: str = Field(default="127.0.0.1", description="Bind host")
    port: int = Field(default=8000, ge=0, le=65535, description="Bind port")
    environment: str = Field(default="local", description="Deployment environment")


class DatabaseSettings(BaseSettings):
    """Settings for the PostgreSQL connection pool.

    :param pool_timeout: Seconds to wait for a pooled connection before failing.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATABASE_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    username: str = Field(default="app", description="Database user")
    password: SecretStr = Field(..., description="Database password")
    name: str = Field(default="newsletter", description="Database name")
    require_ssl: bool = Field(default=False, description="Require TLS for connections")
    pool_size: int = Field(default=10, ge=1, le=100, description="Pooled connections")
    max_overflow: int = Field(default=0, ge=0, le=100, description="Connections above pool_size")
    pool_timeout: float = Field(default=2.0, gt=0, le=60, description="Acquire timeout in seconds")

    @property
    def url(self) -> str:
        """Build the SQLAlchemy connection URL.

        :returns: The database connection URL.
        """
        ssl_mode = "require" if self.require_ssl else "prefer"
        return (
            f"postgresql://{self.username}:{self.password.get_secret_value()}"
            f"@{self.host}:{self.port}/{self.name}?sslmode={ssl_mode}"
        )


class EmailClientSettings(BaseSettings):
    """Settings for the outbound email provider.

    :param base_url: Base URL of the email provider API.
    :param sender_email: Address newsletters and confirmations are sent from.
    :param authorization_token: Provider server token.
    :param timeout_milliseconds: Request timeout for each send.
    """

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_CLIENT_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="https://api.postmarkapp.com", description="Provider URL")
    sender_email: str = Field(..., description="Sender address")
    authorization_token: SecretStr = Field(..., description="Provider server token")
    timeout_milliseconds: int = Field(default=10_000, ge=1, description="Request timeout")

    def sender(self) -> SubscriberEmail:
        """Validate the configured sender address.

        :returns: The sender as a validated email.
        :raises SubscriberValidationError: If the address is malformed.
        """
        return SubscriberEmail.parse(self.sender_email)

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self.timeout_milliseconds / MILLISECONDS_PER_SECOND


@lru_cache
def get_application_settings() -> ApplicationSettings:
    """Get cached application settings.

    :returns: Configured ApplicationSettings instance.
    """
    return ApplicationSettings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    :returns: Configured DatabaseSettings instance.
    """
    return DatabaseSettings()  # type: ignore[call-arg]


@lru_cache
def get_email_client_settings() -> EmailClientSettings:
    """Get cached email client settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured EmailClientSettings instance.
    """
    return EmailClientSettings()  # type: ignore[call-arg]
