"""KISSmetrics client settings.

Uses Pydantic Settings for automatic env var loading:
    KISSMETRICS_API_KEY=...
    KISSMETRICS_ENVIRONMENT=prd
"""

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kissmetrics.core.config.enums import Environment


class KissmetricsSettings(BaseSettings):
    """Settings for the KISSmetrics tracker and its HTTP client.

    The core ``call`` function takes a client and an API key directly and
    does not read these; they configure ``KissmetricsTracker`` and
    ``create_client``.
    """

    model_config = SettingsConfigDict(
        env_prefix="KISSMETRICS_",
        extra="ignore",
    )

    API_KEY: SecretStr = Field(SecretStr(""), description="API key sent as the _k argument")
    ENABLED: bool = Field(True, description="Drop every call when False")
    ENVIRONMENT: Environment = Field(Environment.LOCAL, description="Deployment environment")
    SEND_IN_LOCAL: bool = Field(
        False, description="Send calls even from the local and test environments"
    )
    TIMEOUT: float = Field(10.0, gt=0, description="HTTP timeout in seconds")
    MANUAL_TIMESTAMPS: bool = Field(
        True, description="Stamp calls client-side so they are safe to resend"
    )
    RAISE_ERRORS: bool = Field(False, description="Re-raise tracking failures instead of logging")

    @property
    def sends_calls(self) -> bool:
        """Whether a tracker built from these settings talks to KISSmetrics."""
        if not self.ENABLED:
            return False
        if self.ENVIRONMENT in (Environment.LOCAL, Environment.TEST):
            return self.SEND_IN_LOCAL
        return True

    @model_validator(mode="after")
    def validate_api_key(self):
        """Require an API key whenever calls would actually be sent."""
        if self.sends_calls and not self.API_KEY.get_secret_value():
            raise ValueError(
                "KISSMETRICS_API_KEY is required when tracking is enabled "
                f"(environment={self.ENVIRONMENT.value})"
            )
        return self
