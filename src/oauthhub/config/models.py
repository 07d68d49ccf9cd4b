"""Pydantic models for oauthhub configuration.

Example YAML:

    oauth:
      http:
        timeout: 10
      providers:
        - name: google
          credentials:
            client_id: ${GOOGLE_CLIENT_ID}
            client_secret: ${GOOGLE_CLIENT_SECRET}
            redirect_uri: https://app.example.com/auth/google/callback
"""

from pydantic import ConfigDict, Field, field_validator

from ..models import OAuthBaseModel
from ..transport import DEFAULT_TIMEOUT


class HttpTransportConfigModel(OAuthBaseModel):
    """Settings for the HTTP transport shared by all providers."""

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)


class ProviderConfigModel(OAuthBaseModel):
    """One provider registration: its identifier and credentials."""

    # Numeric app ids (Facebook, Kakao) arrive from YAML as ints
    model_config = ConfigDict(extra="forbid", frozen=True, coerce_numbers_to_str=True)

    name: str
    credentials: dict[str, str] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        return value.strip().lower()


class OAuthConfigModel(OAuthBaseModel):
    providers: list[ProviderConfigModel] = Field(default_factory=list)
    http: HttpTransportConfigModel = Field(default_factory=HttpTransportConfigModel)
