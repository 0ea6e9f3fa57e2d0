"""Connection configuration handed from the provider to each generator."""

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_API_VERSION = "38"


class ConnectionConfig(BaseModel):
    """Immutable connection settings for one Rundeck server."""
    
    model_config = ConfigDict(frozen=True)
    
    url: str
    api_version: str = DEFAULT_API_VERSION
    token: str = ""
    username: str = ""
    password: str = ""
    insecure: bool = False

    @field_validator('api_version', mode='before')
    @classmethod
    def default_api_version(cls, v):
        if not v:
            return DEFAULT_API_VERSION
        return v

    @property
    def uses_token(self) -> bool:
        return bool(self.token)

    @property
    def uses_basic_auth(self) -> bool:
        return not self.token and bool(self.username) and bool(self.password)

    def api_url(self, path: str) -> str:
        """Join base URL, API version and an endpoint path."""
        return f"{self.url.rstrip('/')}/api/{self.api_version}/{path.lstrip('/')}"

    def as_args(self) -> dict:
        """Key-value view matching the provider's config mapping."""
        return {
            "url": self.url,
            "token": self.token,
            "username": self.username,
            "password": self.password,
            "api_version": self.api_version,
            "insecure": self.insecure,
        }
