"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Shared secret from the Patreon client portal. Empty rejects every request.
    webhook_secret: str = ""

    # Request headers
    event_header: str = "X-Patreon-Event"
    signature_header: str = "X-Patreon-Signature"

    # Logging
    log_level: str = "info"
    log_json: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "PATREON_",
    }


settings = Settings()
