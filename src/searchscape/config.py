"""Configuration management using pydantic-settings.

Loads from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes:
        unsplash_access_key: Unsplash API access key used for image search.
        unsplash_api_url: Base URL of the Unsplash API.
        hugging_face_api_key: Hugging Face API token for inference calls.
        hf_inference_url: Base URL of the Hugging Face Inference API.
        http_timeout: Timeout for outbound HTTP requests in seconds.
        session_store_type: Session store backend (only "memory").
        transport: MCP transport, one of "stdio", "http" or "sse".
        host: Server bind address for network transports.
        port: Server bind port for network transports.
        debug: Enable debug mode.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Output logs in JSON format for production.
        log_file: Optional file path for a rotating log file.

    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Unsplash
    unsplash_access_key: str = ""
    unsplash_api_url: str = "https://api.unsplash.com"

    # Hugging Face
    hugging_face_api_key: str = ""
    hf_inference_url: str = "https://api-inference.huggingface.co"

    http_timeout: float = 30.0

    # Sessions
    session_store_type: str = "memory"

    # Server
    transport: str = "stdio"  # stdio | http | sse
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None


# Global settings instance
settings = Settings()
