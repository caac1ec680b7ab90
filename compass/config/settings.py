from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Analysis diagnostics - suppresses the per-phase banner written to the log.
    # Findings returned to callers are identical either way.
    disable_analysis_logging: bool = False

    # Filesystem scanning
    # Maximum directory depth for the document and source file locators
    scan_depth: int = 10
    # Files larger than this (bytes) are not read during code analysis
    max_file_bytes: int = 1_000_000

    # Structure listing (Structural phase)
    # External listing utility; a pure-Python fallback is used when it's unavailable
    tree_command: str = "tree"
    structure_depth: int = 3
    structure_timeout: float = 30.0


settings = Settings()
