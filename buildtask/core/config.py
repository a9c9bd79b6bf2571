from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Build task settings loaded from environment variables.

    The two host variables are set by the CI agent for every job:

    AGENT_TEMPDIRECTORY     — per-job scratch directory, used as the base
                              for ephemeral directories when present
    BUILD_STAGINGDIRECTORY  — staging root that artifacts are published into

    Either may be missing when running outside the agent (local runs,
    tests); the staging resolver falls back to a temporary directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Host-provided locations
    agent_tempdirectory: str = ""
    build_stagingdirectory: str = ""

    # Artifact container folder named in every artifact.upload command.
    artifact_container: str = "artifacts"

    # Bucket used by `publish` when the caller does not name one.
    default_bucket: str = "release"

    # Console log renderer when True, JSON otherwise.
    debug: bool = False

    @field_validator("agent_tempdirectory", "build_stagingdirectory", mode="before")
    @classmethod
    def strip_path(cls, v: str | None) -> str:
        return (v or "").strip()


def get_settings() -> Settings:
    return Settings()
