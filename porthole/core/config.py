from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DOCKER_TIMEOUT: int = Field(
        default=60,
        description="Request timeout in seconds handed to the docker SDK (its own default)"
    )

    VERBOSE: bool = Field(
        default=False,
        description="Log skipped containers and run milestones to stderr"
    )

    model_config = SettingsConfigDict(
        env_prefix="PORTHOLE_"
    )
