import structlog
import pydantic
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    log_level: str = pydantic.Field(
        "info",
        description="Logging level.",
    )
    log_file: str = pydantic.Field(
        "STDOUT",
        description="Path to the log file.",
    )
    log_format: str = pydantic.Field(
        "text",
        description="Log format, text or json.",
    )
    wrap_width: int = pydantic.Field(
        60,
        ge=1,
        description="Default width for the text wrapping commands.",
    )
    model_config = SettingsConfigDict(env_prefix="relaisdev_")

    @pydantic.field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.lower()
        if value not in structlog.processors.NAME_TO_LEVEL:
            raise ValueError(f"unknown log level {value}")
        return value

    @pydantic.field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        if value not in ("text", "json"):
            raise ValueError(f"unknown log format {value}")
        return value


def load_config(**overrides) -> Config:
    """
    Build the Config (keyword overrides win over relaisdev_* env vars) and
    point structlog at it.

    A log_file other than STDOUT is opened for appending and stays open for
    the life of the process.
    """
    config = Config(**overrides)
    # configure log output
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(),
    ]
    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    if config.log_file == "STDOUT":
        factory = structlog.PrintLoggerFactory()
    else:
        factory = structlog.PrintLoggerFactory(file=open(config.log_file, "a"))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            structlog.processors.NAME_TO_LEVEL[config.log_level]
        ),
        logger_factory=factory,
    )
    return config
