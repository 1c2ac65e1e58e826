from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = "INFO"

    # Strategy used when a caller does not name one.
    default_strategy: Literal["split", "pattern", "grammar"] = "grammar"

    # Benchmark harness defaults. The expressions mix valid and invalid notation
    # so that both the success and the failure paths are timed.
    bench_iterations: int = 10_000
    bench_expressions: list[str] = ["2d6", "17", "1d2d3", "hello"]


settings = Settings()
