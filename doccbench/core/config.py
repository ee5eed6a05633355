import os
from typing import Optional


class Settings:
    # Project Settings
    PROJECT_NAME: str = "DocC Benchmark"
    VERSION: str = "1.0.0"

    # Benchmark Settings
    BENCHMARK_ENABLED: bool = os.getenv("DOCC_BENCHMARK", "NO") == "YES"
    BENCHMARK_FILTER: Optional[str] = os.getenv("DOCC_BENCHMARK_FILTER")

    # Logging Settings
    LOG_LEVEL: str = os.getenv("DOCC_LOG_LEVEL", "INFO").upper()
    LOG_DIR: Optional[str] = os.getenv("DOCC_LOG_DIR")


settings = Settings()
