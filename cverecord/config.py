import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def _env_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    return Path(value) if value else None


@dataclass
class Config:
    base_dir: Optional[Path] = None
    jobs: int = os.cpu_count() or 1
    chunksize: int = 200
    log_dir: Optional[Path] = None
    sample_every: int = 100

    @classmethod
    def from_env(cls) -> "Config":
        """Read settings from the environment, falling back to the defaults."""
        defaults = cls()
        return cls(
            base_dir=_env_path("CVE_BASE_DIR"),
            jobs=int(os.environ.get("CVERECORD_JOBS", defaults.jobs)),
            chunksize=int(os.environ.get("CVERECORD_CHUNKSIZE", defaults.chunksize)),
            log_dir=_env_path("CVERECORD_LOG_DIR"),
            sample_every=int(os.environ.get("CVERECORD_SAMPLE_EVERY", defaults.sample_every)),
        )


config = Config.from_env()
