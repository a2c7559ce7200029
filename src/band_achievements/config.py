import os
from dataclasses import dataclass
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]

DEFAULT_SHEET_ID = "1Rdi7AdcFcNd2hCbvqUkmkO-WVxi1qjVZ9jlu_G4JPm4"
DEFAULT_GID = "0"
DEFAULT_ASSET_DIR = ROOT / "static" / "images"
DEFAULT_ASSET_URL = "app/static/images"


@dataclass(frozen=True)
class Settings:
    sheet_id: str = DEFAULT_SHEET_ID
    gid: str = DEFAULT_GID
    asset_dir: Path = DEFAULT_ASSET_DIR
    asset_url: str = DEFAULT_ASSET_URL
    request_timeout: float = 20.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        raw_timeout = env.get("BAND_REQUEST_TIMEOUT", "20").strip()
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"BAND_REQUEST_TIMEOUT must be a number, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError("BAND_REQUEST_TIMEOUT must be positive")
        return cls(
            sheet_id=env.get("BAND_SHEET_ID", DEFAULT_SHEET_ID).strip(),
            gid=env.get("BAND_SHEET_GID", DEFAULT_GID).strip() or DEFAULT_GID,
            asset_dir=Path(env.get("BAND_ASSET_DIR", str(DEFAULT_ASSET_DIR))),
            asset_url=env.get("BAND_ASSET_URL", DEFAULT_ASSET_URL).strip().rstrip("/"),
            request_timeout=timeout,
            log_level=env.get("BAND_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
