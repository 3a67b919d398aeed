# config.py
import os
import sys
from dataclasses import dataclass
from pathlib import Path

APP_TITLE = "LAN File Share"

UPLOAD_DIR_NAME = "shared_files"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
MAX_UPLOAD_SIZE = 512 * 1024 * 1024  # 512 MiB per request
COPY_CHUNK_SIZE = 1024 * 1024         # 1 MiB copy buffer


def program_dir() -> Path:
    """Directory of the running program: the bundled executable, else the launched script."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    if sys.argv and sys.argv[0] and sys.argv[0] != "-c":
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


@dataclass(frozen=True)
class ServerConfig:
    base_dir: Path
    upload_dir_name: str = UPLOAD_DIR_NAME
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    max_upload_size: int = MAX_UPLOAD_SIZE
    title: str = APP_TITLE

    @property
    def upload_dir(self) -> Path:
        return self.base_dir / self.upload_dir_name

    @property
    def folder_name(self) -> str:
        return self.upload_dir_name


def load_config(environ=None) -> ServerConfig:
    """Build the config from defaults, honouring HOST/PORT/MAX_UPLOAD_MB/SHARE_BASE_DIR."""
    env = os.environ if environ is None else environ
    base_dir = Path(env["SHARE_BASE_DIR"]) if env.get("SHARE_BASE_DIR") else program_dir()
    max_upload = MAX_UPLOAD_SIZE
    if env.get("MAX_UPLOAD_MB"):
        max_upload = int(env["MAX_UPLOAD_MB"]) * 1024 * 1024
    port = int(env.get("PORT", DEFAULT_PORT))
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    if max_upload <= 0:
        raise ValueError("MAX_UPLOAD_MB must be positive")
    return ServerConfig(
        base_dir=base_dir,
        host=env.get("HOST", DEFAULT_HOST),
        port=port,
        max_upload_size=max_upload,
    )
