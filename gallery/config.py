"""Gallery Server Configuration."""

import secrets
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    site_name: str = "Photo Gallery"
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"
    allowed_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Paths
    data_dir: Path = Path.home() / "gallery" / "data"

    # Database (defaults to data_dir/gallery.db)
    db_path: Path | None = None

    # JWT
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7

    # Passwords
    bcrypt_rounds: int = 10

    # Bootstrap admin, provisioned once when no admin exists yet
    default_admin_username: str = "admin"
    default_admin_password: str = "admin123"

    model_config = {"env_prefix": "GALLERY_"}

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.db_path or self.data_dir / 'gallery.db'}"

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        if self.db_path is not None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def ensure_secrets(self) -> None:
        """Generate the signing secret if not set, persist it so tokens survive restarts."""
        secrets_file = self.data_dir / ".secrets"
        saved = {}
        if secrets_file.exists():
            for line in secrets_file.read_text().strip().splitlines():
                if "=" in line:
                    k, v = line.split("=", 1)
                    saved[k.strip()] = v.strip()

        if not self.jwt_secret:
            self.jwt_secret = saved.get("jwt_secret", "") or secrets.token_urlsafe(32)

        secrets_file.write_text(f"jwt_secret={self.jwt_secret}\n")


settings = Settings()
settings.ensure_dirs()
settings.ensure_secrets()
