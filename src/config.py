"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe WATCHLIST_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe WATCHLIST_.
    Exemple : WATCHLIST_DATA_FILE=~/watchlist.json

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="WATCHLIST_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fichier de la liste de suivi (relatif au répertoire courant par défaut)
    data_file: Path = Field(default=Path("watchlist.json"))

    # Interface interactive
    clear_screen: bool = Field(default=True)
    pause_after_action: bool = Field(default=True)

    # Logging (console au-dessus de INFO pour ne pas polluer le menu)
    log_level: str = Field(default="WARNING")
    log_file: Path = Field(default=Path("logs/watchlist.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("data_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Met le niveau de log en majuscules (debug -> DEBUG)."""
        return str(v).upper()
