from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── Ayanamsa ─────────────────────────
    DEFAULT_AYANAMSA: str = "Lahiri"

    # ─── Ephemeris ────────────────────────
    PRECISION_MIN_YEAR: int = 1900
    PRECISION_MAX_YEAR: int = 2100
    MOTION_SAMPLE_DAYS: float = 1.0

    # ─── Ascendant ────────────────────────
    ASCENDANT_SINGULARITY_EPSILON: float = 1e-6

    # ─── Vimshottari Dasha ────────────────
    DASHA_YEAR_DAYS: float = 365.25
    DASHA_HORIZON_YEARS: float = 120.0
    DASHA_LEVELS: int = 2


    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
