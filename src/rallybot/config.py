import math
import os
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Settings:

    discord_token: str
    dev_guild_id: int | None
    log_level: str
    log_file: str | None
    initial_extensions: Sequence[str]

    POSTGRES_DSN: str | None
    PGHOST: str
    PGPORT: int
    PGUSER: str | None
    PGPASSWORD: str | None
    PGDB: str | None

    faq_source: str
    faq_json_path: str | None
    faq_table: str
    faq_help_channel_id: int | None
    faq_match_threshold: float
    faq_max_results: int

    @property
    def database_configured(self) -> bool:
        return bool(self.POSTGRES_DSN or self.PGDB)


FAQ_SOURCES = ("db", "json", "seed")


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name, default)
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def _parse(name: str, raw: str | None, cast, default):
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a valid {cast.__name__}, got {raw!r}.") from exc


def load_settings() -> Settings:
    token = _get_env("DISCORD_TOKEN")

    PGDSN = _get_env("PGDSN")
    PGHOST = _get_env("PGHOST")
    PGPORT = _parse("PGPORT", _get_env("PGPORT"), int, 5432)
    PGUSER = _get_env("PGUSER")
    PGPASSWORD = _get_env("PGPASSWORD")
    PGDB = _get_env("PGDB")

    if not token:
        raise RuntimeError(
            "DISCORD_TOKEN is missing. Copy .env.example to .env and fill it in."
        )

    dev_guild_id = _parse("DEV_GUILD_ID", _get_env("DEV_GUILD_ID"), int, None)

    log_level = _get_env("LOG_LEVEL", "INFO") or "INFO"

    initial_extensions = (
        "rallybot.cogs.faq",
    )

    has_db = bool(PGDSN or PGDB)
    faq_source = (_get_env("FAQ_SOURCE") or ("db" if has_db else "seed")).lower()
    if faq_source not in FAQ_SOURCES:
        raise RuntimeError(f"FAQ_SOURCE must be one of {', '.join(FAQ_SOURCES)}, got {faq_source!r}.")

    if faq_source == "db" and not has_db:
        raise RuntimeError("FAQ_SOURCE=db needs PGDSN or PGDB to be set.")

    faq_json_path = _get_env("FAQ_JSON_PATH")
    if faq_source == "json" and not faq_json_path:
        raise RuntimeError("FAQ_SOURCE=json needs FAQ_JSON_PATH to point at the FAQ file.")

    faq_match_threshold = _parse("FAQ_MATCH_THRESHOLD", _get_env("FAQ_MATCH_THRESHOLD"), float, 0.5)
    if math.isnan(faq_match_threshold):
        raise RuntimeError("FAQ_MATCH_THRESHOLD must be a number, got NaN.")

    faq_max_results = _parse("FAQ_MAX_RESULTS", _get_env("FAQ_MAX_RESULTS"), int, 3)
    if faq_max_results < 1:
        raise RuntimeError(f"FAQ_MAX_RESULTS must be at least 1, got {faq_max_results}.")

    return Settings(
        discord_token=token,
        dev_guild_id=dev_guild_id,
        log_level=log_level,
        log_file=_get_env("LOG_FILE"),
        initial_extensions=initial_extensions,
        POSTGRES_DSN=PGDSN,
        PGHOST=PGHOST or "localhost",
        PGPORT=PGPORT,
        PGUSER=PGUSER,
        PGPASSWORD=PGPASSWORD,
        PGDB=PGDB,
        faq_source=faq_source,
        faq_json_path=faq_json_path,
        faq_table=_get_env("FAQ_TABLE", "faqs") or "faqs",
        faq_help_channel_id=_parse("FAQ_HELP_CHANNEL_ID", _get_env("FAQ_HELP_CHANNEL_ID"), int, None),
        faq_match_threshold=faq_match_threshold,
        faq_max_results=faq_max_results,
    )
