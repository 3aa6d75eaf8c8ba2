import logging
from typing import Any

import discord
from dotenv import load_dotenv

from .config import Settings, load_settings
from .logging_setup import setup_logging
from .database.db import init_db_pool, close_db_pool

log = logging.getLogger("rallybot")


class RallyBot(discord.Bot):
    """
    Tennis assistant bot.

    Startup order: settings and logging in run(), the FAQ cog is loaded,
    the Postgres pool opens right after login (only when a database is
    configured), and the cog fills its FAQ store once the gateway is ready.
    """

    def __init__(self, settings: Settings):
        intents = discord.Intents.default()
        # Help channel questions arrive as plain messages.
        intents.message_content = True

        super().__init__(
            intents=intents,
            debug_guilds=[settings.dev_guild_id] if settings.dev_guild_id else None,
            allowed_mentions=discord.AllowedMentions.none(),
        )
        self.settings = settings

    async def login(self, *args: Any, **kwargs: Any) -> Any:
        res = await super().login(*args, **kwargs)
        await self._open_database()
        return res

    async def _open_database(self) -> None:
        if not self.settings.database_configured:
            log.info("No database configured; FAQ source is %r", self.settings.faq_source)
            return
        await init_db_pool(self.settings)

    def load_faq_extensions(self) -> None:
        for ext in self.settings.initial_extensions:
            try:
                self.load_extension(ext)
                log.info("Loaded extension: %s", ext)
            except Exception:
                log.exception("Failed to load extension: %s", ext)

    async def on_ready(self) -> None:
        log.info(
            "Tennis assistant online as %s in %d guild(s), help channel %s",
            self.user,
            len(self.guilds),
            self.settings.faq_help_channel_id or "not set",
        )

    async def close(self) -> None:
        if self.settings.database_configured:
            await close_db_pool()
            log.info("Database pool closed")
        await super().close()

    async def on_application_command_error(
        self,
        ctx: discord.ApplicationContext,
        error: Exception,
    ) -> None:
        command = getattr(ctx.command, "qualified_name", "?")
        log.error("/%s failed for %s: %s", command, ctx.author, error, exc_info=error)
        if ctx.response.is_done():
            await ctx.followup.send("Something went wrong.", ephemeral=True)
        else:
            await ctx.respond("Something went wrong.", ephemeral=True)


def run() -> None:
    load_dotenv()
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    bot = RallyBot(settings)
    bot.load_faq_extensions()
    bot.run(settings.discord_token)


if __name__ == "__main__":
    run()
