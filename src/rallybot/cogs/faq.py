import logging

import discord
from discord.ext import commands

from rallybot.config import Settings
from rallybot.database.db import get_pool
from rallybot.faq.lexicon import CATEGORIES, ScoringWeights
from rallybot.faq.scorer import RelevanceScorer
from rallybot.faq.store import ALL_CATEGORIES, FaqStore, ensure_faq_table, seed_faqs
from rallybot.ui.faq_views import (
    build_answer_embed,
    build_browse_embed,
    build_categories_embed,
    build_fallback_embed,
    build_greeting_embed,
    quick_questions_view,
    related_view,
)
from rallybot.utils.permissions import is_admin

log = logging.getLogger(__name__)


class FaqCog(commands.Cog):
    """Tennis FAQ assistant: slash commands plus the help channel listener."""

    def __init__(self, bot: discord.Bot):
        self.bot = bot
        self.settings: Settings = bot.settings
        scorer = RelevanceScorer(
            weights=ScoringWeights(
                threshold=self.settings.faq_match_threshold,
                max_results=self.settings.faq_max_results,
            )
        )
        self.store = FaqStore(scorer, table=self.settings.faq_table)

    async def reload_faqs(self) -> int:
        pool = await get_pool() if self.settings.faq_source == "db" else None
        await self.store.load(
            self.settings.faq_source,
            json_path=self.settings.faq_json_path,
            pool=pool,
        )
        return len(self.store.items)

    @commands.Cog.listener()
    async def on_ready(self):
        try:
            count = await self.reload_faqs()
        except Exception:
            log.exception("Failed to load FAQs from source %r", self.settings.faq_source)
            return
        log.info("FAQ assistant ready with %d FAQs", count)

    async def _answer(self, query: str) -> tuple[discord.Embed, discord.ui.View | None]:
        results = self.store.search(query)
        if not results:
            log.info("No FAQ match for %r", query)
            return build_fallback_embed(), quick_questions_view(self._ask_from_button)

        log.info(
            "FAQ match for %r: %r (score %.2f, %d results)",
            query, results[0].question, results[0].relevance_score, len(results),
        )
        return build_answer_embed(results), related_view(results, self._ask_from_button)

    async def _ask_from_button(self, interaction: discord.Interaction, question: str) -> None:
        embed, view = await self._answer(question)
        kwargs = {"embed": embed, "ephemeral": True}
        if view is not None:
            kwargs["view"] = view
        await interaction.response.send_message(**kwargs)

    faq = discord.SlashCommandGroup("faq", "Tennis FAQ assistant")

    @faq.command(name="ask", description="Ask the tennis assistant a question")
    @discord.option("question", description="What would you like to know?", required=True)
    async def ask(self, ctx: discord.ApplicationContext, question: str):
        embed, view = await self._answer(question)
        if view is None:
            await ctx.respond(embed=embed)
        else:
            await ctx.respond(embed=embed, view=view)

    @faq.command(name="browse", description="Browse FAQs by category or search term")
    @discord.option(
        "category",
        description="Category to show (default: All)",
        choices=[ALL_CATEGORIES, *CATEGORIES],
        required=False,
    )
    @discord.option("search", description="Only FAQs containing this text", required=False)
    async def browse(
        self,
        ctx: discord.ApplicationContext,
        category: str = ALL_CATEGORIES,
        search: str = "",
    ):
        category = category or ALL_CATEGORIES
        search = search or ""
        records = self.store.browse(category, search)
        await ctx.respond(embed=build_browse_embed(records, category, search), ephemeral=True)

    @faq.command(name="categories", description="Show how many FAQs each category has")
    async def categories(self, ctx: discord.ApplicationContext):
        await ctx.respond(embed=build_categories_embed(self.store.category_counts()), ephemeral=True)

    @faq.command(name="help", description="What can the tennis assistant do?")
    async def help(self, ctx: discord.ApplicationContext):
        await ctx.respond(
            embed=build_greeting_embed(),
            view=quick_questions_view(self._ask_from_button),
            ephemeral=True,
        )

    @faq.command(name="seed", description="Insert the default FAQ entries into the database")
    async def seed(self, ctx: discord.ApplicationContext):
        if not is_admin(ctx.author):
            return await ctx.respond("Only administrators can seed FAQs.", ephemeral=True)
        if not self.settings.database_configured:
            return await ctx.respond("No database is configured.", ephemeral=True)

        await ctx.defer(ephemeral=True)
        pool = await get_pool()
        await ensure_faq_table(pool, self.settings.faq_table)
        created, failed = await seed_faqs(pool, self.settings.faq_table)

        message = f"✅ Successfully created {created} FAQs"
        if failed:
            message += f", {failed} failed"
        if self.settings.faq_source == "db":
            count = await self.reload_faqs()
            message += f". {count} FAQs loaded."
        await ctx.followup.send(message, ephemeral=True)

    @faq.command(name="reload", description="Reload FAQs from the configured source")
    async def reload(self, ctx: discord.ApplicationContext):
        if not is_admin(ctx.author):
            return await ctx.respond("Only administrators can reload FAQs.", ephemeral=True)

        await ctx.defer(ephemeral=True)
        count = await self.reload_faqs()
        await ctx.followup.send(
            f"Reloaded {count} FAQs from `{self.settings.faq_source}`.", ephemeral=True
        )

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        # Ignore bots and DMs
        if message.author.bot or not message.guild:
            return

        channel_id = self.settings.faq_help_channel_id
        if channel_id is None or message.channel.id != channel_id:
            return

        if not message.content.strip() or message.content.startswith(("!", "/", ".")):
            return

        try:
            embed, view = await self._answer(message.content)
            if view is None:
                await message.reply(embed=embed)
            else:
                await message.reply(embed=embed, view=view)
        except discord.HTTPException as e:
            log.exception("Failed to answer FAQ question in help channel: %s", e)
            await message.channel.send(
                "I ran into an error while answering this. A staff member will take a look."
            )


def setup(bot: discord.Bot):
    bot.add_cog(FaqCog(bot))
