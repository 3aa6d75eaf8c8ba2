from typing import Awaitable, Callable, Sequence

import discord

from rallybot.faq.lexicon import CATEGORIES
from rallybot.faq.models import FaqRecord, ScoredCandidate

AskCallback = Callable[[discord.Interaction, str], Awaitable[None]]

EMBED_DESCRIPTION_LIMIT = 4096
EMBED_FIELD_LIMIT = 1024
EMBED_MAX_FIELDS = 25
EMBED_TOTAL_LIMIT = 6000
BROWSE_ANSWER_LIMIT = 200
BUTTON_LABEL_LIMIT = 80

GREETING = (
    "Hello! I'm your tennis assistant. I can help you find answers to common questions "
    "about challenges, events, payments, and more. What would you like to know?"
)

QUICK_QUESTIONS = (
    "How does tennis scoring work?",
    "What is deuce in tennis?",
    "How do I create a challenge?",
    "What are the subscription plans?",
    "How do I find events near me?",
    "How to update my profile?",
)

FALLBACK_TEXT = (
    "I couldn't find a specific answer to your question in our FAQ database. "
    "Here are some things you can try:\n\n"
    "• Try rephrasing your question with different keywords\n"
    f"• Browse our FAQ categories: {', '.join(CATEGORIES[:-1])}, or {CATEGORIES[-1]}\n"
    "• Ask about common topics like:\n"
    "  - Tennis scoring rules (deuce, advantage, tiebreak)\n"
    "  - How to create or accept challenges\n"
    "  - Finding events near you\n"
    "  - Payment and subscription information\n"
    "  - Account and profile settings\n\n"
    "• Contact our support team for personalized assistance\n\n"
    "What specific aspect would you like to know more about?"
)

CATEGORY_COLORS = {
    "General": discord.Color.blue(),
    "Challenges": discord.Color.orange(),
    "Events": discord.Color.green(),
    "Payments": discord.Color.gold(),
    "Account": discord.Color.purple(),
    "Technical": discord.Color.red(),
}


def _clip(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def build_answer_embed(results: Sequence[ScoredCandidate]) -> discord.Embed:
    """Top match as the answer, the rest listed as related questions."""
    top = results[0]
    embed = discord.Embed(
        title=_clip(top.question, 256),
        description=_clip(top.answer, EMBED_DESCRIPTION_LIMIT),
        color=CATEGORY_COLORS.get(top.category, discord.Color.blurple()),
    )
    related = results[1:]
    if related:
        embed.add_field(
            name="Related questions",
            value=_clip("\n".join(f"• {r.question}" for r in related), EMBED_FIELD_LIMIT),
            inline=False,
        )
    embed.set_footer(text=top.category or "FAQ")
    return embed


def build_fallback_embed() -> discord.Embed:
    return discord.Embed(
        title="No matching answer",
        description=FALLBACK_TEXT,
        color=discord.Color.light_grey(),
    )


def build_greeting_embed() -> discord.Embed:
    embed = discord.Embed(title="Tennis assistant", description=GREETING, color=discord.Color.blurple())
    embed.add_field(
        name="Try asking",
        value="\n".join(f"• {q}" for q in QUICK_QUESTIONS),
        inline=False,
    )
    return embed


def build_browse_embed(records: Sequence[FaqRecord], category: str, term: str = "") -> discord.Embed:
    title = "Help Center" if category == "All" else f"Help Center: {category}"
    embed = discord.Embed(title=title, color=CATEGORY_COLORS.get(category, discord.Color.blurple()))

    if not records:
        embed.description = "No FAQs found. Try a different search term or category."
        return embed

    suffix = f' matching "{_clip(term, 100)}"' if term else ""
    # Room for the widest possible footer, so the total stays under Discord's cap.
    used = len(title) + len(f"{len(records)} of {len(records)} FAQs{suffix}")

    shown = 0
    for record in records[:EMBED_MAX_FIELDS]:
        name = _clip(record.question or "-", 256)
        value = _clip(record.answer or "-", BROWSE_ANSWER_LIMIT)
        if used + len(name) + len(value) > EMBED_TOTAL_LIMIT:
            break
        embed.add_field(name=name, value=value, inline=False)
        used += len(name) + len(value)
        shown += 1

    embed.set_footer(text=f"{shown} of {len(records)} FAQs{suffix}")
    return embed


def build_categories_embed(counts: dict[str, int]) -> discord.Embed:
    embed = discord.Embed(title="FAQ categories", color=discord.Color.blurple())
    embed.description = "\n".join(f"**{name}**: {count}" for name, count in counts.items())
    return embed


class QuestionButtonsView(discord.ui.View):
    """One button per question; clicking asks that question for the clicker."""

    def __init__(self, questions: Sequence[str], on_ask: AskCallback, *, timeout: float = 600):
        super().__init__(timeout=timeout)
        self.on_ask = on_ask
        for question in questions[:25]:
            button = discord.ui.Button(
                label=_clip(question, BUTTON_LABEL_LIMIT),
                style=discord.ButtonStyle.secondary,
            )
            button.callback = self._make_callback(question)
            self.add_item(button)

    def _make_callback(self, question: str):
        async def callback(interaction: discord.Interaction):
            await self.on_ask(interaction, question)

        return callback


def related_view(results: Sequence[ScoredCandidate], on_ask: AskCallback) -> QuestionButtonsView | None:
    questions = [r.question for r in results[1:] if r.question]
    return QuestionButtonsView(questions, on_ask) if questions else None


def quick_questions_view(on_ask: AskCallback) -> QuestionButtonsView:
    return QuestionButtonsView(QUICK_QUESTIONS, on_ask)
