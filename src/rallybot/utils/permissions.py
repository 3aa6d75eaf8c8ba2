import discord


def is_admin(member: discord.Member | discord.User) -> bool:
    perms = getattr(member, "guild_permissions", None)
    return bool(getattr(perms, "administrator", False))
