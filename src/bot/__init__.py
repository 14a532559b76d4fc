"""
Discordモジュール。

DiscordBotの実装とスラッシュコマンドハンドラを提供する。
"""

from src.bot.app import DiscordBot, DiscordBotImpl
from src.bot.components import build_separator_container, build_separator_view
from src.bot.handlers import SEPARATOR_COMMAND, handle_separator_command, register_commands
from src.bot.models import CommandDescriptor

__all__ = [
    "SEPARATOR_COMMAND",
    "CommandDescriptor",
    "DiscordBot",
    "DiscordBotImpl",
    "build_separator_container",
    "build_separator_view",
    "handle_separator_command",
    "register_commands",
]
