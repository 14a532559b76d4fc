"""
Discordスラッシュコマンドハンドラモジュール。

/separator コマンドのメタデータとハンドラ、コマンドツリーへの登録処理を提供する。
"""

import logging
from collections.abc import Awaitable, Callable

import discord
from discord import app_commands

from src.bot.components import build_separator_view
from src.bot.models import CommandDescriptor

logger = logging.getLogger(__name__)

# 型エイリアス
CommandHandler = Callable[[discord.Interaction], Awaitable[None]]

SEPARATOR_COMMAND = CommandDescriptor(
    name="separator",
    description="Shows supported V2 component separators.",
)


async def handle_separator_command(interaction: discord.Interaction) -> None:
    """スラッシュコマンド /separator を処理する。

    ラベルとセパレーターを並べたコンテナを生成し、V2コンポーネントとして返信する。
    返信の送信に失敗した場合の例外はそのまま呼び出し元に伝播する。

    Args:
        interaction: Discordから受信したインタラクション
    """
    logger.info(
        "Received /separator command",
        extra={"user_id": interaction.user.id, "guild_id": interaction.guild_id},
    )

    view = build_separator_view()
    await interaction.response.send_message(view=view)


# 起動時に登録するコマンド一覧
COMMANDS: tuple[tuple[CommandDescriptor, CommandHandler], ...] = (
    (SEPARATOR_COMMAND, handle_separator_command),
)


def register_commands(
    tree: app_commands.CommandTree,
    commands: tuple[tuple[CommandDescriptor, CommandHandler], ...] = COMMANDS,
) -> None:
    """コマンドツリーにスラッシュコマンドを登録する。

    起動時に一度だけ呼び出す。登録後のコマンド一覧は変更しない。

    Args:
        tree: discord.pyのCommandTree
        commands: 登録するメタデータとハンドラの組
    """
    for descriptor, handler in commands:
        tree.command(name=descriptor.name, description=descriptor.description)(handler)
        logger.debug("Registered slash command", extra={"command": descriptor.name})
