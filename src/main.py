"""
アプリケーションのエントリーポイント。

Discord Botを起動する。
環境変数の読み込み、Clientの作成、コマンドの登録、Gateway接続を行う。
"""

import asyncio
import logging

import discord
from discord import app_commands

from src.bot import DiscordBotImpl, register_commands
from src.config import get_settings

logger = logging.getLogger(__name__)


async def main() -> None:
    """アプリケーションのエントリーポイント。

    以下の処理を順次実行する:
    1. 環境変数から設定を読み込み
    2. Clientを作成
    3. CommandTreeを作成してスラッシュコマンドを登録
    4. DiscordBotImplを作成して起動
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    # スラッシュコマンドのみ扱うため特権Intentは不要
    client = discord.Client(intents=discord.Intents.default())

    tree = app_commands.CommandTree(client)
    register_commands(tree)

    bot = DiscordBotImpl(
        client=client,
        tree=tree,
        token=settings.discord_bot_token,
        guild_id=settings.discord_guild_id,
    )

    logger.info("Starting Discord Bot...")
    await bot.start()


if __name__ == "__main__":
    asyncio.run(main())
