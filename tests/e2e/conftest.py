"""
E2Eテスト用の共有フィクスチャと設定。

実際のdiscord.py CommandTreeにコマンドを登録し、
インタラクションのみをモックして登録から返信までを通しで検証する。
"""

import discord
import pytest
from discord import app_commands


@pytest.fixture
def command_tree() -> app_commands.CommandTree:
    """コマンド登録済みのCommandTreeを提供。

    Returns:
        /separator を登録したCommandTree
    """
    from src.bot.handlers import register_commands

    client = discord.Client(intents=discord.Intents.none())
    tree = app_commands.CommandTree(client)
    register_commands(tree)
    return tree
