"""
DiscordBot実装モジュール。

DiscordBotプロトコルとその実装を提供する。
- Protocol型でインターフェースを定義
- discord.ClientとCommandTreeは引数で注入(依存性注入パターン)
"""

import logging
from typing import Protocol

import discord
from discord import app_commands

logger = logging.getLogger(__name__)


class DiscordBot(Protocol):
    """DiscordBotのインターフェース定義。

    Discord Gatewayとの接続とコマンド同期を抽象化するプロトコル型。
    具体的な実装はDiscordBotImplで提供される。
    """

    async def start(self) -> None:
        """ログイン・コマンド同期・Gateway接続を行う。"""
        ...

    async def sync_commands(self) -> list[app_commands.AppCommand]:
        """登録済みのスラッシュコマンドをDiscordへ同期する。

        Returns:
            同期されたコマンドの一覧
        """
        ...


class DiscordBotImpl:
    """DiscordBotプロトコルの具体的な実装。

    discord.pyのClientとCommandTreeを使用してDiscordと通信する。

    Attributes:
        _client: discord.pyのClientインスタンス
        _tree: スラッシュコマンドを保持するCommandTree
        _token: Botトークン
        _guild_id: コマンドを同期するギルドID(Noneの場合はグローバル同期)
    """

    def __init__(
        self,
        client: discord.Client,
        tree: app_commands.CommandTree,
        token: str | None = None,
        guild_id: int | None = None,
    ) -> None:
        """DiscordBotImplを初期化する。

        Args:
            client: discord.pyのClientインスタンス
            tree: コマンド登録済みのCommandTree
            token: Botトークン
            guild_id: コマンドを同期するギルドID
        """
        self._client = client
        self._tree = tree
        self._token = token
        self._guild_id = guild_id

    async def start(self) -> None:
        """ログイン後にコマンドを同期し、Gatewayへ接続する。

        接続が終了した場合や例外が発生した場合もClientは必ずクローズする。

        Raises:
            ValueError: tokenが設定されていない場合
        """
        if self._token is None:
            msg = "token is required to connect to Discord"
            raise ValueError(msg)

        try:
            await self._client.login(self._token)
            await self.sync_commands()
            logger.info("Connecting to Discord Gateway...")
            await self._client.connect()
        finally:
            await self._client.close()
            logger.info("Discord client closed")

    async def sync_commands(self) -> list[app_commands.AppCommand]:
        """登録済みのスラッシュコマンドをDiscordへ同期する。

        guild_idが設定されている場合はグローバルコマンドをそのギルドへコピーして同期する。
        ギルド同期は即時反映されるため開発時に使う。

        Returns:
            同期されたコマンドの一覧
        """
        guild: discord.Object | None = None
        if self._guild_id is not None:
            guild = discord.Object(id=self._guild_id)
            self._tree.copy_global_to(guild=guild)

        synced = await self._tree.sync(guild=guild)
        logger.info(
            "Slash commands synced",
            extra={"count": len(synced), "guild_id": self._guild_id},
        )
        return synced
