"""
エントリーポイントの単体テスト。

main関数が設定を読み込み、コマンドを登録したBotを起動することをテストする。
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest


class TestMain:
    """main関数のテスト。"""

    @pytest.fixture
    def mock_settings(self) -> MagicMock:
        """モックされた設定を返す。"""
        return MagicMock(
            discord_bot_token="test-token",
            discord_guild_id=42,
            log_level="INFO",
        )

    @pytest.mark.asyncio
    async def test_main_starts_bot_with_settings(self, mock_settings: MagicMock) -> None:
        """設定値を渡してBotを起動することを検証。"""
        from src.main import main

        mock_bot = MagicMock()
        mock_bot.start = AsyncMock()

        with (
            patch("src.main.get_settings", return_value=mock_settings),
            patch("src.main.logging.basicConfig") as mock_basic_config,
            patch("src.main.DiscordBotImpl", return_value=mock_bot) as mock_bot_cls,
        ):
            await main()

        mock_basic_config.assert_called_once_with(level="INFO")
        kwargs = mock_bot_cls.call_args.kwargs
        assert kwargs["token"] == "test-token"
        assert kwargs["guild_id"] == 42
        mock_bot.start.assert_called_once()

    @pytest.mark.asyncio
    async def test_main_registers_separator_command(self, mock_settings: MagicMock) -> None:
        """Botに渡すCommandTreeに /separator が登録されていることを検証。"""
        from src.main import main

        mock_bot = MagicMock()
        mock_bot.start = AsyncMock()

        with (
            patch("src.main.get_settings", return_value=mock_settings),
            patch("src.main.logging.basicConfig"),
            patch("src.main.DiscordBotImpl", return_value=mock_bot) as mock_bot_cls,
        ):
            await main()

        tree = mock_bot_cls.call_args.kwargs["tree"]
        assert tree.get_command("separator") is not None
