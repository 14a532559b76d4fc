"""
Pytest設定と共有フィクスチャ。

プロジェクト全体で共有されるフィクスチャと設定を定義します。
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_interaction() -> MagicMock:
    """モックされたDiscordインタラクションを返す。

    response.send_message はAsyncMockで、呼び出し内容を検証できる。
    """
    interaction = MagicMock()
    interaction.user.id = 111111111111111111
    interaction.guild_id = 222222222222222222
    interaction.response.send_message = AsyncMock(return_value=None)
    return interaction
