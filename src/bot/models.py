"""
コマンド関連の型定義モジュール。

スラッシュコマンドのメタデータをPydanticモデルとして定義する。
"""

from pydantic import BaseModel, ConfigDict, Field


class CommandDescriptor(BaseModel):
    """スラッシュコマンドのメタデータ(不変)。

    起動時に一度だけコマンドツリーへ登録され、プロセス終了まで変更されない。

    Attributes:
        name: コマンド名(Discordの命名規則: 英小文字・数字・ハイフン・アンダースコアで1〜32文字)
        description: コマンドの説明文(1〜100文字)
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[-_a-z0-9]{1,32}$")
    description: str = Field(..., min_length=1, max_length=100)
