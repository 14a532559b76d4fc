"""
設定管理モジュール。

Botトークンや同期先ギルドなど、起動時に必要な設定を環境変数から読み込んで提供する。
"""

from src.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
