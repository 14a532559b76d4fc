"""
V2コンポーネント構築モジュール。

/separator コマンドの返信に使うテキスト・セパレーター・コンテナを組み立てる。
表示上の意味(線の描画やスペーシングの大きさ)はDiscord側が決めるため、
ここでは決められた値で各コンポーネントを生成するだけに留める。
"""

import discord

# Discordのブランドカラー(blurple)
ACCENT_COLOR = 0x5865F2

SMALL_DIVIDER_LABEL = "🔹 Small Divider"
LARGE_DIVIDER_LABEL = "🔸 Large Divider"
INVISIBLE_SPACER_LABEL = "⚪ Invisible Spacer"


def build_separator_container() -> discord.ui.Container:
    """セパレーターの見本を並べたコンテナを生成する。

    子要素はラベルとセパレーターを交互に並べる(上から表示される順):
    - 小さい区切り線
    - 大きい区切り線
    - 線なしのスペーサー

    Returns:
        アクセントカラー付きのコンテナ。呼び出しごとに新しいインスタンスを返す。
    """
    small_divider = discord.ui.Separator(
        visible=True,
        spacing=discord.SeparatorSpacing.small,
    )
    large_divider = discord.ui.Separator(
        visible=True,
        spacing=discord.SeparatorSpacing.large,
    )
    # 線なしのスペーサーはsmallのみ対応
    invisible_spacer = discord.ui.Separator(
        visible=False,
        spacing=discord.SeparatorSpacing.small,
    )

    return discord.ui.Container(
        discord.ui.TextDisplay(SMALL_DIVIDER_LABEL),
        small_divider,
        discord.ui.TextDisplay(LARGE_DIVIDER_LABEL),
        large_divider,
        discord.ui.TextDisplay(INVISIBLE_SPACER_LABEL),
        invisible_spacer,
        accent_colour=ACCENT_COLOR,
    )


def build_separator_view() -> discord.ui.LayoutView:
    """コンテナを1つだけ持つLayoutViewを生成する。

    LayoutViewを付けて送信したメッセージにはdiscord.pyが
    MessageFlags.components_v2 を付与する。
    Viewの生成には実行中のイベントループが必要なため、コルーチン内から呼び出すこと。

    Returns:
        返信に添付するLayoutView
    """
    view = discord.ui.LayoutView(timeout=None)
    view.add_item(build_separator_container())
    return view
