"""pytest 実行時に `src/` 配下を import 可能にする設定を提供する。

入出力: pytest起動時の初期化 -> sys.path 更新。
制約:
    - ライブラリ本体は `src/` 配下のみを探索対象にする

Note:
    - 未インストール状態でも `gated_log.*` をテストから直接 import できる
"""

import sys
from pathlib import Path

SRC_PATH = Path(__file__).parent / "src"

# 先頭に追加し、インストール済みの別版より作業ツリーを優先する。
sys.path.insert(0, str(SRC_PATH))
