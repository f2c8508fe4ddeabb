"""ログ行を保持するバックエンドの共通契約 DataContainer を提供する。

入出力: append(str) / get_list() -> list[str] / truncate()。
制約:
    - 3操作のインターフェースを固定し、実装の差し替えを可能にする
    - 各操作は例外を送出しない全域関数として実装する

Note:
    - Proxy は具象クラスではなくこの契約に依存する
    - テストでは MagicMock(spec=DataContainer) を代替実装として使う
"""

from __future__ import annotations

import abc


class DataContainer(abc.ABC):
    """append/get_list/truncate を持つ保存先の抽象基底クラス。"""

    @abc.abstractmethod
    def append(self, line: str) -> None:
        """1行を末尾に追加する。

        Args:
            line: 追加する文字列（空文字も許可する）
        """

    @abc.abstractmethod
    def get_list(self) -> list[str]:
        """保存済みの行を追加順で返す。

        Returns:
            list[str]: 保存済みの行
        """

    @abc.abstractmethod
    def truncate(self) -> None:
        """保存済みの行をすべて削除する。"""
