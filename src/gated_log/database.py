"""ログ行をインメモリで保持する DataBase を提供する。

入出力: append(str) の保存 / get_list() -> list[str] / truncate() による全削除。
制約:
    - 追加順を保持し、重複と空文字を許可する
    - 既定では件数上限を持たない

Note:
    - get_list() はコピーを返し外部からの破壊的変更を防ぐ
    - max_entries 指定時は古い行から破棄する
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Deque

from gated_log.config import Settings, get_settings
from gated_log.container import DataContainer

logger = logging.getLogger(__name__)


class DataBase(DataContainer):
    """ログ行をインメモリで保持するクラス。"""

    def __init__(self, max_entries: int | None = None) -> None:
        """空の行配列で初期化する。

        Args:
            max_entries: 保持する最大行数（None の場合は無制限）

        Raises:
            ValueError: max_entries が正の整数でも None でもない場合
        """
        if max_entries is not None and (
            isinstance(max_entries, bool)
            or not isinstance(max_entries, int)
            or max_entries < 1
        ):
            raise ValueError("max_entries must be a positive integer or None")

        # maxlen=None の deque は上限なしとして振る舞う。
        self._entries: Deque[str] = deque(maxlen=max_entries)
        self._max_entries = max_entries
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> DataBase:
        """設定値から DataBase を生成する。

        Args:
            settings: 設定（未指定時は get_settings() の値）

        Returns:
            DataBase: 設定の max_entries を反映したインスタンス
        """
        settings = settings or get_settings()
        return cls(max_entries=settings.max_entries)

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def append(self, line: str) -> None:
        """1行を末尾に追加する。

        Args:
            line: 追加する文字列

        Note:
            - 上限超過時は先頭（最古）の行を破棄する
        """
        with self._lock:
            full = len(self._entries) == self._max_entries
            self._entries.append(line)
        if full:
            logger.debug("dropped oldest entry (max_entries=%d)", self._max_entries)

    def get_list(self) -> list[str]:
        """保存済みの行を追加順のコピーで返す。

        Returns:
            list[str]: 行がない場合は空リスト
        """
        with self._lock:
            return list(self._entries)

    def truncate(self) -> None:
        """保存済みの行をすべて削除する。空の状態で呼んでも何もしない。"""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug("truncated %d entries", count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
