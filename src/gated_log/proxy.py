"""DataContainer への操作を認証状態で制御する Proxy を提供する。

入出力: login(username, password) / append(str) / get_list() -> list[str] / truncate()。
制約:
    - 未認証時は append/truncate を委譲せず、get_list は空リストを返す
    - 未認証アクセスでも例外は送出しない

Note:
    - login は資格情報を検証せず、常に認証済み状態へ遷移する
    - 保存先は参照のみ保持し、ライフサイクルは呼び出し側が管理する
    - 認証済み時に保存先が送出した例外はそのまま呼び出し側へ伝播する
"""

from __future__ import annotations

import logging
import threading

from gated_log.container import DataContainer

logger = logging.getLogger(__name__)

_REQUIRED_OPERATIONS = ("append", "get_list", "truncate")


class Proxy(DataContainer):
    """認証済みの場合のみ保存先へ操作を委譲するクラス。"""

    def __init__(self, backing: DataContainer) -> None:
        """Proxyを初期化する。

        Args:
            backing: 委譲先の保存先（DataContainer 契約を満たすもの）

        Raises:
            TypeError: backing が append/get_list/truncate を持たない場合
        """
        missing = [
            name for name in _REQUIRED_OPERATIONS if not callable(getattr(backing, name, None))
        ]
        if missing:
            raise TypeError(f"backing must implement {', '.join(missing)}")

        self._backing = backing
        self._authenticated = False
        self._lock = threading.Lock()

    @property
    def authenticated(self) -> bool:
        """現在の認証状態を返す。"""
        with self._lock:
            return self._authenticated

    def login(self, username: str, password: str) -> None:
        """認証済み状態へ遷移する。

        Args:
            username: ユーザー名（検証しない）
            password: パスワード（検証もログ出力もしない）

        Note:
            - 資格情報の検証は未実装であり、任意の値を受け入れる
        """
        with self._lock:
            self._authenticated = True
        logger.info("login accepted for user %r", username)

    def logout(self) -> None:
        """未認証状態へ戻す。未認証時に呼んでも何もしない。"""
        with self._lock:
            was_authenticated = self._authenticated
            self._authenticated = False
        if was_authenticated:
            logger.info("logged out")

    def append(self, line: str) -> None:
        """認証済みの場合のみ保存先へ1行追加する。

        Args:
            line: 追加する文字列

        Note:
            - 未認証時は行を破棄し、保存先を呼び出さない
        """
        if not self.authenticated:
            logger.debug("append denied: not authenticated")
            return
        self._backing.append(line)

    def get_list(self) -> list[str]:
        """認証済みの場合のみ保存先の行一覧を返す。

        Returns:
            list[str]: 保存先の戻り値をそのまま返す。未認証時は空リスト
        """
        if not self.authenticated:
            logger.debug("get_list denied: not authenticated")
            return []
        return self._backing.get_list()

    def truncate(self) -> None:
        """認証済みの場合のみ保存先を全削除する。"""
        if not self.authenticated:
            logger.debug("truncate denied: not authenticated")
            return
        self._backing.truncate()
