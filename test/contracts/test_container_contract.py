"""DataContainer 契約を各実装が満たすことを検証するテスト。

入出力: 実装クラス -> 契約シナリオの検証。
制約:
    - DataBase と list ベースの最小実装の両方に同じシナリオを適用する

Note:
    - 抽象メソッドを実装しないサブクラスは生成できないことも確認する
"""

import pytest

from gated_log.container import DataContainer
from gated_log.database import DataBase
from gated_log.proxy import Proxy


class DummyContainer(DataContainer):
    """list をそのまま使う最小の DataContainer 実装。"""

    def __init__(self) -> None:
        self._list: list[str] = []

    def append(self, line: str) -> None:
        self._list.append(line)

    def get_list(self) -> list[str]:
        return list(self._list)

    def truncate(self) -> None:
        self._list.clear()


def _logged_in_proxy() -> Proxy:
    proxy = Proxy(DataBase())
    proxy.login("user", "pass")
    return proxy


@pytest.fixture(params=[DummyContainer, DataBase, _logged_in_proxy])
def container(request):
    """契約シナリオを適用する実装インスタンスを返す。"""
    return request.param()


def test_append_and_get_list(container):
    """追加順で取得できることを確認する。"""
    container.append("one")
    container.append("two")

    assert container.get_list() == ["one", "two"]


def test_truncate_clears_list(container):
    """truncate 後に空になることを確認する。"""
    container.append("temp")
    container.truncate()

    assert container.get_list() == []


def test_incomplete_subclass_cannot_be_instantiated():
    """抽象メソッド未実装のサブクラスが生成できないことを確認する。"""

    class AppendOnly(DataContainer):
        def append(self, line: str) -> None:
            pass

    with pytest.raises(TypeError):
        AppendOnly()
