from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from fifo_models import Stop

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class Queue(Generic[T]):
    """
    単方向リンクで実装した Queue（FIFO）
    push_back/pop_front: O(1)
    remove/remove_all/走査系: O(N)

    ※ 走査中（some/every/filter/map/for_each/__iter__）に
      コールバックから Queue を変更してはいけない（検査はしない）
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size: int = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    # -------------------------
    # 参照
    # -------------------------
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def front(self) -> Optional[T]:
        return None if self._head is None else self._head.value

    def back(self) -> Optional[T]:
        return None if self._tail is None else self._tail.value

    def peek(self) -> Optional[T]:
        return self.front()

    # -------------------------
    # 追加・削除
    # -------------------------
    def push_back(self, value: T) -> None:
        node = _Node(value=value)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop_front(self) -> Optional[T]:
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        return node.value

    def remove(self, target: T) -> bool:
        """
        最初に一致した要素だけを取り除く（== で比較）
        """
        prev: Optional[_Node[T]] = None
        node = self._head
        while node is not None:
            if node.value == target:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                if node.next is None:
                    # 末尾を消した
                    self._tail = prev
                node.next = None
                self._size -= 1
                return True
            prev = node
            node = node.next
        return False

    def remove_all(self, target: T) -> int:
        """
        一致する要素をすべて取り除き、その個数を返す
        一致したノードはその場で切り離す（順序は保持）
        比較が例外を投げても、それまでの削除は size と整合している
        """
        removed = 0
        prev: Optional[_Node[T]] = None
        node = self._head
        while node is not None:
            following = node.next
            if node.value == target:
                if prev is None:
                    self._head = following
                else:
                    prev.next = following
                if following is None:
                    # 末尾を消した
                    self._tail = prev
                node.next = None
                self._size -= 1
                removed += 1
            else:
                prev = node
            node = following

        if removed:
            logger.debug(f"remove_all dropped {removed} node(s), {self._size} left")
        return removed

    def clear(self) -> None:
        dropped = self._size
        self._head = None
        self._tail = None
        self._size = 0
        logger.debug(f"clear dropped {dropped} node(s)")

    # -------------------------
    # 走査
    # -------------------------
    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def to_array(self) -> List[T]:
        return [node.value for node in self._nodes()]

    def some(self, pred: Callable[[T, int], Any]) -> bool:
        for i, node in enumerate(self._nodes()):
            if pred(node.value, i):
                return True
        return False

    def every(self, pred: Callable[[T, int], Any]) -> bool:
        for i, node in enumerate(self._nodes()):
            if not pred(node.value, i):
                return False
        return True

    def filter(self, pred: Callable[[T, int], Any]) -> List[T]:
        return [node.value for i, node in enumerate(self._nodes()) if pred(node.value, i)]

    def map(self, fn: Callable[[T, int], U]) -> List[U]:
        return [fn(node.value, i) for i, node in enumerate(self._nodes())]

    def for_each(self, callback: Callable[[T, int], Any]) -> Any:
        """
        各要素に callback(value, index) を呼ぶ

        - None を返す間は続行
        - Stop(x) を返したら終了して x を返す（x が None でもよい）
        - それ以外の値を返したら終了してその値を返す
        最後まで回ったら None
        """
        for i, node in enumerate(self._nodes()):
            result = callback(node.value, i)
            if isinstance(result, Stop):
                return result.value
            if result is not None:
                return result
        return None

    # -------------------------
    # Python プロトコル
    # -------------------------
    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __contains__(self, value: object) -> bool:
        return self.some(lambda v, _: v == value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self._size == other._size and self.to_array() == other.to_array()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Queue({self.to_array()!r})"
