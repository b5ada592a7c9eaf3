"""
糖果记录存储层

进程内的 id -> Candy 映射，所有读写由同一把互斥锁保护。
锁只覆盖映射的遍历与插入，不跨越序列化或网络 I/O。
"""

import logging
import random
import threading
import uuid
from typing import Callable, Dict, List, Optional

from domains.core.exceptions import CandyNotFoundError, EmptyStoreError

from .models import Candy

logger = logging.getLogger(__name__)


def new_candy_id() -> str:
    """生成候选 ID（uuid4 十六进制）"""
    return uuid.uuid4().hex


class CandyStore:
    """
    糖果记录内存存储

    线程安全：list_all / get / random_id / insert 可被任意多个线程并发调用。
    记录为不可变数据类，读操作返回的列表为新分配的副本。

    Args:
        id_factory: ID 生成函数，插入时若与已有 ID 冲突会重新生成
        rng: 随机源，默认每个存储实例一个，由系统熵初始化一次
    """

    def __init__(
        self,
        id_factory: Optional[Callable[[], str]] = None,
        rng: Optional[random.Random] = None,
    ):
        self._candies: Dict[str, Candy] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory or new_candy_id
        self._rng = rng or random.Random()

    def list_all(self) -> List[Candy]:
        """获取全部记录（顺序不保证）"""
        with self._lock:
            return list(self._candies.values())

    def get(self, candy_id: str) -> Candy:
        """
        按 ID 获取记录

        Raises:
            CandyNotFoundError: ID 不存在
        """
        with self._lock:
            candy = self._candies.get(candy_id)
        if candy is None:
            raise CandyNotFoundError(candy_id)
        return candy

    def random_id(self) -> str:
        """
        随机选取一条记录的 ID（在当前全部 ID 上均匀分布）

        Raises:
            EmptyStoreError: 存储为空
        """
        with self._lock:
            ids = list(self._candies)

        if not ids:
            raise EmptyStoreError()
        if len(ids) == 1:
            return ids[0]
        return self._rng.choice(ids)

    def insert(self, name: str, kind: str) -> Candy:
        """创建并保存一条记录，返回带生成 ID 的记录"""
        candy_id = self._id_factory()
        with self._lock:
            while candy_id in self._candies:
                candy_id = self._id_factory()
            candy = Candy(id=candy_id, name=name, kind=kind)
            self._candies[candy_id] = candy

        logger.info("candy created: id=%s name=%r kind=%r", candy.id, candy.name, candy.kind)
        return candy

    def count(self) -> int:
        """记录总数"""
        with self._lock:
            return len(self._candies)

    def __len__(self) -> int:
        return self.count()
