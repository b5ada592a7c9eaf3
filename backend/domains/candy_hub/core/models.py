"""
糖果记录数据模型定义

记录在创建后不可变，也没有删除路径；
存储在进程结束时随之销毁。
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Candy:
    """
    糖果记录数据类

    Attributes:
        id: 记录 ID（由存储在创建时生成，之后不可变）
        name: 名称（客户端提供，不透明字符串）
        kind: 种类（客户端提供，不透明字符串，线上字段名为 kind）
    """
    id: str
    name: str = ""
    kind: str = ""

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            'id': self.id,
            'name': self.name,
            'kind': self.kind,
        }
