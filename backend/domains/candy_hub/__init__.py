"""
糖果记录领域模块

进程内的糖果记录注册表：
- 创建记录（ID 由存储生成）
- 列出全部记录
- 按 ID 获取 / 随机获取

记录不可变、不可删除，不做持久化。
"""

from .core.models import Candy
from .core.store import CandyStore

__all__ = [
    'Candy',
    'CandyStore',
]
