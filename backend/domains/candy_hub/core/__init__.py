"""
核心层：数据模型和存储
"""

from .models import Candy
from .store import CandyStore

__all__ = ['Candy', 'CandyStore']
