"""
牌组操作异常定义.

区分调用方的编程错误(抛出)与对可能不存在位置的查询(返回None).
"""


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class EmptyDeckError(DeckError, IndexError):
    """从空牌组中抽牌"""
    pass


class InvalidDrawCountError(DeckError, ValueError):
    """抽牌数量无效，或严格模式下牌数不足"""
    pass


class InvalidBreakpointError(DeckError, ValueError):
    """分牌断点不是严格递增或超出范围"""
    pass


class InvalidInsertPositionError(DeckError, IndexError):
    """插入位置超出 [0, size] 范围"""
    pass
