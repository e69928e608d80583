"""完工日期汇总

工单的 completion_date / completion_varies 由明细完工日期推导：
- completion_date 取所有明细中最晚的日期
- 去重后日期多于一个时 completion_varies 为 True
"""

from datetime import date
from typing import Iterable, List, Optional, Tuple


def derive_completion(item_dates: Iterable[Iterable[date]]) -> Tuple[Optional[date], bool]:
    unique = sorted({d for dates in item_dates for d in dates})
    if not unique:
        return None, False
    return unique[-1], len(unique) > 1


def stamp_uniform_completion_date(item_dates: List[List[date]], completion_date: Optional[date]) -> List[List[date]]:
    """填写了整单完工日期时，所有明细统一使用该日期"""
    if completion_date is None:
        return [list(dates) for dates in item_dates]
    return [[completion_date] for _ in item_dates]
