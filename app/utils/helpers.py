"""工具函数模块

包含一些常用的格式化函数
"""

from datetime import date, datetime
from typing import Iterable, Optional

EMPTY = '—'


def format_date(value: Optional[date]) -> str:
    """日期格式化为 YYYY-MM-DD，空值显示为 —"""
    if value:
        return value.strftime('%Y-%m-%d')
    return EMPTY


def format_datetime(value: Optional[datetime]) -> str:
    if value:
        return value.strftime('%Y-%m-%d %H:%M')
    return EMPTY


def format_dates(values: Iterable[date]) -> str:
    """多个日期用逗号连接"""
    formatted = [format_date(v) for v in values if v]
    return ', '.join(formatted) if formatted else EMPTY


def format_completion(completion_date: Optional[date], completion_varies: bool) -> str:
    """工单完工日期：明细日期不一致时显示 Varies"""
    if completion_varies:
        return 'Varies'
    return format_date(completion_date)


def text_or_empty(value) -> str:
    if value is None or value == '':
        return EMPTY
    return str(value)
