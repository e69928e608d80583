"""数据库访问网关

- run_query: 执行单条参数化语句并返回行（dict 列表）
- unit_of_work: 在给定会话上包裹一个事务，正常结束提交，异常回滚并重新抛出
- transaction: 打开独立会话并包裹一个事务，无论结果如何都会关闭会话（连接归还连接池）

所有 SQL 都通过绑定参数传值，不拼接调用方提供的字符串。
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from .connection import SessionLocal, engine


def run_query(statement, params: Optional[Dict[str, Any]] = None, bind: Engine = None) -> List[Dict[str, Any]]:
    """执行单条语句，返回行列表"""
    if isinstance(statement, str):
        statement = text(statement)
    with (bind or engine).connect() as conn:
        result = conn.execute(statement, params or {})
        if not result.returns_rows:
            conn.commit()
            return []
        return [dict(row) for row in result.mappings()]


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """在已有会话上执行一个事务"""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


@contextmanager
def transaction(session_factory=SessionLocal) -> Iterator[Session]:
    """打开新会话并执行一个事务，结束后关闭会话"""
    db = session_factory()
    try:
        with unit_of_work(db):
            yield db
    finally:
        db.close()
