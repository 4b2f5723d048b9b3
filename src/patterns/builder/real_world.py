"""Builder, real world: SQL query builders for MySQL and PostgreSQL dialects.

The client assembles a query through the same chain of calls regardless of
the dialect. Builders validate the order of steps: `where` needs a SELECT,
UPDATE or DELETE, and `limit` needs a SELECT.

Values are quoted naively for illustration only; real code must use bound
parameters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Mapping


class QueryBuilderError(Exception):
    """A builder step was called on a query type that does not support it."""


@dataclass
class _Query:
    type: str
    base: str
    where: list[str] = field(default_factory=list)
    limit: str | None = None


class SQLQueryBuilder(ABC):
    @abstractmethod
    def select(self, table: str, fields: Iterable[str]) -> "SQLQueryBuilder":
        ...

    @abstractmethod
    def update(self, table: str, values: Mapping[str, object]) -> "SQLQueryBuilder":
        ...

    @abstractmethod
    def delete(self, table: str) -> "SQLQueryBuilder":
        ...

    @abstractmethod
    def where(self, field: str, value: object, operator: str = "=") -> "SQLQueryBuilder":
        ...

    @abstractmethod
    def limit(self, start: int, offset: int) -> "SQLQueryBuilder":
        ...

    @abstractmethod
    def get_sql(self) -> str:
        ...


class MysqlQueryBuilder(SQLQueryBuilder):
    def __init__(self) -> None:
        self._query: _Query | None = None

    @property
    def query(self) -> _Query:
        if self._query is None:
            raise QueryBuilderError("Start the query with select(), update() or delete()")
        return self._query

    def select(self, table: str, fields: Iterable[str]) -> SQLQueryBuilder:
        self._query = _Query(type="select", base=f"SELECT {', '.join(fields)} FROM {table}")
        return self

    def update(self, table: str, values: Mapping[str, object]) -> SQLQueryBuilder:
        assignments = ", ".join(f"{name} = '{value}'" for name, value in values.items())
        self._query = _Query(type="update", base=f"UPDATE {table} SET {assignments}")
        return self

    def delete(self, table: str) -> SQLQueryBuilder:
        self._query = _Query(type="delete", base=f"DELETE FROM {table}")
        return self

    def where(self, field: str, value: object, operator: str = "=") -> SQLQueryBuilder:
        if self.query.type not in ("select", "update", "delete"):
            raise QueryBuilderError("WHERE can only be added to SELECT, UPDATE OR DELETE")
        self.query.where.append(f"{field} {operator} '{value}'")
        return self

    def limit(self, start: int, offset: int) -> SQLQueryBuilder:
        if self.query.type != "select":
            raise QueryBuilderError("LIMIT can only be added to SELECT")
        self.query.limit = f" LIMIT {start}, {offset}"
        return self

    def get_sql(self) -> str:
        query = self.query
        sql = query.base
        if query.where:
            sql += " WHERE " + " AND ".join(query.where)
        if query.limit:
            sql += query.limit
        return sql + ";"


class PostgresQueryBuilder(MysqlQueryBuilder):
    """Same steps as MySQL except for the LIMIT syntax."""

    def limit(self, start: int, offset: int) -> SQLQueryBuilder:
        super().limit(start, offset)
        self.query.limit = f" LIMIT {start} OFFSET {offset}"
        return self


def client_code(query_builder: SQLQueryBuilder) -> str:
    return (
        query_builder.select("users", ["name", "email", "password"])
        .where("age", 18, ">")
        .where("age", 30, "<")
        .limit(10, 20)
        .get_sql()
    )


def main() -> None:
    print("Testing MySQL query builder:")
    print(client_code(MysqlQueryBuilder()))

    print()
    print("Testing PostgresSQL query builder:")
    print(client_code(PostgresQueryBuilder()))

    print()
    print("Builders reject steps that make no sense for the query type:")
    try:
        PostgresQueryBuilder().update("users", {"active": 0}).where("id", 7).limit(0, 1)
    except QueryBuilderError as exc:
        print(f"QueryBuilderError: {exc}")


if __name__ == "__main__":
    main()
