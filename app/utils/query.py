# app/utils/query.py
"""Small immutable builders for MongoDB filter and update documents.

Each method returns a new builder, so a base filter can be shared and
extended without mutation::

    Filter.by_id(oid).to_document()            # {"_id": oid}
    Filter().gte("age", 30).to_document()      # {"age": {"$gte": 30}}
    Update().set("name", "Ana").to_document()  # {"$set": {"name": "Ana"}}
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from bson import ObjectId

EQ = "$eq"
NE = "$ne"
GT = "$gt"
GTE = "$gte"
LT = "$lt"
LTE = "$lte"

COMPARISON_OPERATORS = frozenset({EQ, NE, GT, GTE, LT, LTE})


@dataclass(frozen=True)
class Condition:
    field: str
    operator: str
    value: Any

    def __post_init__(self):
        if self.operator not in COMPARISON_OPERATORS:
            raise ValueError(f"Unsupported filter operator: {self.operator}")
        if not self.field:
            raise ValueError("Filter field must not be empty")


@dataclass(frozen=True)
class Filter:
    conditions: Tuple[Condition, ...] = ()

    @classmethod
    def by_id(cls, oid: ObjectId) -> "Filter":
        return cls().eq("_id", oid)

    def where(self, field: str, operator: str, value: Any) -> "Filter":
        return Filter(self.conditions + (Condition(field, operator, value),))

    def eq(self, field: str, value: Any) -> "Filter":
        return self.where(field, EQ, value)

    def ne(self, field: str, value: Any) -> "Filter":
        return self.where(field, NE, value)

    def gt(self, field: str, value: Any) -> "Filter":
        return self.where(field, GT, value)

    def gte(self, field: str, value: Any) -> "Filter":
        return self.where(field, GTE, value)

    def lt(self, field: str, value: Any) -> "Filter":
        return self.where(field, LT, value)

    def lte(self, field: str, value: Any) -> "Filter":
        return self.where(field, LTE, value)

    def to_document(self) -> Dict[str, Any]:
        grouped: Dict[str, List[Condition]] = {}
        for condition in self.conditions:
            grouped.setdefault(condition.field, []).append(condition)

        document: Dict[str, Any] = {}
        for field, conditions in grouped.items():
            if len(conditions) == 1 and conditions[0].operator == EQ:
                # a lone equality renders plain so it stays an index lookup key
                document[field] = conditions[0].value
                continue
            operators: Dict[str, Any] = {}
            for condition in conditions:
                if condition.operator in operators:
                    raise ValueError(f"Conflicting conditions on field '{field}'")
                operators[condition.operator] = condition.value
            document[field] = operators
        return document


@dataclass(frozen=True)
class Update:
    assignments: Tuple[Tuple[str, Any], ...] = ()

    def set(self, field: str, value: Any) -> "Update":
        if not field:
            raise ValueError("Update field must not be empty")
        if field == "_id":
            raise ValueError("The _id field is immutable")
        return Update(self.assignments + ((field, value),))

    def set_all(self, values: Dict[str, Any]) -> "Update":
        update = self
        for field, value in values.items():
            update = update.set(field, value)
        return update

    def to_document(self) -> Dict[str, Any]:
        if not self.assignments:
            raise ValueError("Update has no assignments")
        return {"$set": dict(self.assignments)}
