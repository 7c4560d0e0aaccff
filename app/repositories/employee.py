# app/repositories/employee.py
"""Employee CRUD over the ``employees`` MongoDB collection.

Every method issues a single store operation, except ``create`` which
inserts and then reads the new document back. Store failures propagate as
``pymongo.errors.PyMongoError``; documents that do not fit the employee
shape are skipped by ``list``; missing documents raise ``EmployeeNotFound``
and malformed ids raise ``InvalidEmployeeId``.
"""
import logging
from typing import List

from fastapi import Depends
from pydantic import ValidationError
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.database import EMPLOYEES_COLLECTION, get_database
from app.exceptions import EmployeeNotFound
from app.models.employee import EmployeeModel
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from app.utils.object_id import parse_object_id
from app.utils.query import Filter, Update

logger = logging.getLogger(__name__)


class EmployeeRepository:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def list(self) -> List[EmployeeModel]:
        cursor = self.collection.find(Filter().to_document())
        employees = []
        for document in await cursor.to_list(length=None):
            try:
                employees.append(EmployeeModel.from_document(document))
            except ValidationError as e:
                # written by another client; one bad record must not hide the rest
                logger.warning("Skipping undecodable employee %s: %s", document.get("_id"), e)
        return employees

    async def create(self, employee: EmployeeCreate) -> EmployeeModel:
        result = await self.collection.insert_one(employee.model_dump())
        created = await self.collection.find_one(Filter.by_id(result.inserted_id).to_document())
        if created is None:
            # deleted by a concurrent request before the read-back
            raise EmployeeNotFound(str(result.inserted_id))
        return EmployeeModel.from_document(created)

    async def update(self, employee_id: str, employee: EmployeeUpdate) -> EmployeeOut:
        employee_oid = parse_object_id(employee_id)
        update = Update().set_all(employee.model_dump())
        matched = await self.collection.find_one_and_update(
            Filter.by_id(employee_oid).to_document(),
            update.to_document(),
        )
        if matched is None:
            raise EmployeeNotFound(employee_id)
        return EmployeeOut(id=employee_id, **employee.model_dump())

    async def delete(self, employee_id: str) -> None:
        employee_oid = parse_object_id(employee_id)
        result = await self.collection.delete_one(Filter.by_id(employee_oid).to_document())
        if result.deleted_count < 1:
            raise EmployeeNotFound(employee_id)


def get_employee_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> EmployeeRepository:
    return EmployeeRepository(db[EMPLOYEES_COLLECTION])
