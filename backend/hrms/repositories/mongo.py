"""
HRMS Employee API — MongoDB Employee Repository
=================================================

What:  EmployeeRepository backed by a pymongo AsyncCollection.
How:   One driver call per operation; driver errors and undecodable documents
       are translated into DatabaseError carrying the original error text.

Operation → driver call:
    list_employees   → find({}).to_list()
    create_employee  → insert_one(document)
    update_employee  → find_one_and_update(_id, $set, return_document=AFTER)
    delete_employee  → delete_one(_id)
    ping             → database.command("ping")

Identifiers are BSON ObjectIds, exposed to clients as 24-character hex strings.
"""

import logging
from typing import Any, List

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError as PydanticValidationError
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from hrms.exceptions import DatabaseError, InvalidIdentifierError, NotFoundError
from hrms.models.employee import ID_FIELD, from_document, to_document
from hrms.repositories.base import EmployeeRepository
from hrms.schemas.employee import EmployeeIn, EmployeeResponse

logger = logging.getLogger(__name__)


def format_object_id(value: Any) -> str:
    """Render a stored `_id` as text (hex for ObjectIds)."""
    return str(value)


class MongoEmployeeRepository(EmployeeRepository):
    """
    Employee storage on a single MongoDB collection.

    The collection handle is shared by all concurrent requests; the driver
    handles pooling and thread safety.
    """

    def __init__(self, collection: AsyncCollection):
        self._collection = collection

    def parse_id(self, raw_id: str) -> ObjectId:
        try:
            return ObjectId(raw_id)
        except (InvalidId, TypeError):
            raise InvalidIdentifierError(raw_id=str(raw_id))

    async def list_employees(self) -> List[EmployeeResponse]:
        try:
            cursor = self._collection.find({})
            documents = await cursor.to_list()
        except PyMongoError as e:
            raise self._storage_error("find", e)

        return [self._decode(document) for document in documents]

    async def create_employee(self, employee: EmployeeIn) -> EmployeeResponse:
        document = to_document(employee)
        try:
            result = await self._collection.insert_one(document)
        except PyMongoError as e:
            raise self._storage_error("insert_one", e)

        document[ID_FIELD] = result.inserted_id
        logger.info("Inserted employee %s", result.inserted_id)
        return self._decode(document)

    async def update_employee(
        self, employee_id: ObjectId, employee: EmployeeIn
    ) -> EmployeeResponse:
        try:
            document = await self._collection.find_one_and_update(
                {ID_FIELD: employee_id},
                {"$set": to_document(employee)},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._storage_error("find_one_and_update", e)

        if document is None:
            raise NotFoundError(resource="employee", resource_id=str(employee_id))

        logger.info("Updated employee %s", employee_id)
        return self._decode(document)

    async def delete_employee(self, employee_id: ObjectId) -> bool:
        try:
            result = await self._collection.delete_one({ID_FIELD: employee_id})
        except PyMongoError as e:
            raise self._storage_error("delete_one", e)

        deleted = result.deleted_count > 0
        logger.info("Delete employee %s: deleted_count=%d", employee_id, result.deleted_count)
        return deleted

    async def ping(self) -> bool:
        try:
            await self._collection.database.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False
        return True

    # ── Helpers ───────────────────────────────────────────────────────────

    def _decode(self, document: Any) -> EmployeeResponse:
        try:
            return from_document(document, format_object_id)
        except PydanticValidationError as e:
            logger.error("Undecodable employee document %s: %s", document.get(ID_FIELD), str(e))
            raise DatabaseError(
                message=str(e),
                context={"operation": "decode", "error_type": type(e).__name__},
            )

    @staticmethod
    def _storage_error(operation: str, exc: PyMongoError) -> DatabaseError:
        logger.error("MongoDB %s failed: %s", operation, str(exc))
        return DatabaseError(
            message=str(exc),
            context={"operation": operation, "error_type": type(exc).__name__},
        )
