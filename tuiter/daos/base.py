"""
Tuiter Backend — DAO Base Class
=================================

What:  Shared plumbing for the resource DAOs.
How:   - `_driver_errors` wraps a driver call and turns any PyMongoError into
         DatabaseError (details logged, never returned to the client).
       - `_build` applies a document model's required/default rules and turns
         a pydantic failure into the application's ValidationError.
       - `_build_update` holds a partial update to the same rules, field by
         field, and returns the `$set` document for it.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Type, TypeVar

import pydantic
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from tuiter.exceptions import DatabaseError, ValidationError
from tuiter.models.base import MongoModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=MongoModel)


def error_fields(model: Type[MongoModel], error: pydantic.ValidationError) -> List[str]:
    """Dotted locations of the failing fields, named as they appear on the wire."""
    fields = []
    for err in error.errors():
        head, *rest = err["loc"]
        info = model.model_fields.get(head)
        if info is not None and info.alias:
            head = info.alias
        fields.append(".".join(str(part) for part in (head, *rest)))
    return fields


class BaseDao:
    """Holds the collection a DAO works on and the name used in errors and logs."""

    resource: str = "document"

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    @contextmanager
    def _driver_errors(self, operation: str, **context: Any) -> Iterator[None]:
        try:
            yield
        except PyMongoError as e:
            logger.error(
                "MongoDB %s on %s failed: %s", operation, self.resource, str(e), exc_info=True
            )
            raise DatabaseError(
                message=f"Could not {operation} {self.resource}. Please try again.",
                context={"operation": operation, "error_type": type(e).__name__, **context},
            ) from e

    def _invalid(self, model: Type[MongoModel], error: pydantic.ValidationError) -> ValidationError:
        return ValidationError(
            message=f"{self.resource} document failed schema validation",
            context={"resource": self.resource, "fields": error_fields(model, error)},
        )

    def _build(self, model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise self._invalid(model, e) from e

    def _build_update(self, model: Type[MongoModel], fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        `$set` document for a partial update.

        `fields` is keyed by attribute name. Each value is assigned to an
        unvalidated draft of `model`, so the stored document's own rules
        apply (no null for required fields, non-empty text, enum values).
        Embedded blocks come back complete and replace the stored block.

        Raises:
            ValidationError: a supplied value the document model rejects
        """
        draft = model.model_construct()
        try:
            for name, value in fields.items():
                setattr(draft, name, value)
        except pydantic.ValidationError as e:
            raise self._invalid(model, e) from e
        return draft.model_dump(by_alias=True, include=set(fields))
