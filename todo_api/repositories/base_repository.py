from operator import eq
from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session
import logging

from todo_api.models.base import Base

T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    async def find_by_id(self, entity_id: Any) -> Optional[T]:
        entity: Any | None = self.db.query(self.model).filter(eq(self.model.id, entity_id)).first()

        if not entity:
            logger.debug(f"{self.model.__name__} with id {entity_id} not found")

        return entity

    async def find_all(self) -> List[T]:
        try:
            entities = self.db.query(self.model).all()
            return entities
        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} entities: {str(e)}")
            raise

    async def save(self, entity: T) -> T:
        try:
            if entity.id is None:
                self.db.add(entity)
            else:
                # Attaches detached instances and turns a known id into an UPDATE
                entity = self.db.merge(entity)
            self.db.commit()
            self.db.refresh(entity)

            logger.info(f"Saved {self.model.__name__} with id {entity.id}")
            return entity
        except Exception as e:
            logger.error(f"Error saving {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise

    async def delete_by_id(self, entity_id: Any) -> None:
        try:
            entity = await self.find_by_id(entity_id)
            if entity is None:
                return
            self.db.delete(entity)
            self.db.commit()

            logger.info(f"Deleted {self.model.__name__} with id {entity_id}")
        except Exception as e:
            logger.error(f"Error deleting {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise

    async def delete_all(self) -> None:
        try:
            deleted = self.db.query(self.model).delete()
            self.db.commit()

            logger.info(f"Deleted {deleted} {self.model.__name__} rows")
        except Exception as e:
            logger.error(f"Error deleting all {self.model.__name__} entities: {str(e)}")
            self.db.rollback()
            raise
