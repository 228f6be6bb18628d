import uuid

from sqlalchemy import Boolean, Column, Integer, String
from todo_api.models.base import Base

def generate_todo_id() -> str:
    return str(uuid.uuid4())

class Todo(Base):
    __tablename__ = 'todos'
    id = Column(String(36), primary_key=True, default=generate_todo_id)
    title = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    order = Column('order_number', Integer, nullable=True)

    def __repr__(self) -> str:
        return f"Todo(id={self.id!r}, title={self.title!r}, completed={self.completed!r}, order={self.order!r})"
