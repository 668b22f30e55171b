# friendgraph/db/base_class.py
from typing import Any
from sqlalchemy.orm import as_declarative, declared_attr

@as_declarative()
class Base:
    id: Any
    __name__: str

    # Default table name is the lowercased class name; models may override
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()
