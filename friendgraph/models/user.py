# friendgraph/models/user.py

from sqlalchemy import Column, Integer, String
from friendgraph.db.base_class import Base

# Owned by the identity service; this engine only reads it
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(255), nullable=False)
    phone_number = Column(String(50), nullable=False)
