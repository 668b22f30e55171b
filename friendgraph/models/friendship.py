import enum

from sqlalchemy import Column, Enum, ForeignKey, Index, Integer
from friendgraph.db.base_class import Base

class FriendshipStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"

class Friendship(Base):
    """
    One directed edge: user_id has a relationship with friend_user_id.

    An accepted friendship is stored as two rows, (A, B) and (B, A), both
    ACCEPTED. Rows are written by the request/response flow of the social
    service; the query engine only reads them.
    """
    __tablename__ = "friendships"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)         # owner
    friend_user_id = Column(Integer, ForeignKey("users.id"), nullable=False)  # other side
    status = Column(
        Enum(FriendshipStatus, native_enum=False, length=20,
             values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=FriendshipStatus.PENDING,
    )

    __table_args__ = (
        Index("ix_friendships_user_status", "user_id", "status"),
        Index("ix_friendships_friend_status", "friend_user_id", "status"),
    )
