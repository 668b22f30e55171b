# friendgraph/services/friend_service.py

from pydantic import ValidationError
from sqlalchemy.orm import Session

from friendgraph.common.exceptions import (
    FriendNotFoundError,
    ResultValidationError,
    UserNotFoundError,
)
from friendgraph.core.logging_config import get_logger
from friendgraph.db.session import read_snapshot
from friendgraph.models.friend import FriendProfile, FriendSummary, UserFriends
from friendgraph.models.friendship import Friendship, FriendshipStatus
from friendgraph.models.user import User
from friendgraph.services import friend_graph

logger = get_logger(__name__)

class FriendService:
    """
    Answers the two friend queries of the social API.

    Each call runs all of its sub-queries in one read snapshot, so the counts
    in a result always agree with each other.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_friend_profile(self, viewer_id: int, friend_user_id: int) -> FriendProfile:
        logger.info("friend profile: viewer=%s friend=%s", viewer_id, friend_user_id)
        with read_snapshot(self.db):
            friend = self.db.query(User).join(
                Friendship, Friendship.friend_user_id == User.id,
            ).filter(
                Friendship.user_id == viewer_id,
                Friendship.friend_user_id == friend_user_id,
                Friendship.status == FriendshipStatus.ACCEPTED,
                User.id != viewer_id,
            ).first()

            if friend is None:
                logger.warning("no accepted friendship %s -> %s", viewer_id, friend_user_id)
                raise FriendNotFoundError(viewer_id, friend_user_id)

            total = friend_graph.total_friend_count(self.db, friend.id)
            mutual = friend_graph.mutual_friend_count(self.db, viewer_id, friend.id)

            return self._validated(
                FriendProfile,
                id=friend.id,
                full_name=friend.full_name,
                phone_number=friend.phone_number,
                total_friend_count=total,
                mutual_friend_count=mutual,
            )

    def get_all_friends(self, viewer_id: int) -> UserFriends:
        logger.info("all friends: viewer=%s", viewer_id)
        with read_snapshot(self.db):
            user = self.db.query(User).filter(User.id == viewer_id).first()
            if user is None:
                logger.warning("user %s not found", viewer_id)
                raise UserNotFoundError(viewer_id)

            try:
                entries = friend_graph.list_friends(self.db, viewer_id)
            except ValidationError as e:
                raise self._validation_failure("FriendListEntry", e) from e

            # one grouped query for the whole list
            totals = friend_graph.total_friend_counts(
                self.db, [entry.friend_user_id for entry in entries]
            )

            try:
                friends = [
                    FriendSummary(
                        **entry.model_dump(),
                        total_friend_count=totals[entry.friend_user_id],
                    )
                    for entry in entries
                ]
            except ValidationError as e:
                raise self._validation_failure("FriendSummary", e) from e

            return self._validated(
                UserFriends,
                id=user.id,
                full_name=user.full_name,
                phone_number=user.phone_number,
                friends=friends,
            )

    def _validated(self, model, **fields):
        try:
            return model(**fields)
        except ValidationError as e:
            raise self._validation_failure(model.__name__, e) from e

    @staticmethod
    def _validation_failure(model_name: str, error: ValidationError) -> ResultValidationError:
        logger.error("%s failed validation: %s", model_name, error)
        return ResultValidationError(model_name, error.errors())
