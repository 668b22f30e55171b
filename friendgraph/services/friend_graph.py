# friendgraph/services/friend_graph.py

"""
Set queries over the friendships table.

Accepted friendships are stored in both directions, so "friends of X" is
always read from the rows X owns. All counts are counts of DISTINCT users:
duplicate rows for the same pair and self-loops never inflate a result.
"""

from typing import Dict, Iterable, List, Set

from sqlalchemy import distinct, func
from sqlalchemy.orm import Session, aliased

from friendgraph.core.logging_config import get_logger
from friendgraph.models.friend import FriendListEntry
from friendgraph.models.friendship import Friendship, FriendshipStatus
from friendgraph.models.user import User

logger = get_logger(__name__)

ACCEPTED = FriendshipStatus.ACCEPTED

def accepted_friend_ids(db: Session, user_id: int) -> Set[int]:
    rows = db.query(Friendship.friend_user_id).filter(
        Friendship.user_id == user_id,
        Friendship.status == ACCEPTED,
        Friendship.friend_user_id != user_id,
    ).distinct().all()
    return {row.friend_user_id for row in rows}

# --- degree ---

def total_friend_count(db: Session, user_id: int) -> int:
    return total_friend_counts(db, [user_id])[user_id]

def total_friend_counts(db: Session, user_ids: Iterable[int]) -> Dict[int, int]:
    """
    Friend count for every id in `user_ids`, in one grouped query.

    Ids with no accepted friendships (including unknown users) map to 0.
    """
    ids = set(user_ids)
    if not ids:
        return {}

    rows = db.query(
        Friendship.user_id,
        func.count(distinct(Friendship.friend_user_id)),
    ).filter(
        Friendship.user_id.in_(sorted(ids)),
        Friendship.status == ACCEPTED,
        Friendship.friend_user_id != Friendship.user_id,
    ).group_by(Friendship.user_id).all()

    counts = dict.fromkeys(ids, 0)
    for owner_id, count in rows:
        counts[owner_id] = count
    logger.debug("total friend counts: %d users, %d with friends", len(ids), len(rows))
    return counts

# --- mutual friends ---

def mutual_friend_count(db: Session, user_id: int, other_user_id: int) -> int:
    """
    Number of users who are accepted friends of both `user_id` and
    `other_user_id`, never counting either of the two themselves.
    """
    return mutual_friend_counts(db, user_id, [other_user_id])[other_user_id]

def mutual_friend_counts(db: Session, user_id: int, candidate_ids: Iterable[int]) -> Dict[int, int]:
    """
    Mutual friend count between `user_id` and each candidate, in one query.

    The viewer's accepted rows are joined to the candidates' accepted rows on
    the shared third party, then grouped by candidate with COUNT(DISTINCT)
    over that third party. Counting joined rows or summing ids instead would
    overcount whenever the same third party shows up in more than one row.
    """
    ids = set(candidate_ids)
    if not ids:
        return {}

    mine = aliased(Friendship)
    theirs = aliased(Friendship)

    rows = db.query(
        theirs.user_id,
        func.count(distinct(theirs.friend_user_id)),
    ).select_from(mine).join(
        theirs, theirs.friend_user_id == mine.friend_user_id,
    ).filter(
        mine.user_id == user_id,
        mine.status == ACCEPTED,
        theirs.user_id.in_(sorted(ids)),
        theirs.status == ACCEPTED,
        # the pair itself is never a mutual friend
        theirs.friend_user_id != user_id,
        theirs.friend_user_id != theirs.user_id,
    ).group_by(theirs.user_id).all()

    counts = dict.fromkeys(ids, 0)
    for candidate_id, count in rows:
        counts[candidate_id] = count
    logger.debug(
        "mutual friend counts for user %s: %d candidates, %d with mutual friends",
        user_id, len(ids), len(rows),
    )
    return counts

# --- listing ---

def list_friends(db: Session, user_id: int) -> List[FriendListEntry]:
    """
    Accepted friends of `user_id` with their display fields, ordered by id.

    Does not check that `user_id` exists; an unknown user has no friends.
    """
    rows = db.query(User.id, User.full_name, User.phone_number).join(
        Friendship, Friendship.friend_user_id == User.id,
    ).filter(
        Friendship.user_id == user_id,
        Friendship.status == ACCEPTED,
        User.id != user_id,
    ).distinct().order_by(User.id).all()

    return [
        FriendListEntry(
            friend_user_id=row.id,
            friend_full_name=row.full_name,
            friend_phone_number=row.phone_number,
        )
        for row in rows
    ]
