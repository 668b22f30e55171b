# friendgraph/routers/friends.py

from fastapi import APIRouter, Depends, HTTPException, Path, status

from friendgraph.common.deps import get_current_user_id, get_friend_service
from friendgraph.common.exceptions import NotFoundError
from friendgraph.models.friend import FriendProfile, UserFriends
from friendgraph.services.friend_service import FriendService

router = APIRouter()

# All friends of the caller, each with their own friend count
@router.get("", response_model=UserFriends)
def get_all_friends(
    current_user_id: int = Depends(get_current_user_id),
    service: FriendService = Depends(get_friend_service),
):
    try:
        return service.get_all_friends(current_user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

# One friend as seen by the caller: friend count + mutual friend count
@router.get("/{friend_user_id}", response_model=FriendProfile)
def get_friend_profile(
    friend_user_id: int = Path(..., gt=0),
    current_user_id: int = Depends(get_current_user_id),
    service: FriendService = Depends(get_friend_service),
):
    try:
        return service.get_friend_profile(current_user_id, friend_user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
