# friendgraph/models/friend.py

# Read models produced by the friend graph queries. Nothing here is stored;
# every instance is computed per request and validated on construction.

from typing import List

from pydantic import BaseModel, ConfigDict, Field

class FriendProfile(BaseModel):
    id: int = Field(gt=0)
    full_name: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    total_friend_count: int = Field(ge=0)
    mutual_friend_count: int = Field(ge=0)

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

class FriendListEntry(BaseModel):
    friend_user_id: int = Field(gt=0)
    friend_full_name: str = Field(min_length=1)
    friend_phone_number: str = Field(min_length=1)

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

class FriendSummary(FriendListEntry):
    total_friend_count: int = Field(ge=0)

class UserFriends(BaseModel):
    id: int = Field(gt=0)
    full_name: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    friends: List[FriendSummary]

    model_config = ConfigDict(str_strip_whitespace=True)
