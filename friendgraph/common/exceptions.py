# friendgraph/common/exceptions.py

class FriendGraphError(Exception):
    """Base class for errors raised by the friend graph engine."""

class NotFoundError(FriendGraphError):
    pass

class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"user {user_id} not found")

class FriendNotFoundError(NotFoundError):
    """No accepted friendship from the viewer to the requested user."""

    def __init__(self, viewer_id: int, friend_user_id: int):
        self.viewer_id = viewer_id
        self.friend_user_id = friend_user_id
        super().__init__(f"user {viewer_id} has no accepted friend {friend_user_id}")

class ResultValidationError(FriendGraphError):
    """
    A computed result broke its schema (empty name, negative count, ...).

    This points at bad data or a bug in aggregation, never at the caller's
    input, so it is reported as a server fault.
    """

    def __init__(self, model_name: str, errors):
        self.model_name = model_name
        self.errors = errors
        super().__init__(f"{model_name} failed validation: {errors}")
