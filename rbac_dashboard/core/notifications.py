"""
User-facing notifications.
Every mutation outcome and every surfaced failure is reported as one of these.
"""

from fastapi import HTTPException
from pydantic import BaseModel
from typing import Callable, List, Literal, Tuple, TypeVar

T = TypeVar("T")


class Notification(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


def success(description: str) -> Notification:
    return Notification(title="Success", description=description)


def error(description: str) -> Notification:
    return Notification(title="Error", description=description, variant="destructive")


def refresh_after_mutation(
    fetch: Callable[[], T],
    message: str,
    fallback: Callable[[], T] = list,
) -> Tuple[T, List[Notification]]:
    """Re-fetch the full view after a mutation was acknowledged by the store.

    A failed refresh does not undo the reported success; the view comes back
    empty with an extra error notification.
    """
    notifications = [success(message)]
    try:
        items = fetch()
    except HTTPException as e:
        items = fallback()
        notifications.append(error(str(e.detail)))
    return items, notifications
