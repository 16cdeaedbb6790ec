"""Data transfer objects for the application layer."""

from sgi.application.dtos.persistence import (
    NotificationRecord,
    RequestRecord,
    UserRecord,
    decode_notifications,
    decode_requests,
    decode_user,
    decode_users,
    decode_view,
    encode_notifications,
    encode_requests,
    encode_user,
    encode_users,
    encode_view,
)

__all__ = [
    "NotificationRecord",
    "RequestRecord",
    "UserRecord",
    "decode_notifications",
    "decode_requests",
    "decode_user",
    "decode_users",
    "decode_view",
    "encode_notifications",
    "encode_requests",
    "encode_user",
    "encode_users",
    "encode_view",
]
