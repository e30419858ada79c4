# greenroom/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- Permission, Role, RolePermission: permission model backing authorization
- User: User account and authentication model
- Room: Room owned by a user, addressed by friendly_id
- Recording: Recording of a meeting (belongs to Room)
- Attachment: Named file attached to a record (avatar, presentation)
- MeetingOption, RoomMeetingOption, RoomsConfiguration: per-room meeting settings
"""
from .role import Permission, Role, RolePermission
from .user import User
from .room import Room
from .recording import Recording
from .attachment import Attachment
from .meeting_option import MeetingOption, RoomMeetingOption, RoomsConfiguration
