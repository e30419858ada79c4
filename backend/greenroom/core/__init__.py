"""
Core application modules.
Contains essential infrastructure components:
- authorization: Room ownership / permission gate
- bootstrap: Seeding of roles, permissions, meeting options and default admin
- db: Database configuration and connection management
- errors: Application errors and the response envelope for them
- security: Password hashing and session tokens
"""
