"""
Pydantic schemas for authentication endpoints.
Defines request models for registration and login.
"""
from pydantic import BaseModel

class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    email: str  # Login identifier
    password: str  # User password (plain text, will be hashed server-side)

class RegisterIn(BaseModel):
    """
    Request model for account registration.
    """
    name: str  # Display name
    email: str
    password: str
