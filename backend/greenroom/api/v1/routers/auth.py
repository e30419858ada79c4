from fastapi import APIRouter, HTTPException, Response, status, Depends
from greenroom.config import settings
from greenroom.core.errors import BadRequestError
from greenroom.core.security import verify_password, create_access_token, hash_password
from greenroom.api.v1.deps import get_current_user
from greenroom.models.role import Role
from greenroom.models.user import User
from greenroom.schemas.auth import LoginRequest, RegisterIn

router = APIRouter(prefix="/auth", tags=["auth"])

DEFAULT_ROLE = "User"

async def _user_to_dict(u: User) -> dict:
    return {
        "id": str(u.id),
        "name": u.name,
        "email": u.email,
        "provider": u.provider,
        "permissions": sorted(await u.permission_names()),
    }

@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn):
    """
    Register a new user account with the default role.

    Raises:
        BadRequestError (400): MissingFields when name/email/password is blank
        BadRequestError (400): EmailExists when the email is already registered
    """
    if not body.name.strip() or not body.email.strip() or not body.password:
        raise BadRequestError("MissingFields")
    email = body.email.strip().lower()
    if await User.filter(email=email).exists():
        raise BadRequestError("EmailExists")
    u = await User.create(
        name=body.name.strip(),
        email=email,
        password_hash=hash_password(body.password),
        provider=settings.default_provider,
        role=await Role.get_or_none(name=DEFAULT_ROLE),
    )
    return {"data": await _user_to_dict(u)}

@router.post("/login")
async def login(payload: LoginRequest, response: Response):
    """
    Authenticate user and create a session token.

    The token is returned in the response body and also set as an HttpOnly
    cookie named "accessToken" for browser-based clients.

    Raises:
        HTTPException (401): If credentials are invalid
    """
    user = await User.get_or_none(email=payload.email.strip().lower())
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail={"code": "AUTH_INVALID_CREDENTIALS", "message": "Incorrect email or password"})
    token = create_access_token(str(user.id), user.provider)
    response.set_cookie("accessToken", token, httponly=True, secure=False, samesite="lax")
    return {"data": {"user": await _user_to_dict(user), "accessToken": token}}

@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    return {"data": await _user_to_dict(user)}

@router.post("/logout")
async def logout(response: Response):
    """
    Clear the session cookie. The JWT itself stays valid until it expires.
    """
    response.delete_cookie("accessToken")
    return {"data": None}
