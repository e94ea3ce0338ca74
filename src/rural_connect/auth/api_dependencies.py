"""FastAPI dependencies for customer authentication."""

from typing import Annotated

from fastapi import Header, HTTPException

from rural_connect.auth.token_validator import BearerTokenValidator


def get_user_id_from_authorization(
    authorization: Annotated[str | None, Header()] = None,
    validator: BearerTokenValidator | None = None,
) -> str:
    """Extract the bearer token from the Authorization header and resolve its user.

    Args:
        authorization: Raw Authorization header value (injected by FastAPI)
        validator: BearerTokenValidator used to resolve the token

    Returns:
        str: The authenticated user id

    Raises:
        HTTPException: 401 if the header is missing, malformed, or the token is unknown
    """
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing bearer token")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Invalid authorization header")

    user_id = validator.resolve(token.strip()) if validator else None
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid bearer token")

    return user_id
