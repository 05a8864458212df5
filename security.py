# security.py - password hashing, bearer tokens and the token gate for protected routes
from functools import wraps
from datetime import datetime, timedelta, timezone

import jwt
from flask import request, jsonify, current_app, g, abort
from werkzeug.security import check_password_hash, generate_password_hash

from logger import auth_logger

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, password)


def create_token(user_id, secret=None, expires_in=None) -> str:
    """Signed identity claim {id} that expires after TOKEN_EXPIRES_SECONDS."""
    secret = secret or current_app.config["SECRET_KEY"]
    if expires_in is None:
        expires_in = current_app.config.get("TOKEN_EXPIRES_SECONDS", 3600)
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_token(token: str, secret=None) -> dict:
    secret = secret or current_app.config["SECRET_KEY"]
    return jwt.decode(
        token,
        secret,
        algorithms=[ALGORITHM],
        options={"require": ["exp", "id"]},
    )


def token_required(f):
    """
    Decorator for protected routes.
    - Reads `Authorization: Bearer <token>`.
    - Rejects with 401 when the header is missing or the token does not verify.
    - Stores the verified user id on `g.user_id`.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        bearer_header = request.headers.get("Authorization")
        if not bearer_header:
            return jsonify({"error": "Access denied. No token provided."}), 401

        parts = bearer_header.split()
        token = parts[1] if len(parts) > 1 else ""

        try:
            payload = decode_token(token)
        except jwt.InvalidTokenError as e:
            auth_logger.warning(f"Rejected token from {request.remote_addr}: {e}")
            return jsonify({"error": "Invalid or expired token"}), 401

        g.user_id = payload["id"]
        return f(*args, **kwargs)

    return decorated_function


def acting_user_id(claimed_user_id=None):
    """
    The user id a protected request acts for. Always the token identity;
    a caller-supplied id is only accepted when it names the same user.
    """
    if claimed_user_id not in (None, "") and str(claimed_user_id) != str(g.user_id):
        auth_logger.warning(f"User {g.user_id} attempted to act for user {claimed_user_id}")
        abort(403)
    return g.user_id
