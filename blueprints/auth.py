from flask import Blueprint, jsonify

import repository
from logger import auth_logger
from security import hash_password, verify_password, create_token, token_required, acting_user_id
from storage import get_store
from utils import get_json_body, has_required


#==================================================================================================================

bp = Blueprint("auth", __name__, url_prefix="/auth")


#===========================================================================
#      SIGN UP ROUTE.
#==============================================================================
@bp.route("/signup", methods=["POST"])
def signup():
    """
    Create a new user.
    Expected JSON: full_name, email, phone, password (all required).
    Duplicate emails are rejected by the users.email unique constraint.
    """
    data = get_json_body()

    if not has_required(data, "full_name", "email", "phone", "password"):
        return jsonify({"error": "All fields are required"}), 400

    repository.create_user(
        get_store(),
        full_name=data["full_name"],
        email=data["email"],
        phone=data["phone"],
        password_hash=hash_password(data["password"]),
    )

    auth_logger.info(f"New signup for {data['email']}")
    return jsonify({"message": "Signup successful"}), 200


# --------------------------------------------------
#      Login Route
# --------------------------------------------------
@bp.route("/login", methods=["POST"])
def login():
    """
    Authenticate a user.
    Expected JSON:
    {
        "email": "",
        "password": ""
    }
    """
    data = get_json_body()

    if not has_required(data, "email", "password"):
        return jsonify({"error": "Email and password are required"}), 400

    user = repository.find_user_by_email(get_store(), data["email"])
    if not user:
        auth_logger.info(f"Login for unknown email {data['email']}")
        return jsonify({"error": "User not found"}), 401

    if not verify_password(data["password"], user["password_hash"]):
        auth_logger.info(f"Wrong password for user {user['id']}")
        return jsonify({"error": "Invalid password"}), 401

    token = create_token(user["id"])
    auth_logger.info(f"User {user['id']} logged in")

    return jsonify({
        "message": "Login successful",
        "token": token,
        "user_id": user["id"],
    }), 200


# ----------------------------------------------------------------------------------
# USER INFO FOR THE DASHBOARD WELCOME
# ----------------------------------------------------------------------------------
@bp.route("/user/<user_id>", methods=["GET"])
@token_required
def get_user(user_id):
    user = repository.find_user_by_id(get_store(), acting_user_id(user_id))
    if not user:
        return jsonify({"error": "User not found"}), 404
    return jsonify(user), 200
