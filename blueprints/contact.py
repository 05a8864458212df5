from flask import Blueprint, jsonify

import repository
from logger import app_logger
from security import token_required, acting_user_id
from storage import get_store
from utils import get_json_body, has_required


bp = Blueprint("contact", __name__, url_prefix="")


#===========================================================================
#      CONTACT FORM
#==============================================================================
@bp.route("/contact", methods=["POST"])
@token_required
def contact():
    data = get_json_body()
    if not has_required(data, "name", "email", "message"):
        return jsonify({"error": "All fields are required"}), 400

    user_id = acting_user_id(data.get("user_id"))
    repository.create_contact_message(
        get_store(),
        user_id=user_id,
        name=data["name"],
        email=data["email"],
        message=data["message"],
    )
    app_logger.info(f"Contact message received from user {user_id}")

    return jsonify({"message": "Message sent successfully"}), 200
