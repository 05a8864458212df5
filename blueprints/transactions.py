#======================================================================================================
#
#   DEPOSIT / WITHDRAWAL REQUESTS
#   Requests are only logged as pending rows; approval is handled outside this service.
#
#======================================================================================================
from flask import Blueprint, jsonify, current_app

import repository
from logger import transactions_logger
from models import TransactionType
from security import token_required, acting_user_id
from storage import get_store
from utils import get_json_body, parse_amount, serialize_row


bp = Blueprint("transactions", __name__, url_prefix="/transactions")


def _read_request():
    """
    Validate a deposit/withdrawal body.
    Returns (user_id, amount, None) or (None, None, error_response).
    """
    data = get_json_body()
    if data.get("amount") in (None, ""):
        return None, None, (jsonify({"error": "User ID and amount are required"}), 400)

    amount = parse_amount(data["amount"])
    if amount is None:
        return None, None, (jsonify({"error": "Amount must be a positive number"}), 400)

    return acting_user_id(data.get("user_id")), amount, None


#=============================================================================================
#      DEPOSIT
#============================================================================================
@bp.route("/deposit", methods=["POST"])
@token_required
def deposit():
    user_id, amount, error = _read_request()
    if error:
        return error

    repository.record_transaction(get_store(), user_id, TransactionType.DEPOSIT, amount)
    transactions_logger.info(f"Deposit request of {amount} recorded for user {user_id}")

    return jsonify({
        "message": "Deposit request recorded. Please send the amount to the Binance wallet below.",
        "wallet": current_app.config["BINANCE_WALLET"],
    }), 200


#=============================================================================================
#      WITHDRAWAL
#============================================================================================
@bp.route("/withdrawal", methods=["POST"])
@token_required
def withdrawal():
    user_id, amount, error = _read_request()
    if error:
        return error

    repository.record_transaction(get_store(), user_id, TransactionType.WITHDRAWAL, amount)
    transactions_logger.info(f"Withdrawal request of {amount} recorded for user {user_id}")

    return jsonify({"message": "Withdrawal request recorded. Pending approval."}), 200


#=============================================================================================
#      HISTORY
#============================================================================================
@bp.route("/<user_id>", methods=["GET"])
@token_required
def list_transactions(user_id):
    """Most recent first."""
    rows = repository.list_transactions(get_store(), acting_user_id(user_id))
    return jsonify([serialize_row(row) for row in rows]), 200
