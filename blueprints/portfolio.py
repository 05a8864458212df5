from flask import Blueprint, jsonify

import repository
from security import token_required, acting_user_id
from storage import get_store
from utils import serialize_row, to_json_value


bp = Blueprint("portfolio", __name__, url_prefix="/invest")


def format_withdrawal(row):
    """Withdrawals are shown in the portfolio as negative entries."""
    return {
        "id": row["id"],
        "name": "Withdrawal",
        "amount": -to_json_value(row["amount"]),
        "created_at": to_json_value(row["date"]),
    }


# ----------------------------------------------------------------------------------
# USER INVESTMENTS / PORTFOLIO
# ----------------------------------------------------------------------------------
@bp.route("/<user_id>", methods=["GET"])
@token_required
def get_portfolio(user_id):
    """
    Investments (with their plan name) followed by the user's withdrawals.
    The two reads are independent; they are not run in one transaction.
    """
    user_id = acting_user_id(user_id)
    store = get_store()

    investments = [serialize_row(row) for row in repository.list_investments(store, user_id)]
    withdrawals = [format_withdrawal(row) for row in repository.list_withdrawals(store, user_id)]

    return jsonify(investments + withdrawals), 200
