"""
SQL used by the request handlers.
Every function takes the injected store as its first argument.
"""
from models import TransactionType, TransactionStatus


# ==========================================================
#                  USERS
# ==========================================================
def create_user(store, full_name, email, phone, password_hash):
    store.execute(
        "INSERT INTO users (full_name, email, phone, password_hash) "
        "VALUES (:full_name, :email, :phone, :password_hash)",
        {"full_name": full_name, "email": email, "phone": phone, "password_hash": password_hash},
    )


def find_user_by_email(store, email):
    """First user with this email, or None."""
    rows = store.execute(
        "SELECT id, full_name, email, phone, password_hash FROM users WHERE email = :email ORDER BY id",
        {"email": email},
    )
    return rows[0] if rows else None


def find_user_by_id(store, user_id):
    rows = store.execute(
        "SELECT id, full_name, email, phone FROM users WHERE id = :id",
        {"id": user_id},
    )
    return rows[0] if rows else None


# ==========================================================
#                  TRANSACTIONS
# ==========================================================
def record_transaction(store, user_id, tx_type: TransactionType, amount):
    """New transactions always start as pending; approval happens elsewhere."""
    store.execute(
        "INSERT INTO transactions (user_id, type, amount, status) "
        "VALUES (:user_id, :type, :amount, :status)",
        {
            "user_id": user_id,
            "type": tx_type.value,
            "amount": str(amount),
            "status": TransactionStatus.PENDING.value,
        },
    )


def list_transactions(store, user_id):
    return store.execute(
        "SELECT id, type, amount, status, date FROM transactions "
        "WHERE user_id = :user_id ORDER BY date DESC, id DESC",
        {"user_id": user_id},
    )


def list_withdrawals(store, user_id):
    return store.execute(
        "SELECT id, type, amount, date FROM transactions "
        "WHERE user_id = :user_id AND type = :type",
        {"user_id": user_id, "type": TransactionType.WITHDRAWAL.value},
    )


# ==========================================================
#                  INVESTMENTS
# ==========================================================
def list_investments(store, user_id):
    return store.execute(
        "SELECT i.id, p.name, i.amount, i.start_date "
        "FROM investments i JOIN plans p ON i.plan_id = p.id "
        "WHERE i.user_id = :user_id",
        {"user_id": user_id},
    )


def create_plan(store, name):
    store.execute("INSERT INTO plans (name) VALUES (:name)", {"name": name})


# ==========================================================
#                  CONTACT
# ==========================================================
def create_contact_message(store, user_id, name, email, message):
    store.execute(
        "INSERT INTO contacts (user_id, name, email, message) "
        "VALUES (:user_id, :name, :email, :message)",
        {"user_id": user_id, "name": name, "email": email, "message": message},
    )
