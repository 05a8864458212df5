# models.py - Flask-SQLAlchemy schema for the InvestaPro tables
import enum
from sqlalchemy import Index
from extensions import db

# ===========================================================
# ENUM DEFINITIONS
# ===========================================================

class TransactionType(enum.Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class TransactionStatus(enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# ===========================================================
# USER MODELS
# ===========================================================

class User(db.Model):
    """Credential record. Created on signup, never updated or deleted by the API."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)

    transactions = db.relationship('Transaction', back_populates='user', lazy='dynamic')
    investments = db.relationship('Investment', back_populates='user', lazy='dynamic')

    def __repr__(self):
        return f"<User {self.id} {self.email}>"


# ===========================================================
# TRANSACTIONS
# ===========================================================

class Transaction(db.Model):
    __tablename__ = 'transactions'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    type = db.Column(db.String(20), nullable=False)  # deposit, withdrawal
    amount = db.Column(db.Numeric(precision=18, scale=2), nullable=False)
    status = db.Column(db.String(20), default=TransactionStatus.PENDING.value, nullable=False)
    date = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    user = db.relationship('User', back_populates='transactions')

    __table_args__ = (
        Index('idx_transaction_user_date', 'user_id', 'date'),
    )


# ===========================================================
# PLANS & INVESTMENTS
# ===========================================================

class Plan(db.Model):
    __tablename__ = 'plans'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)


class Investment(db.Model):
    """Read-only from the API; rows are written by the operators' tooling."""
    __tablename__ = 'investments'

    id = db.Column(db.Integer, primary_key=True)
    plan_id = db.Column(db.Integer, db.ForeignKey('plans.id'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    amount = db.Column(db.Numeric(precision=18, scale=2), nullable=False)
    start_date = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    plan = db.relationship('Plan')
    user = db.relationship('User', back_populates='investments')


# ===========================================================
# CONTACT MESSAGES
# ===========================================================

class ContactMessage(db.Model):
    __tablename__ = 'contacts'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    message = db.Column(db.Text, nullable=False)
