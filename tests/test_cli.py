from app import create_app
from config import TestingConfig
from extensions import db
from models import Investment, Plan


def test_init_db_creates_tables():
    app = create_app(TestingConfig)
    with app.app_context():
        assert db.inspect(db.engine).get_table_names() == []

    result = app.test_cli_runner().invoke(args=["init-db"])

    assert result.exit_code == 0
    assert "Initialized the database." in result.output
    with app.app_context():
        tables = set(db.inspect(db.engine).get_table_names())
    assert {"users", "transactions", "plans", "investments", "contacts"} <= tables


def test_add_plan_shows_up_in_portfolio(app, client, user):
    user_id, headers = user

    result = app.test_cli_runner().invoke(args=["add-plan", "Gold"])

    assert result.exit_code == 0
    assert "Added plan Gold." in result.output
    with app.app_context():
        plan = db.session.query(Plan).filter_by(name="Gold").one()
        db.session.add(Investment(plan_id=plan.id, user_id=user_id, amount=250))
        db.session.commit()

    rows = client.get(f"/invest/{user_id}", headers=headers).get_json()
    assert [(r["name"], r["amount"]) for r in rows] == [("Gold", 250)]
