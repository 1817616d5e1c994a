"""Tests for the seed-users command."""

from lockedin.models.user import User


def test_seed_users_is_idempotent(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-users"])
    assert result.exit_code == 0
    assert "created 0 user(s)" in result.output
    assert User.query.count() == 2


def test_seed_users_adds_new_names(app):
    app.config["SEED_USERS"] = ["Thomas", "Nico", "Sam"]
    result = app.test_cli_runner().invoke(args=["seed-users"])

    assert "created 1 user(s)" in result.output
    assert User.query.filter_by(name="Sam").count() == 1
