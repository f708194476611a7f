from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from goalboard.extensions.database import db
from goalboard.models import Goal, Milestone, User
from goalboard.models.user import initials_from_name


def _create_user() -> User:
    user = User(
        email="model-user@email.com",
        full_name="Model User",
        initials=initials_from_name("Model User"),
        password="hash",
    )
    db.session.add(user)
    db.session.commit()
    return user


def test_initials_from_name() -> None:
    assert initials_from_name("Jane Doe") == "JD"
    assert initials_from_name("jane  mary doe") == "JM"
    assert initials_from_name("Cher") == "C"
    assert initials_from_name("   ") == ""


def test_goal_defaults_and_ordered_milestones(app) -> None:
    with app.app_context():
        user = _create_user()
        goal = Goal(
            user_id=user.id,
            title="Learn Spanish",
            start_date=date(2024, 1, 15),
            due_date=date(2024, 3, 20),
        )
        goal.milestones.append(Milestone(title="Second", order_index=1))
        goal.milestones.append(Milestone(title="First", order_index=0))
        db.session.add(goal)
        db.session.commit()
        goal_id = goal.id
        db.session.expire_all()

        stored = db.session.get(Goal, goal_id)
        assert stored.status == "active"
        assert [m.title for m in stored.milestones] == ["First", "Second"]
        assert all(m.completed is False for m in stored.milestones)


def test_deleting_goal_removes_milestones(app) -> None:
    with app.app_context():
        user = _create_user()
        goal = Goal(
            user_id=user.id,
            title="Ship side project",
            start_date=date(2024, 4, 1),
            due_date=date(2024, 6, 30),
        )
        goal.milestones.append(Milestone(title="MVP", order_index=0))
        db.session.add(goal)
        db.session.commit()

        db.session.delete(goal)
        db.session.commit()

        assert Milestone.query.count() == 0


def test_goal_status_is_constrained(app) -> None:
    with app.app_context():
        user = _create_user()
        db.session.add(
            Goal(
                user_id=user.id,
                title="Invalid",
                status="paused",
                start_date=date(2024, 4, 1),
                due_date=date(2024, 6, 30),
            )
        )
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()
