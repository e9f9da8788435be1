from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest
from flask import Flask
from flask.testing import FlaskClient

from classtrack.app import create_app
from classtrack.domain.courses.entities import WEEKDAYS
from classtrack.infrastructure.db import ENGINE, Base


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def app() -> Flask:
    return create_app()


def _signed_in(app: Flask, username: str) -> FlaskClient:
    client = app.test_client()
    client.post(
        "/api/auth?action=register",
        json={
            "username": username,
            "email": f"{username}@x.io",
            "password": "secret123",
            "firstName": username.title(),
            "lastName": "Student",
            "program": "BSIT",
            "yearLevel": "1",
        },
    )
    login = client.post(
        "/api/auth?action=login", json={"username": username, "password": "secret123"}
    )
    assert login.status_code == 200
    return client


CS101 = {
    "courseCode": "CS101",
    "courseTitle": "Intro to Programming",
    "instructor": "Dr. Reyes",
    "colorCode": "#4f46e5",
    "scheduleDay": "Monday",
    "timeStart": "08:00",
    "timeEnd": "09:30",
}


def test_courses_require_authentication(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api/courses?action=list")

    assert response.status_code == 401
    assert response.get_json()["message"] == "Authentication required"


def test_course_lifecycle(app: Flask) -> None:
    alice = _signed_in(app, "alice")

    created = alice.post("/api/courses?action=create", json=CS101)
    assert created.status_code == 200
    course = created.get_json()["course"]
    assert course["time_start"] == "08:00"

    listed = alice.get("/api/courses?action=list").get_json()
    assert [c["course_code"] for c in listed["courses"]] == ["CS101"]
    assert alice.get("/api/courses?action=count").get_json()["count"] == 1

    updated = alice.put(
        f"/api/courses?action=update&id={course['id']}",
        json={**CS101, "courseTitle": "Programming 1"},
    )
    assert updated.status_code == 200
    fetched = alice.get(f"/api/courses?action=get&id={course['id']}").get_json()
    assert fetched["course"]["course_title"] == "Programming 1"

    deleted = alice.delete(f"/api/courses?action=delete&id={course['id']}")
    assert deleted.get_json()["message"] == "Course deleted successfully"
    assert alice.get("/api/courses?action=count").get_json()["count"] == 0


def test_courses_are_isolated_per_user(app: Flask) -> None:
    alice = _signed_in(app, "alice")
    bob = _signed_in(app, "bob")

    course_id = alice.post("/api/courses?action=create", json=CS101).get_json()["course"]["id"]

    assert bob.get("/api/courses?action=list").get_json()["courses"] == []
    assert bob.get(f"/api/courses?action=get&id={course_id}").status_code == 404
    assert bob.delete(f"/api/courses?action=delete&id={course_id}").status_code == 404
    # Course codes are unique per user only.
    assert bob.post("/api/courses?action=create", json=CS101).status_code == 200
    assert alice.get("/api/courses?action=count").get_json()["count"] == 1


def test_duplicate_course_code_is_409(app: Flask) -> None:
    alice = _signed_in(app, "alice")

    assert alice.post("/api/courses?action=create", json=CS101).status_code == 200
    duplicate = alice.post("/api/courses?action=create", json=CS101)

    assert duplicate.status_code == 409
    assert duplicate.get_json()["message"] == "Course code already exists"


def test_today_schedule_lists_only_todays_courses(app: Flask) -> None:
    alice = _signed_in(app, "alice")
    today = WEEKDAYS[date.today().weekday()]
    other = WEEKDAYS[(date.today().weekday() + 1) % 7]

    alice.post("/api/courses?action=create", json={**CS101, "scheduleDay": today})
    alice.post(
        "/api/courses?action=create",
        json={**CS101, "courseCode": "MATH1", "scheduleDay": other},
    )

    schedule = alice.get("/api/courses?action=today-schedule").get_json()["schedule"]
    assert [c["course_code"] for c in schedule] == ["CS101"]


def test_course_requests_are_validated(app: Flask) -> None:
    alice = _signed_in(app, "alice")

    missing_id = alice.get("/api/courses?action=get")
    assert missing_id.status_code == 400

    bad_color = alice.post("/api/courses?action=create", json={**CS101, "colorCode": "blue"})
    assert bad_color.status_code == 400
    assert bad_color.get_json()["error"] == "validation_error"

    assert alice.get("/api/courses?action=nope").status_code == 404
    assert alice.patch("/api/courses?action=list").status_code == 405
