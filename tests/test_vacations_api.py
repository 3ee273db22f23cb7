"""Vacation request endpoint tests."""

from datetime import date, timedelta
from uuid import uuid4

import pytest


def days_from_now(days: int) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


@pytest.fixture
def employee(create_employee) -> dict:
    return create_employee()


@pytest.fixture
def request_vacation(client, admin_headers, employee):
    def _request(start_in: int = 10, length: int = 5, **overrides):
        payload = {
            "employee_id": employee["id"],
            "start_date": days_from_now(start_in),
            "end_date": days_from_now(start_in + length - 1),
            "reason": "Family trip",
        }
        payload.update(overrides)
        return client.post("/api/vacations", json=payload, headers=admin_headers)

    return _request


class TestRequestVacation:
    def test_request_is_pending(self, request_vacation, employee):
        response = request_vacation(length=5)

        assert response.status_code == 201
        body = response.json()
        assert body["employee_id"] == employee["id"]
        assert body["status"] == "pending"
        assert body["days_requested"] == 5
        assert 1 <= body["working_days_requested"] <= 5
        assert body["is_upcoming"] is False
        assert body["approved_at"] is None

    def test_unknown_employee(self, request_vacation):
        response = request_vacation(employee_id=str(uuid4()))
        assert response.status_code == 404

    def test_past_start_is_rejected(self, request_vacation):
        response = request_vacation(start_in=-3)
        assert response.status_code == 400
        assert response.json()["error"] == "Vacation cannot start in the past"

    def test_end_before_start_is_rejected(self, request_vacation):
        response = request_vacation(end_date=days_from_now(5), start_date=days_from_now(8))
        assert response.status_code == 400
        assert response.json()["error"] == "End date must be after start date"

    def test_new_hire_is_not_eligible(self, client, admin_headers, create_employee):
        new_hire = create_employee(hired_at=date.today().isoformat())
        response = client.post(
            "/api/vacations",
            json={
                "employee_id": new_hire["id"],
                "start_date": days_from_now(10),
                "end_date": days_from_now(12),
            },
            headers=admin_headers,
        )
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Employee is not eligible for vacation yet"
        assert "eligible_from" in body["details"]

    def test_overlapping_request_conflicts(self, request_vacation):
        assert request_vacation(start_in=10, length=5).status_code == 201
        response = request_vacation(start_in=14, length=3)
        assert response.status_code == 409
        assert response.json()["error"] == "Vacation period overlaps an existing request"

    def test_rejected_request_does_not_block(self, client, admin_headers, request_vacation):
        first = request_vacation(start_in=10, length=5).json()
        client.post(f"/api/vacations/{first['id']}/reject", json={"reason": "No cover"}, headers=admin_headers)
        assert request_vacation(start_in=10, length=5).status_code == 201

    def test_adjacent_request_is_allowed(self, request_vacation):
        assert request_vacation(start_in=10, length=5).status_code == 201
        assert request_vacation(start_in=15, length=2).status_code == 201


class TestReviewVacation:
    def test_approve(self, client, admin_headers, request_vacation):
        vacation = request_vacation().json()

        response = client.post(f"/api/vacations/{vacation['id']}/approve", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "approved"
        assert body["approved_at"] is not None
        assert body["is_upcoming"] is True

    def test_approve_twice_is_illegal(self, client, admin_headers, request_vacation):
        vacation = request_vacation().json()
        client.post(f"/api/vacations/{vacation['id']}/approve", headers=admin_headers)

        response = client.post(f"/api/vacations/{vacation['id']}/approve", headers=admin_headers)

        assert response.status_code == 422
        assert response.json()["error"] == "Only pending vacation requests can be approved"

    def test_reject_with_reason(self, client, admin_headers, request_vacation):
        vacation = request_vacation().json()
        response = client.post(
            f"/api/vacations/{vacation['id']}/reject", json={"reason": "Busy season"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["rejection_reason"] == "Busy season"

    def test_reject_without_reason(self, client, admin_headers, request_vacation):
        vacation = request_vacation().json()
        response = client.post(
            f"/api/vacations/{vacation['id']}/reject", json={"reason": " "}, headers=admin_headers
        )
        assert response.status_code == 400

    def test_only_admins_review(self, client, user_headers, request_vacation):
        vacation = request_vacation().json()
        response = client.post(f"/api/vacations/{vacation['id']}/approve", headers=user_headers)
        assert response.status_code == 403

    def test_cancel_rejected_is_illegal(self, client, admin_headers, request_vacation):
        vacation = request_vacation().json()
        client.post(f"/api/vacations/{vacation['id']}/reject", json={"reason": "No"}, headers=admin_headers)
        response = client.post(f"/api/vacations/{vacation['id']}/cancel", headers=admin_headers)
        assert response.status_code == 422

    def test_user_can_cancel(self, client, user_headers, request_vacation):
        vacation = request_vacation().json()
        response = client.post(f"/api/vacations/{vacation['id']}/cancel", headers=user_headers)
        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"


class TestEditVacation:
    def test_update_reason_and_period(self, client, admin_headers, request_vacation):
        vacation = request_vacation(start_in=10, length=5).json()

        response = client.patch(
            f"/api/vacations/{vacation['id']}",
            json={"reason": "Conference", "start_date": days_from_now(11), "end_date": days_from_now(13)},
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["reason"] == "Conference"
        assert body["days_requested"] == 3

    def test_period_change_needs_both_dates(self, client, admin_headers, request_vacation):
        vacation = request_vacation().json()
        response = client.patch(
            f"/api/vacations/{vacation['id']}", json={"start_date": days_from_now(20)}, headers=admin_headers
        )
        assert response.status_code == 400

    def test_approved_request_cannot_be_edited(self, client, admin_headers, request_vacation):
        vacation = request_vacation().json()
        client.post(f"/api/vacations/{vacation['id']}/approve", headers=admin_headers)
        response = client.patch(
            f"/api/vacations/{vacation['id']}", json={"reason": "Changed"}, headers=admin_headers
        )
        assert response.status_code == 422

    @pytest.mark.parametrize("start_in,end_in", [(29, 32), (-5, -2)])
    def test_approved_period_change_is_refused_before_period_checks(
        self, client, admin_headers, request_vacation, start_in, end_in
    ):
        vacation = request_vacation(start_in=10).json()
        assert request_vacation(start_in=30).status_code == 201
        client.post(f"/api/vacations/{vacation['id']}/approve", headers=admin_headers)

        response = client.patch(
            f"/api/vacations/{vacation['id']}",
            json={"start_date": days_from_now(start_in), "end_date": days_from_now(end_in)},
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert response.json()["error"] == "Can only update period for pending vacation requests"


class TestListAndDelete:
    def test_filter_by_status_and_employee(self, client, admin_headers, request_vacation, employee):
        first = request_vacation(start_in=10).json()
        request_vacation(start_in=30)
        client.post(f"/api/vacations/{first['id']}/approve", headers=admin_headers)

        approved = client.get("/api/vacations?status=approved", headers=admin_headers).json()
        mine = client.get(f"/api/vacations?employee_id={employee['id']}", headers=admin_headers).json()
        others = client.get(f"/api/vacations?employee_id={uuid4()}", headers=admin_headers).json()

        assert [v["id"] for v in approved["items"]] == [first["id"]]
        assert mine["total"] == 2
        assert others["total"] == 0

    def test_unknown_status_fails_validation(self, client, admin_headers):
        response = client.get("/api/vacations?status=archived", headers=admin_headers)
        assert response.status_code == 422

    def test_delete(self, client, admin_headers, request_vacation):
        vacation = request_vacation().json()
        assert client.delete(f"/api/vacations/{vacation['id']}", headers=admin_headers).status_code == 204
        assert client.get(f"/api/vacations/{vacation['id']}", headers=admin_headers).status_code == 404
