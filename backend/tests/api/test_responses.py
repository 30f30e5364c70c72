"""Tests for the response envelopes and the error handlers."""

from api.models.responses import ApiResponse, ErrorResponse


class TestEnvelopeModels:
    def test_success_flag_follows_status(self):
        """success is derived from the status code."""
        assert ApiResponse(data={}).model_dump(by_alias=True)["success"] is True
        assert ApiResponse(status_code=404, data=None).success is False

    def test_success_envelope_keys(self):
        """The success envelope uses camelCase keys."""
        body = ApiResponse(status_code=201, data={"a": 1}, message="Created").model_dump(by_alias=True)
        assert body == {"statusCode": 201, "data": {"a": 1}, "message": "Created", "success": True}

    def test_error_envelope_defaults(self):
        """The error envelope always has null data and an errors list."""
        body = ErrorResponse(status_code=400, message="Bad").model_dump(by_alias=True)
        assert body == {
            "statusCode": 400,
            "message": "Bad",
            "data": None,
            "success": False,
            "errors": [],
        }


class TestErrorHandlers:
    def test_unknown_route(self, client):
        """Framework 404s use the error envelope."""
        response = client.get("/api/v1/nowhere")
        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["data"] is None

    def test_malformed_json_body(self, client):
        """Request validation failures are itemized 400s."""
        response = client.post("/api/v1/users/login", json={"username": "alice"})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert body["errors"][0]["field"] == "password"
