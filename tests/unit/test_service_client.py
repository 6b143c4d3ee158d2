import pytest
import requests

from bgremover.service.client import (
    ServiceError,
    ServiceTransportError,
    remove_background,
)

from helpers import PNG_DATA_URL, make_response, make_session

ENDPOINT = "http://service.test/api/remove-background"


def _call(session, endpoint: str = ENDPOINT):
    return remove_background(
        endpoint,
        b"raw-bytes",
        "cat.jpg",
        "image/jpeg",
        timeout=7.5,
        session=session,
    )


class TestRemoveBackgroundSuccess:
    def test_returns_image_data_url(self) -> None:
        session = make_session(make_response(200, {"success": True, "image": PNG_DATA_URL}))

        result = _call(session)

        assert result.image == PNG_DATA_URL
        assert result.status_code == 200

    def test_posts_single_multipart_field(self) -> None:
        session = make_session(make_response(200, {"success": True, "image": PNG_DATA_URL}))

        _call(session)

        session.post.assert_called_once_with(
            ENDPOINT,
            files={"image": ("cat.jpg", b"raw-bytes", "image/jpeg")},
            timeout=7.5,
        )


class TestRemoveBackgroundServiceErrors:
    def test_error_body_message_is_kept(self) -> None:
        session = make_session(make_response(500, {"error": "server overloaded"}))

        with pytest.raises(ServiceError) as excinfo:
            _call(session)

        assert excinfo.value.message == "server overloaded"
        assert excinfo.value.status_code == 500

    def test_error_body_without_message(self) -> None:
        session = make_session(make_response(400, {"detail": "nope"}))

        with pytest.raises(ServiceError) as excinfo:
            _call(session)

        assert excinfo.value.message is None
        assert "400" in str(excinfo.value)

    def test_non_json_error_body(self) -> None:
        session = make_session(make_response(503, json_error=True))

        with pytest.raises(ServiceError) as excinfo:
            _call(session)

        assert excinfo.value.message is None

    def test_success_flag_false_is_service_error(self) -> None:
        session = make_session(make_response(200, {"success": False, "error": "no subject found"}))

        with pytest.raises(ServiceError, match="no subject found"):
            _call(session)

    @pytest.mark.parametrize("status", [200, 422])
    def test_structured_error_field_becomes_text(self, status: int) -> None:
        session = make_session(make_response(status, {"success": False, "error": {"code": 7}}))

        with pytest.raises(ServiceError) as excinfo:
            _call(session)

        assert isinstance(excinfo.value.message, str)
        assert excinfo.value.message == "{'code': 7}"


class TestRemoveBackgroundTransportErrors:
    def test_connection_error(self) -> None:
        session = make_session(side_effect=requests.ConnectionError("refused"))

        with pytest.raises(ServiceTransportError, match="Request failed"):
            _call(session)

    def test_timeout(self) -> None:
        session = make_session(side_effect=requests.Timeout("slow"))

        with pytest.raises(ServiceTransportError):
            _call(session)

    def test_malformed_success_body(self) -> None:
        session = make_session(make_response(200, json_error=True))

        with pytest.raises(ServiceTransportError, match="not valid JSON"):
            _call(session)

    def test_non_object_body(self) -> None:
        session = make_session(make_response(200, ["not", "an", "object"]))

        with pytest.raises(ServiceTransportError, match="not a JSON object"):
            _call(session)

    def test_missing_image_field(self) -> None:
        session = make_session(make_response(200, {"success": True}))

        with pytest.raises(ServiceTransportError, match="missing image"):
            _call(session)

    def test_empty_endpoint(self) -> None:
        session = make_session(make_response(200, {"success": True, "image": PNG_DATA_URL}))

        with pytest.raises(ServiceTransportError, match="not configured"):
            _call(session, endpoint="")

        session.post.assert_not_called()
