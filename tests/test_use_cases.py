# tests/test_use_cases.py
import logging

import pytest

from pkg_reddit.adapters.reddit_json.decoder import decode_identity, decode_item, decode_item_page
from pkg_reddit.application.use_cases.handle_response import HandleResponseUseCase
from pkg_reddit.domain.entities import EMPTY_ITEM_PAGE, IdentityResult, TokenRefreshResult
from pkg_reddit.domain.exceptions import ApiError, MalformedResponseError
from pkg_reddit.integrations.common.response_factory import create_reddit_responses
from pkg_reddit.settings import ResponseSettings


def test_success_status_runs_handler():
    use_case = HandleResponseUseCase(decode_identity)
    assert use_case.execute({"id": "t2_abc", "name": "FooBar"}, 200) == IdentityResult("t2_abc", "FooBar")


@pytest.mark.parametrize("status_code", [400, 401, 403, 404, 429, 500, 503])
def test_error_status_raises_api_error(status_code):
    use_case = HandleResponseUseCase(decode_identity)

    with pytest.raises(ApiError) as exc_info:
        use_case.execute({"message": "Nope", "error": status_code}, status_code)

    err = exc_info.value
    assert err.status_code == status_code
    assert err.code == status_code
    assert str(err) == f"Nope ({status_code})"


def test_error_status_is_logged(caplog):
    use_case = HandleResponseUseCase(decode_identity)

    with caplog.at_level(logging.DEBUG, logger="pkg_reddit"):
        with pytest.raises(ApiError):
            use_case.execute({"message": "Forbidden", "error": 403}, 403)

    assert "Forbidden (403)" in caplog.text


def test_missing_fields_are_not_logged(caplog):
    use_case = HandleResponseUseCase(decode_identity)

    with caplog.at_level(logging.DEBUG, logger="pkg_reddit"):
        use_case.execute({}, 200)

    assert caplog.records == []


def test_custom_error_threshold():
    use_case = HandleResponseUseCase(decode_identity, ResponseSettings(error_status_min=500))
    assert use_case.execute({"id": "x", "name": "y"}, 404) == IdentityResult("x", "y")

    with pytest.raises(ApiError):
        use_case.execute({}, 500)


def test_malformed_response_propagates():
    use_case = HandleResponseUseCase(decode_item)

    with pytest.raises(MalformedResponseError):
        use_case.execute({"kind": "t1"}, 200)


def test_unexpected_handler_failure_is_wrapped():
    def broken_handler(node):
        raise KeyError("children")

    use_case = HandleResponseUseCase(broken_handler)

    with pytest.raises(MalformedResponseError) as exc_info:
        use_case.execute({}, 200)

    assert isinstance(exc_info.value.__cause__, KeyError)


def test_reddit_responses_facade():
    responses = create_reddit_responses()

    assert responses.refresh_token({"access_token": "a", "refresh_token": "r"}, 200) == TokenRefreshResult("a", "r")
    assert responses.identity({"id": "t2_abc", "name": "FooBar"}, 200).normalized_username() == "foobar"
    assert responses.item({"kind": "t1", "data": {"id": "xyz"}}, 200).full_name() == "t1_xyz"
    assert responses.listing({"data": {"children": []}}, 200) is EMPTY_ITEM_PAGE

    with pytest.raises(ApiError) as exc_info:
        responses.listing({"message": "Unauthorized", "error": 401}, 401)
    assert exc_info.value.is_client_error


def test_reddit_responses_share_settings():
    settings = ResponseSettings(error_status_min=300)
    responses = create_reddit_responses(settings)

    assert responses.listing_use_case.settings is settings
    assert responses.identity_use_case.settings is settings
    assert responses.listing_use_case.handler is decode_item_page

    with pytest.raises(ApiError):
        responses.identity({}, 302)
