"""Unit tests for the problem service."""

from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_pair
from domain.exceptions import (
    FetchError,
    InvalidPayloadError,
    MissingFieldError,
    SecondaryDecodeError,
    TransportError,
    TypeMismatchError,
)
from domain.models import Problem
from infrastructure.config import Config, Credentials
from services import ProblemService, create_problem_service


def json_response(payload, status_code=200):
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.url = "https://leetcode.com/api"
    response.json.return_value = payload
    return response


def listing(category, *pairs):
    return {"category_slug": category, "stat_status_pairs": list(pairs)}


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def service(client):
    return ProblemService(client)


def test_fetch_problems_accumulates_categories(service, client):
    client.get_category_problems.side_effect = lambda category: json_response(
        listing(category, make_pair(), make_pair(question_id=2))
    )

    problems = service.fetch_problems(["algorithms", "database"])

    assert [p.category for p in problems] == ["algorithms", "algorithms", "database", "database"]


def test_fetch_problems_extends_given_list(service, client, listing_payload):
    client.get_category_problems.return_value = json_response(listing_payload)
    existing: list[Problem] = []

    result = service.fetch_problems(["algorithms"], existing)

    assert result is existing
    assert len(existing) == 3


def test_parse_failure_is_reported_with_endpoint(service, client, listing_payload):
    del listing_payload["stat_status_pairs"][0]["stat"]["question_id"]
    client.get_category_problems.return_value = json_response(listing_payload)

    with pytest.raises(FetchError) as exc_info:
        service.fetch_problems(["algorithms"])

    assert "could not fetch/parse problems of category algorithms" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, MissingFieldError)


def test_http_error_status_is_transport_error(service, client):
    client.get_category_problems.return_value = json_response({}, status_code=403)

    with pytest.raises(FetchError) as exc_info:
        service.fetch_problems(["algorithms"])

    cause = exc_info.value.__cause__
    assert isinstance(cause, TransportError)
    assert cause.status_code == 403


def test_non_json_body_is_invalid_payload(service, client):
    response = json_response(None)
    response.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
    client.get_question_detail.return_value = response

    with pytest.raises(FetchError) as exc_info:
        service.fetch_question("two-sum")

    assert isinstance(exc_info.value.__cause__, InvalidPayloadError)


def test_transport_failure_is_not_reinterpreted(service, client):
    client.get_question_detail.side_effect = TransportError("connection reset")

    with pytest.raises(FetchError) as exc_info:
        service.fetch_question("two-sum")

    assert exc_info.value.endpoint == "question detail for two-sum"
    assert str(exc_info.value.__cause__) == "connection reset"


def test_fetch_question(service, client, question_payload):
    client.get_question_detail.return_value = json_response(question_payload)

    question = service.fetch_question("two-sum")

    client.get_question_detail.assert_called_once_with("two-sum")
    assert question.defs[0].value == "python3"


def test_fetch_question_secondary_decode_failure(service, client, question_payload):
    question_payload["data"]["question"]["metaData"] = "not json"
    client.get_question_detail.return_value = json_response(question_payload)

    with pytest.raises(FetchError) as exc_info:
        service.fetch_question("two-sum")

    assert isinstance(exc_info.value.__cause__, SecondaryDecodeError)


def test_fill_description(service, client, listing_payload, question_payload):
    client.get_category_problems.return_value = json_response(listing_payload)
    client.get_question_detail.return_value = json_response(question_payload)
    problem = service.fetch_problems(["algorithms"])[0]

    question = service.fill_description(problem)

    client.get_question_detail.assert_called_once_with("problem-1")
    assert problem.desc == question.content


def test_concurrent_fetch_reports_failures_per_category(service, client):
    def respond(category):
        if category == "shell":
            raise TransportError("timed out")
        return json_response(listing(category, make_pair()))

    client.get_category_problems.side_effect = respond

    problems, errors = service.fetch_problems_concurrently(
        ["algorithms", "shell", "database"], max_workers=2
    )

    assert [p.category for p in problems] == ["algorithms", "database"]
    assert list(errors) == ["shell"]
    assert isinstance(errors["shell"], FetchError)


def test_create_problem_service_uses_given_config():
    config = Config(read_timeout=10.0)

    service = create_problem_service(config, Credentials(session="s", csrf="c"))

    assert service.client.config is config
    assert service.client.http_client.timeout == (30.0, 10.0)
    service.client.close()


def test_concurrent_fetch_keeps_repeated_categories(service, client):
    client.get_category_problems.side_effect = lambda category: json_response(
        listing(category, make_pair())
    )

    problems, errors = service.fetch_problems_concurrently(["algorithms", "algorithms"])

    assert client.get_category_problems.call_count == 2
    assert [p.category for p in problems] == ["algorithms", "algorithms"]
    assert errors == {}
    assert problems == service.fetch_problems(["algorithms", "algorithms"])


def test_huge_number_in_listing_is_wrapped(service, client):
    client.get_category_problems.return_value = json_response(
        listing("algorithms", make_pair(question_id=10**400))
    )

    with pytest.raises(FetchError) as exc_info:
        service.fetch_problems(["algorithms"])

    assert isinstance(exc_info.value.__cause__, TypeMismatchError)
