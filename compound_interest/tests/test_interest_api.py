from __future__ import annotations

from flask.testing import FlaskClient


def lump_sum_payload() -> dict:
    return {
        "initialCapital": "1000",
        "periodicContribution": "0",
        "contributionFrequency": "monthly",
        "investmentDuration": "12",
        "durationUnit": "years",
        "interestRate": "12",
        "contributionTiming": "start",
    }


def test_calculation_returns_result_and_formatted_strings(client: FlaskClient):
    resp = client.post("/api/calc/compound-interest", json=lump_sum_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert round(body["futureValue"], 2) == 4190.62
    assert body["formatted"]["futureValue"] == "$4190.62"
    assert body["formatted"]["monthlyIncome"] == "$41.91"
    assert body["clipboardText"] == "$4190.62"


def test_calculation_accepts_json_numbers_and_leading_zeros(client: FlaskClient):
    payload = {
        "periodicContribution": 100,
        "investmentDuration": "01",
        "interestRate": "006",
        "contributionTiming": "end",
    }

    resp = client.post("/api/calc/compound-interest", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["formatted"]["futureValue"] == "$1233.56"


def test_invalid_form_is_refused_with_field_errors(client: FlaskClient):
    payload = lump_sum_payload()
    payload.update(initialCapital="", periodicContribution="", interestRate="0")

    resp = client.post("/api/calc/compound-interest", json=payload)

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "Please check the marked fields before calculating."
    assert set(body["fields"]) == {"initialCapital", "periodicContribution", "interestRate"}
    assert "futureValue" not in body


def test_unknown_enum_value_returns_422(client: FlaskClient):
    payload = lump_sum_payload()
    payload["durationUnit"] = "weeks"

    resp = client.post("/api/calc/compound-interest", json=payload)

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_validate_form(client: FlaskClient):
    ok = client.post("/api/validate", json=lump_sum_payload()).get_json()
    bad = client.post("/api/validate", json={"investmentDuration": "-1"}).get_json()

    assert ok == {"valid": True, "errors": {}}
    assert bad["valid"] is False
    assert set(bad["errors"]) == {
        "initialCapital",
        "periodicContribution",
        "investmentDuration",
        "interestRate",
    }


def test_validate_single_field(client: FlaskClient):
    resp = client.post("/api/validate/field", json={"field": "interestRate", "value": "0"})
    empty = client.post("/api/validate/field", json={"field": "initialCapital", "value": ""})
    normalized = client.post("/api/validate/field", json={"field": "initialCapital", "value": "0042"})

    assert resp.status_code == 200
    assert resp.get_json()["error"] == "Interest rate must be greater than 0%."
    assert empty.get_json()["error"] is None
    assert normalized.get_json() == {"field": "initialCapital", "value": "42", "error": None}


def test_validate_unknown_field_returns_422(client: FlaskClient):
    resp = client.post("/api/validate/field", json={"field": "taxRate", "value": "1"})

    assert resp.status_code == 422


def test_state_defaults_when_nothing_saved(client: FlaskClient):
    resp = client.get("/api/state")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["initialCapital"] == ""
    assert body["durationUnit"] == "years"
    assert body["contributionTiming"] == "start"
    assert body["compoundingFrequency"] == "monthly"
    assert body["result"] == 0


def test_state_round_trip_through_api(client: FlaskClient):
    state = lump_sum_payload()
    state.update(result=4190.62, monthlyIncome=41.91, yearlyIncome=502.87, dailyIncome=1.38)

    put = client.put("/api/state", json=state)
    got = client.get("/api/state")

    assert put.status_code == 200
    assert got.get_json()["result"] == 4190.62
    assert got.get_json()["interestRate"] == "12"


def test_overflowing_term_is_refused_not_a_server_error(client: FlaskClient):
    payload = {
        "initialCapital": "1000",
        "investmentDuration": "1000",
        "durationUnit": "years",
        "interestRate": "100",
    }

    resp = client.post("/api/calc/compound-interest", json=payload)

    assert resp.status_code == 400
    assert set(resp.get_json()["fields"]) == {"initialCapital", "investmentDuration", "interestRate"}


def test_infinite_balance_never_reaches_the_response(client: FlaskClient):
    payload = {"initialCapital": "1e308", "investmentDuration": "10", "interestRate": "12"}

    resp = client.post("/api/calc/compound-interest", json=payload)

    assert resp.status_code == 400
    body = resp.get_json()
    assert "futureValue" not in body
    assert "initialCapital" in body["fields"]
    assert b"Infinity" not in resp.data


def test_negative_fraction_capital_is_refused(client: FlaskClient):
    payload = lump_sum_payload()
    payload["initialCapital"] = "-0.5"

    validated = client.post("/api/validate", json=payload).get_json()
    calc = client.post("/api/calc/compound-interest", json=payload)

    assert validated["valid"] is False
    assert "initialCapital" in validated["errors"]
    assert calc.status_code == 400
