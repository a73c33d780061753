from pytest import approx

from simple_beam.services import api


def _body(**kw):
    body = {
        "beamLength": 10,
        "loads": [{"type": "distributed", "position": 0, "length": 10, "value": 100}],
        "supports": [{"position": 0, "type": "simple"}, {"position": 10, "type": "simple"}],
    }
    body.update(kw)
    return body


def test_analyze_success_returns_engine_result():
    status, payload = api.handle_analyze_request(_body())
    assert status == 200
    assert payload["input"]["beamLength"] == 10.0
    assert [r["value"] for r in payload["results"]["reactions"]] == [approx(500.0), approx(500.0)]


def test_incomplete_requests_are_400():
    for body in (None, [], {"loads": [], "supports": []}, _body(beamLength=0), _body(loads=[])):
        status, payload = api.handle_analyze_request(body)
        assert status == 400
        assert "incompletos" in payload["error"]

    status, payload = api.handle_analyze_request({"beamLength": 5})
    assert status == 400
    assert payload["missing"] == ["loads", "supports"]


def test_engine_rejections_are_400_with_details():
    status, payload = api.handle_analyze_request(_body(supports=[{"position": 0}, {"position": 11}]))
    assert status == 400
    assert "Apoyo #2" in payload["details"]

    status, payload = api.handle_analyze_request(_body(supports=[{"position": 0, "type": "fixed"}, {"position": 10}]))
    assert status == 400
    assert "dos apoyos simples" in payload["details"]


def test_unexpected_failures_are_500(monkeypatch, caplog):
    def boom(job):
        raise RuntimeError("falla interna")

    monkeypatch.setattr(api, "analyze_beam", boom)
    status, payload = api.handle_analyze_request(_body())
    assert status == 500
    assert payload["details"] == "falla interna"
    assert any(r.levelname == "ERROR" for r in caplog.records)


def test_catalog_endpoints():
    status, mats = api.handle_materials_request()
    assert status == 200
    assert mats[0]["id"] == "steel"

    status, secs = api.handle_sections_request()
    assert status == 200
    assert {s["type"] for s in secs} == {"rectangle", "circle", "i_beam"}


def test_section_properties_endpoint():
    status, payload = api.handle_section_properties_request({"type": "rectangle", "width": 0.1, "height": 0.2})
    assert status == 200
    assert payload["area"] == approx(0.02)
    assert payload["momentOfInertia"] == approx(6.6667e-5, rel=1e-4)

    status, payload = api.handle_section_properties_request({"type": "triangle"})
    assert status == 400
    assert "triangle" in payload["details"]


def test_malformed_client_values_are_400():
    status, payload = api.handle_analyze_request(_body(loads=5))
    assert status == 400
    assert "lista" in payload["details"]

    status, payload = api.handle_analyze_request(_body(supports={"position": 0}))
    assert status == 400

    status, payload = api.handle_analyze_request(
        _body(loads=[{"type": "point", "position": 5, "value": "nan"}])
    )
    assert status == 400
    assert "finito" in payload["details"]

    status, payload = api.handle_analyze_request(_body(elasticModulus=float("inf")))
    assert status == 400
    assert "finito" in payload["details"]
