"""API tests with TestClient. Directory built without the delete delay."""

import asyncio
import time

import html5lib
import pytest
from fastapi.testclient import TestClient

from api.main import EMAIL_EXISTS_MSG, build_directory, create_app
from contactbook.application import ContactDeleted


@pytest.fixture
def client():
    app = create_app(build_directory(delete_delay_seconds=0))
    with TestClient(app) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_index_lists_seeded_contacts(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert "jd@gmail.com" in r.text
    assert "cd@gmail.com" in r.text
    assert r.text.index("John") < r.text.index("Clara")
    assert 'id="contact-form"' in r.text


def test_create_contact_returns_cleared_form_and_oob_row(client):
    r = client.post("/contacts", data={"name": "Ann", "email": "ann@x.com"})
    assert r.status_code == 200
    assert 'id="contact-form"' in r.text
    assert 'hx-swap-oob="beforeend:#contacts-body"' in r.text
    assert 'id="contact-3"' in r.text
    assert "ann@x.com" in r.text
    assert EMAIL_EXISTS_MSG not in r.text

    assert "ann@x.com" in client.get("/").text


def test_create_duplicate_email_rerenders_form_with_error(client):
    r = client.post("/contacts", data={"name": "Ann", "email": "jd@gmail.com"})
    assert r.status_code == 422
    assert EMAIL_EXISTS_MSG in r.text
    assert 'value="Ann"' in r.text
    assert 'value="jd@gmail.com"' in r.text
    assert "hx-swap-oob" not in r.text


def test_create_with_empty_fields_is_accepted(client):
    r = client.post("/contacts", data={"name": "", "email": ""})
    assert r.status_code == 200
    assert 'id="contact-3"' in r.text


def test_submitted_values_are_escaped(client):
    r = client.post("/contacts", data={"name": "<b>x</b>", "email": "x@x.com"})
    assert r.status_code == 200
    assert "<b>x</b>" not in r.text
    assert "&lt;b&gt;x&lt;/b&gt;" in r.text


def test_delete_contact(client):
    r = client.delete("/contacts/2")
    assert r.status_code == 200
    assert r.content == b""

    page = client.get("/").text
    assert "cd@gmail.com" not in page
    assert "jd@gmail.com" in page


def test_delete_twice_returns_not_found(client):
    assert client.delete("/contacts/1").status_code == 200
    assert client.delete("/contacts/1").status_code == 404


def test_delete_non_integer_id_is_rejected(client):
    assert client.delete("/contacts/abc").status_code == 422


def test_end_to_end_flow(client):
    assert client.post("/contacts", data={"name": "Ann", "email": "jd@gmail.com"}).status_code == 422
    assert client.post("/contacts", data={"name": "Ann", "email": "ann@x.com"}).status_code == 200
    assert client.delete("/contacts/2").status_code == 200
    assert client.delete("/contacts/2").status_code == 404

    page = client.get("/").text
    assert page.index("John") < page.index("Ann")
    assert "Clara" not in page


def test_static_css_served(client):
    r = client.get("/css/index.css")
    assert r.status_code == 200


def test_unseeded_app_starts_empty():
    app = create_app(build_directory(delete_delay_seconds=0), seed=False)
    with TestClient(app) as c:
        assert "jd@gmail.com" not in c.get("/").text


def test_created_row_survives_html5_parsing_as_out_of_band_swap(client):
    r = client.post("/contacts", data={"name": "Ann", "email": "ann@x.com"})
    fragment = html5lib.parseFragment(
        r.text, container="body", namespaceHTMLElements=False
    )

    oob = [el for el in fragment.iter() if el.get("hx-swap-oob")]
    assert len(oob) == 1
    assert oob[0].tag == "tbody"
    assert oob[0].get("hx-swap-oob") == "beforeend:#contacts-body"
    rows = list(oob[0].iter("tr"))
    assert [row.get("id") for row in rows] == ["contact-3"]


def test_index_enables_template_fragments_and_422_swaps(client):
    page = client.get("/").text
    assert "htmx.config.useTemplateFragments = true" in page
    assert '"htmx:beforeSwap"' in page
    assert "evt.detail.xhr.status === 422" in page
    assert "evt.detail.shouldSwap = true" in page


def test_build_directory_delays_deletes():
    directory = build_directory(delete_delay_seconds=0.05)

    async def scenario():
        await directory.seed([("John", "jd@gmail.com")])
        started = time.perf_counter()
        result = await directory.delete(1)
        return result, time.perf_counter() - started

    result, elapsed = asyncio.run(scenario())

    assert result == ContactDeleted(contact_id=1)
    assert elapsed >= 0.04


def test_build_directory_without_delay_deletes_immediately():
    directory = build_directory(delete_delay_seconds=0)

    async def scenario():
        await directory.seed([("John", "jd@gmail.com")])
        started = time.perf_counter()
        result = await directory.delete(1)
        return result, time.perf_counter() - started

    result, elapsed = asyncio.run(scenario())

    assert result == ContactDeleted(contact_id=1)
    assert elapsed < 0.04
