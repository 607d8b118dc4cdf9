import pytest

from app.summarizer.utils import parse_topic_summary, default_source_links

REPLY = """SUMMARY: Type 2 diabetes is a long-term condition where the body does not use insulin well.
Healthy eating and activity help control blood sugar.

SOURCES:
- https://medlineplus.gov/diabetestype2.html
- https://www.who.int/news-room/fact-sheets/detail/diabetes.
"""


def test_parse_topic_summary():
    summary = parse_topic_summary(REPLY)

    assert summary.summary.startswith("Type 2 diabetes is a long-term condition")
    assert summary.summary.endswith("help control blood sugar.")
    assert summary.source_links == [
        "https://medlineplus.gov/diabetestype2.html",
        "https://www.who.int/news-room/fact-sheets/detail/diabetes"
    ]


def test_parse_topic_summary_without_labels():
    summary = parse_topic_summary("Asthma narrows the airways and causes wheezing.")

    assert summary.summary == "Asthma narrows the airways and causes wheezing."
    assert summary.source_links == ["https://medlineplus.gov", "https://www.who.int"]


def test_parse_topic_summary_unlabelled_summary_excludes_sources():
    summary = parse_topic_summary("Gout is a form of arthritis.\nSources:\n- https://www.nhs.uk/conditions/gout/")

    assert summary.summary == "Gout is a form of arthritis."
    assert summary.source_links == ["https://www.nhs.uk/conditions/gout/"]


def test_default_source_links():
    assert default_source_links() == ["https://medlineplus.gov", "https://www.who.int"]


def test_summarize_route(client, fake_llm):
    fake_llm(REPLY)

    response = client.post("/v1/summaries/topic", json={"topic": "type 2 diabetes"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["topic"] == "type 2 diabetes"
    assert len(body["data"]["source_links"]) == 2


def test_summarize_route_short_topic(client):
    response = client.post("/v1/summaries/topic", json={"topic": "ab"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a topic with at least 3 characters."


def test_summarize_route_model_failure(client, fake_llm):
    fake_llm(RuntimeError("rate limited"))

    response = client.post("/v1/summaries/topic", json={"topic": "hypertension"})

    assert response.status_code == 500


def test_parse_topic_summary_sources_only():
    with pytest.raises(Exception, match="Failed to summarize"):
        parse_topic_summary("SOURCES:\n- https://www.who.int")


def test_summarize_route_sources_only_reply(client, fake_llm):
    fake_llm("SOURCES:\n- https://www.who.int")

    response = client.post("/v1/summaries/topic", json={"topic": "hypertension"})

    assert response.status_code == 500
