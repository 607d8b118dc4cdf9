import pytest

from app.core.config import settings

from app.skin.utils import (
    validate_photo_data_uri, image_bytes_to_data_uri, parse_skin_lesion_analysis,
    DEFAULT_CONDITION, DEFAULT_NEXT_STEPS
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
PNG_DATA_URI = "data:image/png;base64,iVBORw0KGgo="

REPLY = """POTENTIAL CONDITION: Seborrheic keratosis
DESCRIPTION: This is not a medical diagnosis. A common benign growth. Low urgency, but monitor for changes.
NEXT STEPS: Consult a dermatologist if it changes in size, shape or color.
"""


def test_validate_photo_data_uri():
    assert validate_photo_data_uri(PNG_DATA_URI) == PNG_DATA_URI
    assert validate_photo_data_uri("data:IMAGE/PNG;base64,iVBORw0K\nGgo=") == PNG_DATA_URI


@pytest.mark.parametrize("uri, message", [
    ("not a data uri", "data URI"),
    ("data:text/plain;base64,aGVsbG8=", "data URI"),
    ("data:image/png;base64,***", "not valid base64"),
])
def test_validate_photo_data_uri_rejects(uri, message):
    with pytest.raises(ValueError, match=message):
        validate_photo_data_uri(uri)


def test_validate_photo_data_uri_size_limit():
    with pytest.raises(ValueError, match="maximum size of 4 bytes"):
        validate_photo_data_uri(PNG_DATA_URI, max_bytes=4)


def test_image_bytes_to_data_uri():
    assert image_bytes_to_data_uri(PNG_SIGNATURE, "image/png") == PNG_DATA_URI
    with pytest.raises(ValueError, match="Please upload an image file."):
        image_bytes_to_data_uri(b"hello", "text/plain")


def test_parse_skin_lesion_analysis():
    analysis = parse_skin_lesion_analysis(REPLY)

    assert analysis.potential_condition == "Seborrheic keratosis"
    assert "Low urgency" in analysis.description
    assert analysis.next_steps.startswith("Consult a dermatologist")


def test_parse_skin_lesion_analysis_defaults():
    analysis = parse_skin_lesion_analysis("The image is too blurry.")

    assert analysis.potential_condition == DEFAULT_CONDITION
    assert analysis.next_steps == DEFAULT_NEXT_STEPS


def test_analyze_route_sends_image_to_vision_model(client, fake_llm):
    from app.core.config import settings

    calls = fake_llm(REPLY)

    response = client.post("/v1/skin/analyze", json={"photo_data_uri": PNG_DATA_URI})

    assert response.status_code == 200
    assert response.json()["data"]["potential_condition"] == "Seborrheic keratosis"

    request = calls.calls[0]
    assert request["model"] == settings.OPENAI_VISION_MODEL
    content = request["input"][0]["content"]
    assert content[0]["type"] == "input_text"
    assert content[1] == {"type": "input_image", "image_url": PNG_DATA_URI}


def test_analyze_route_invalid_image(client):
    response = client.post("/v1/skin/analyze", json={"photo_data_uri": "data:image/png;base64,"})

    assert response.status_code == 400


def test_upload_route(client, fake_llm):
    fake_llm(REPLY)

    response = client.post(
        "/v1/skin/analyze/upload",
        files={"file": ("lesion.png", PNG_SIGNATURE, "image/png")}
    )

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_upload_route_rejects_non_image(client):
    response = client.post(
        "/v1/skin/analyze/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Please upload an image file."


def test_analyze_route_model_failure(client, fake_llm):
    fake_llm(RuntimeError("vision model unavailable"))

    response = client.post("/v1/skin/analyze", json={"photo_data_uri": PNG_DATA_URI})

    assert response.status_code == 500


def test_image_bytes_to_data_uri_size_checks():
    with pytest.raises(ValueError, match="Image data is empty."):
        image_bytes_to_data_uri(b"", "image/png")
    with pytest.raises(ValueError, match="maximum size of 4 bytes"):
        image_bytes_to_data_uri(PNG_SIGNATURE, "image/png", max_bytes=4)


def test_upload_route_rejects_empty_file(client):
    response = client.post(
        "/v1/skin/analyze/upload",
        files={"file": ("empty.png", b"", "image/png")}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Image data is empty."


def test_upload_route_rejects_oversized_file(client, fake_llm, monkeypatch):
    calls = fake_llm(REPLY)
    monkeypatch.setattr(settings, "MAX_IMAGE_BYTES", 4)

    response = client.post(
        "/v1/skin/analyze/upload",
        files={"file": ("lesion.png", PNG_SIGNATURE * 64, "image/png")}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Image exceeds the maximum size of 4 bytes."
    assert calls.calls == []
