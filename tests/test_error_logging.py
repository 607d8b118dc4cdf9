import asyncio

from app.database.mongo import build_error_record, log_error, is_mongo_configured


def raise_and_catch():
    try:
        raise ValueError("bad input")
    except ValueError as e:
        return e


def test_build_error_record():
    record = build_error_record(raise_and_catch(), "symptoms/utils.py - analyze_symptoms", {"symptoms_length": 12})

    assert record["error_type"] == "ValueError"
    assert record["error_message"] == "bad input"
    assert record["location"] == "symptoms/utils.py - analyze_symptoms"
    assert record["additional_info"] == {"symptoms_length": 12}
    assert "raise ValueError" in record["traceback"]
    assert record["timestamp"].tzinfo is not None


def test_log_error_prints_without_mongo(capsys):
    assert not is_mongo_configured()

    asyncio.run(log_error(RuntimeError("model down"), "core/llm.py - generate_text", {"model": "gpt-4.1-mini"}))

    out = capsys.readouterr().out
    assert "[core/llm.py - generate_text] RuntimeError: model down" in out
    assert "gpt-4.1-mini" in out
