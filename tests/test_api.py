from features.extract_text.domain.errors import DocumentFetchError
from tests.conftest import build_pdf


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_landing_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "PDF2Text Extractor API" in response.text
    assert "/api/pdf-text-all" in response.text


def test_single_page(client, stub_fetcher):
    response = client.get("/api/pdf-text", params={"pdfUrl": "https://x/doc.pdf", "min": 2, "max": 2})

    assert response.status_code == 200
    assert response.json() == {"text": "Page 2 first line Page 2 second line"}
    assert stub_fetcher.calls == ["https://x/doc.pdf"]


def test_same_request_is_repeatable(client):
    params = {"pdfUrl": "https://x/doc.pdf", "min": 3, "max": 3}

    first = client.get("/api/pdf-text", params=params).json()
    second = client.get("/api/pdf-text", params=params).json()

    assert first == second


def test_range_covering_document_matches_all_text(client):
    ranged = client.get("/api/pdf-text", params={"pdfUrl": "https://x/doc.pdf", "min": 1, "max": 5})
    whole = client.get("/api/pdf-text-all", params={"pdfUrl": "https://x/doc.pdf"})

    assert ranged.status_code == 200
    assert whole.status_code == 200
    assert ranged.json() == whole.json()
    assert whole.json()["text"].startswith("Page 1 first line")
    assert whole.json()["text"].endswith("Page 5 second line")


def test_defaults_cover_short_document(client):
    ranged = client.get("/api/pdf-text", params={"pdfUrl": "https://x/doc.pdf"})
    whole = client.get("/api/pdf-text-all", params={"pdfUrl": "https://x/doc.pdf"})

    assert ranged.json() == whole.json()


def test_missing_pdf_url_is_bad_request(client, stub_fetcher):
    for path, params in [
        ("/api/pdf-text", {}),
        ("/api/pdf-text", {"min": 1, "max": 2}),
        ("/api/pdf-text", {"pdfUrl": ""}),
        ("/api/pdf-text-all", {}),
    ]:
        response = client.get(path, params=params)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing pdfUrl parameter"}

    assert stub_fetcher.calls == []


def test_min_above_max(client):
    response = client.get("/api/pdf-text", params={"pdfUrl": "https://x/doc.pdf", "min": 4, "max": 2})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process PDF", "message": "Invalid min page value"}


def test_invalid_max(client):
    for value in ["0", "-3", "abc"]:
        response = client.get("/api/pdf-text", params={"pdfUrl": "https://x/doc.pdf", "max": value})
        assert response.status_code == 500
        assert response.json()["message"] == "Invalid max page value"


def test_fetch_failure(client, stub_fetcher):
    stub_fetcher.error = DocumentFetchError("Request failed with status code 404")

    for path in ["/api/pdf-text", "/api/pdf-text-all"]:
        response = client.get(path, params={"pdfUrl": "https://x/missing.pdf"})
        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to process PDF",
            "message": "Request failed with status code 404",
        }


def test_parse_failure(client, stub_fetcher):
    stub_fetcher.data = b"<html>not a pdf</html>"

    response = client.get("/api/pdf-text-all", params={"pdfUrl": "https://x/doc.pdf"})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to process PDF"
    assert body["message"]


def test_cors_allows_any_origin(client):
    response = client.get("/api/health", headers={"Origin": "https://elsewhere.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_page_boundaries_keep_words_apart(client, stub_fetcher):
    stub_fetcher.data = build_pdf([["The quick brown"], ["fox jumps"]])

    whole = client.get("/api/pdf-text-all", params={"pdfUrl": "https://x/doc.pdf"}).json()["text"]
    ranged = client.get("/api/pdf-text", params={"pdfUrl": "https://x/doc.pdf", "min": 1, "max": 2}).json()["text"]

    assert whole == "The quick brown\n\nfox jumps"
    assert ranged == whole
    assert "brownfox" not in whole


def test_password_protected_pdf(client, stub_fetcher):
    stub_fetcher.data = build_pdf([["Secret"]], user_pw="hunter2")

    response = client.get("/api/pdf-text-all", params={"pdfUrl": "https://x/doc.pdf"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to process PDF",
        "message": "Document is password protected",
    }
