import pytest

from seokeywords.analyze import Analyzer
from seokeywords.config import AnalyzerConfig
from seokeywords.errors import FetchError
from seokeywords.web import GENERIC_FAILURE, create_app

SAMPLE = "<body><script>x</script><p>SEO seo seo analysis analysis tool</p></body>"


def make_client(fetcher):
    analyzer = Analyzer(AnalyzerConfig(cache_size=0), fetcher=fetcher)
    app = create_app(analyzer=analyzer)
    app.testing = True
    return app.test_client()


@pytest.fixture
def client():
    return make_client(lambda url: SAMPLE)


def test_get_analyze_returns_result(client):
    resp = client.get("/analyze", query_string={"url": "https://example.com/a?b=c"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["tfidf_terms"][0] == {"term": "seo", "score": 3}
    assert data["bigrams"][0] == "seo seo"
    assert data["text"].endswith("...")
    assert data["competitor_keywords"]
    assert data["ai_suggestions"]
    assert "SEO" in data["google_trends"]


def test_post_analyze_with_json_body(client):
    resp = client.post("/analyze", json={"url": "https://example.com/"})
    assert resp.status_code == 200
    assert resp.get_json()["trigrams"][0] == "seo seo seo"


def test_missing_url_is_400(client):
    resp = client.get("/analyze")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_invalid_url_is_400(client):
    resp = client.get("/analyze", query_string={"url": "not a url"})
    assert resp.status_code == 400
    assert resp.get_json()["error"]


@pytest.mark.parametrize("body", ["{not json", "[1, 2]", '"https://example.com"'])
def test_post_with_unusable_body_is_400(client, body):
    resp = client.post("/analyze", data=body, content_type="application/json")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_fetch_failure_is_500_without_result_fields():
    def fail(url):
        raise FetchError("connection refused", url=url)

    resp = make_client(fail).get("/analyze", query_string={"url": "https://unreachable.invalid/"})
    assert resp.status_code == 500
    data = resp.get_json()
    assert data == {"error": GENERIC_FAILURE}
    assert "text" not in data and "tfidf_terms" not in data


def test_unexpected_error_is_500():
    def broken(url):
        raise RuntimeError("unexpected")

    resp = make_client(broken).get("/analyze", query_string={"url": "https://example.com/"})
    assert resp.status_code == 500
    assert resp.get_json()["error"] == GENERIC_FAILURE


def test_index_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    assert b"/analyze" in resp.data


def test_healthz(client):
    assert client.get("/healthz").get_json() == {"status": "ok"}


def test_create_app_from_config():
    app = create_app(config=AnalyzerConfig(cache_size=3))
    analyzer = app.extensions["seokeywords.analyzer"]
    assert analyzer.cache.capacity == 3
