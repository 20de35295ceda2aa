from __future__ import annotations

import argparse
import logging
from textwrap import dedent
from typing import Any, Optional

from flask import Flask, Response, jsonify, request

from .analyze import Analyzer
from .config import AnalyzerConfig
from .errors import FetchError, ValidationError

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to analyze URL."

INDEX_HTML = dedent(
    """
    <!doctype html>
    <html lang="en">
    <head>
      <meta charset="utf-8" />
      <meta name="viewport" content="width=device-width, initial-scale=1" />
      <title>SEO Keyword Analyzer</title>
      <style>
        :root { --bg:#0c0d0f; --fg:#e8e8ea; --muted:#a7a7ad; --card:#15171a; --acc:#4f7cff; --bad:#ef4444; }
        * { box-sizing: border-box; }
        body { margin:0; font: 14px/1.45 system-ui, -apple-system, Segoe UI, Roboto, sans-serif; background: var(--bg); color: var(--fg); }
        header { padding: 16px 24px; border-bottom: 1px solid #1b1d21; }
        header h1 { margin: 0; font-size: 16px; letter-spacing: 0.3px; }
        main { max-width: 960px; margin: 0 auto; padding: 28px 24px 40px; display:grid; gap:16px; grid-template-columns: repeat(auto-fit, minmax(260px, 1fr)); }
        .card { background: var(--card); border:1px solid #202328; border-radius: 12px; padding:18px; }
        .wide { grid-column: 1 / -1; }
        .muted { color: var(--muted); }
        .row { display:flex; gap:12px; }
        input[type=url] { flex:1; padding: 10px 12px; border-radius: 8px; border:1px solid #23262b; background: #11131a; color: var(--fg); font: inherit; }
        button { padding: 10px 14px; border-radius: 8px; border:1px solid transparent; background: var(--acc); color: #fff; cursor: pointer; font-weight:600; }
        h2 { margin:0 0 8px; font-size:12px; letter-spacing:0.6px; text-transform:uppercase; color:var(--muted); }
        ul { margin:0; padding-left: 18px; }
        .error { color: var(--bad); }
      </style>
    </head>
    <body>
      <header><h1>SEO Keyword Analyzer</h1></header>
      <main>
        <form class="card wide row" id="form">
          <input type="url" id="url" placeholder="https://example.com/article" required />
          <button type="submit" id="go">Analyze</button>
        </form>
        <div class="card wide"><h2>Text preview</h2><div id="status" class="muted">Enter a URL to analyze.</div><p id="text"></p></div>
        <div class="card"><h2>Top keywords</h2><ul id="terms"></ul></div>
        <div class="card"><h2>Bigrams</h2><ul id="bigrams"></ul></div>
        <div class="card"><h2>Trigrams</h2><ul id="trigrams"></ul></div>
        <div class="card"><h2>Competitor keywords (sample)</h2><ul id="competitors"></ul></div>
        <div class="card"><h2>Trends (sample)</h2><ul id="trends"></ul></div>
        <div class="card"><h2>Suggestions (sample)</h2><ul id="suggestions"></ul></div>
      </main>
      <script>
      const $ = (id) => document.getElementById(id);
      const cache = {};
      function fill(id, items, fmt) {
        const ul = $(id);
        ul.innerHTML = '';
        (items || []).forEach((item) => {
          const li = document.createElement('li');
          li.textContent = fmt ? fmt(item) : item;
          ul.appendChild(li);
        });
      }
      function render(data) {
        $('text').textContent = data.text || '';
        fill('terms', data.tfidf_terms, (t) => `${t.term} (${t.score})`);
        fill('bigrams', data.bigrams);
        fill('trigrams', data.trigrams);
        fill('competitors', data.competitor_keywords);
        const trends = [];
        Object.entries(data.google_trends || {}).forEach(([cat, pts]) => {
          pts.forEach((p) => trends.push(`${cat}: ${p.date} = ${p.value}`));
        });
        fill('trends', trends);
        fill('suggestions', data.ai_suggestions);
      }
      async function analyze(ev) {
        ev.preventDefault();
        const url = $('url').value.trim();
        const status = $('status');
        status.className = 'muted';
        if (cache[url]) { status.textContent = 'Cached result.'; render(cache[url]); return; }
        status.textContent = 'Analyzing…';
        try {
          const res = await fetch('/analyze', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ url }),
          });
          const data = await res.json();
          if (!res.ok) throw new Error(data.error || `HTTP ${res.status}`);
          cache[url] = data;
          status.textContent = '';
          render(data);
        } catch (err) {
          status.className = 'error';
          status.textContent = err.message;
        }
      }
      $('form').addEventListener('submit', analyze);
      </script>
    </body>
    </html>
    """
).strip()


def _requested_url() -> Any:
    if request.method == "POST":
        payload = request.get_json(silent=True)
        if isinstance(payload, dict):
            return payload.get("url")
        return request.form.get("url") or request.args.get("url")
    return request.args.get("url")


def create_app(config: Optional[AnalyzerConfig] = None, analyzer: Optional[Analyzer] = None) -> Flask:
    app = Flask(__name__)
    if analyzer is None:
        analyzer = Analyzer(config or AnalyzerConfig.from_env())
    app.extensions["seokeywords.analyzer"] = analyzer

    @app.get("/")
    def index() -> Response:
        return Response(INDEX_HTML, mimetype="text/html")

    @app.get("/healthz")
    def healthz():
        return jsonify({"status": "ok"})

    @app.route("/analyze", methods=["GET", "POST"])
    def analyze():
        try:
            result = analyzer.analyze(_requested_url())
            return jsonify(result.to_dict())
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except FetchError:
            return jsonify({"error": GENERIC_FAILURE}), 500
        except Exception:
            logger.exception("Error analyzing URL")
            return jsonify({"error": GENERIC_FAILURE}), 500

    return app


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the SEO keyword analyzer web UI")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
