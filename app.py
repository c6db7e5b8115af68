from __future__ import annotations

from typing import List, Optional

from flask import Flask, jsonify, request

from lexicon_sentiment import AnalyzerConfig, SentimentAnalyzer


def _texts_from(payload: object) -> Optional[List[str]]:
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")
    if "texts" in payload:
        texts = payload["texts"]
        if not isinstance(texts, list) or not all(isinstance(t, str) for t in texts):
            raise ValueError("`texts` must be a list of strings")
        return texts
    if "text" in payload:
        if not isinstance(payload["text"], str):
            raise ValueError("`text` must be a string")
        return [payload["text"]]
    return None


def create_app(analyzer: Optional[SentimentAnalyzer] = None) -> Flask:
    app = Flask(__name__)
    analyzer = analyzer or SentimentAnalyzer(AnalyzerConfig.from_env())

    @app.get("/health")
    def healthcheck():
        return {"status": "ok", "lexicon_size": len(analyzer.lexicon)}

    @app.post("/score")
    def score():
        payload = request.get_json(silent=True) or {}
        try:
            texts = _texts_from(payload)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        if texts is None:
            return jsonify({"error": "`text` or `texts` is required"}), 400
        try:
            return jsonify([analyzer.to_dict(result) for result in analyzer.score_many(texts)])
        except Exception as exc:  # pragma: no cover - runtime guard
            app.logger.exception("Uncaught exception when handling /score")
            return jsonify({"error": "Unexpected server error", "detail": str(exc)}), 500

    @app.post("/batch")
    def batch():
        payload = request.get_json(silent=True) or {}
        try:
            texts = _texts_from(payload)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        try:
            report = analyzer.run(texts)
        except Exception as exc:  # pragma: no cover - runtime guard
            app.logger.exception("Uncaught exception when handling /batch")
            return jsonify({"error": "Unexpected server error", "detail": str(exc)}), 500
        return jsonify(
            {
                "submitted": report.submitted,
                "written": report.written,
                "failed": report.failed,
                "output": analyzer.writer.path,
            }
        )

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8008)
