#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Engine - Flask Web Application

JSON and plain-text access to the version 2-M QR engine.
"""

import logging
from io import BytesIO
from typing import Any, Mapping, Optional, Tuple

from flask import Flask, jsonify, request, send_file

from qrengine import QREngineError, evaluate_all_masks, make_qr

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_BORDER = 4
MAX_BORDER = 20


def _read_params(req) -> Tuple[str, str, int]:
    """Extract and validate QR generation parameters from Flask request.

    ``text`` is returned as sent: space is an alphanumeric character, so
    leading and trailing spaces are part of the payload.
    """
    text = req.values.get('text') or ""
    mask = (req.values.get('mask') or "auto").strip().lower()

    try:
        border = int(req.values.get('border') or DEFAULT_BORDER)
        if border < 0 or border > MAX_BORDER:
            border = DEFAULT_BORDER
    except (ValueError, TypeError):
        border = DEFAULT_BORDER

    return text, mask, border


def _error(message: str, status: int = 400):
    return jsonify({'error': message}), status


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    if config:
        app.config.from_mapping(config)

    @app.errorhandler(QREngineError)
    def handle_engine_error(ex):
        if isinstance(ex, ValueError):
            logger.warning(f"Rejected payload: {ex}")
            return _error(str(ex))
        logger.error(f"QR generation failed: {ex}")
        return _error("Internal QR engine error", 500)

    @app.errorhandler(ValueError)
    def handle_bad_parameter(ex):
        logger.warning(f"Invalid parameters: {ex}")
        return _error(str(ex))

    @app.route('/api/qr', methods=['GET', 'POST'])
    def api_qr():
        text, mask, _ = _read_params(request)
        if not text.strip():
            return _error("Falta texto")
        qr = make_qr(text, mask=mask)

        logger.info(f"Generated QR symbol {qr.version}-{qr.ecc_level} with mask {qr.mask}")
        return jsonify({
            'version': qr.version,
            'ecc': qr.ecc_level,
            'size': qr.size,
            'mask': qr.mask,
            'dark_modules': qr.dark_count(),
            'matrix': qr.rows_as_strings(),
            'raw_hex': qr.hex(),
        })

    @app.route('/api/masks', methods=['GET'])
    def api_masks():
        text, _, _ = _read_params(request)
        if not text.strip():
            return _error("Falta texto")

        logger.info("Evaluating all mask patterns")
        best_mask, best_score, scores = evaluate_all_masks(text)
        logger.info(f"Best mask: {best_mask} (score: {best_score})")
        return jsonify({
            'best_mask': best_mask,
            'best_score': best_score,
            'scores': {str(k): v for k, v in sorted(scores.items())},
        })

    @app.route('/export/txt', methods=['GET'])
    def export_txt():
        text, mask, border = _read_params(request)
        if not text.strip():
            return "Falta texto", 400
        qr = make_qr(text, mask=mask)

        buf = BytesIO(qr.to_text(border=border).encode('utf-8'))
        return send_file(buf, as_attachment=True, download_name='qr.txt', mimetype='text/plain')

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
