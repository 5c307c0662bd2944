"""HTTP routes for the audioswap upload API."""

import logging
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request

from audioswap.engine import merge
from audioswap.errors import GENERIC_FAILURE_MESSAGE, AudioSwapError, ClientInputError
from audioswap.models import MergeRequest, new_run_id
from audioswap.web.schemas import UploadForm, ValidationError, describe_errors

logger = logging.getLogger(__name__)

bp = Blueprint("videos", __name__, url_prefix="/videos")


@bp.route("/upload", methods=["POST"])
def upload():
    if "video" not in request.files:
        return jsonify({"error": "No video file provided"}), 400

    f = request.files["video"]
    if not f.filename:
        return jsonify({"error": "Empty filename"}), 400

    try:
        form = UploadForm.model_validate(request.form.to_dict())
    except ValidationError as e:
        return jsonify({"error": "Invalid request", "details": describe_errors(e)}), 400

    settings = current_app.config["SETTINGS"]
    ext = Path(f.filename).suffix
    video_path = Path(current_app.config["WORK_DIR"]) / f"{new_run_id()}{ext}"
    f.save(video_path)

    merge_request = MergeRequest(
        source_video_path=video_path,
        audio_source_url=form.audio_url,
        output_base_name=form.filename,
        audio_start=form.audio_start_time,
        audio_end=form.audio_end_time,
    )

    try:
        result = merge(merge_request, settings)
    except ClientInputError as e:
        return jsonify({"error": str(e)}), 400
    except AudioSwapError:
        # Already logged by the engine with full detail.
        return jsonify({"error": GENERIC_FAILURE_MESSAGE}), 500

    return jsonify({
        "message": "Video processed successfully",
        "output": str(result.output_path),
    })
