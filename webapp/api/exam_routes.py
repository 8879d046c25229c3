"""
Exam API endpoints.

Routes:
    POST /exams                          create an exam
    GET  /exams/<exam_id>                fetch an exam
    POST /exams/<exam_id>/upload-key     OCR an answer-key image and store it unverified
    PUT  /exams/<exam_id>/verify-keys    apply human corrections to the key
    GET  /exams/<exam_id>/verified-keys  list verified keys
    POST /exams/<exam_id>/check-answers  OCR a student sheet and grade it
"""

from flask import Blueprint, current_app, jsonify, request

from answer_grader.constants import FORM_FIELD_IMAGE, MSG_KEYS_VERIFIED
from answer_grader.exceptions import InvalidVerificationPayload, ValidationError
from answer_grader.services import AnswerKeyService, CorrectionService, OCRService

exam_bp = Blueprint("exams", __name__)


def _services() -> dict:
    return current_app.extensions["answer_grader"]


def _key_service() -> AnswerKeyService:
    return _services()["key_service"]


def _correction_service() -> CorrectionService:
    return _services()["correction_service"]


def _ocr_service() -> OCRService:
    return _services()["ocr_service"]


def _uploaded_text() -> str:
    """Read the uploaded image and run it through OCR."""
    upload = request.files.get(FORM_FIELD_IMAGE)
    if upload is None:
        raise ValidationError(
            f"Image file '{FORM_FIELD_IMAGE}' not found", field=FORM_FIELD_IMAGE
        )
    return _ocr_service().extract_text(upload.read())


@exam_bp.route("/exams", methods=["POST"])
def create_exam():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    exam = _key_service().create_exam(data.get("title"))
    return jsonify(exam.to_dict()), 201


@exam_bp.route("/exams/<int:exam_id>", methods=["GET"])
def get_exam(exam_id: int):
    exam = _key_service().get_exam(exam_id)
    return jsonify(exam.to_dict()), 200


@exam_bp.route("/exams/<int:exam_id>/upload-key", methods=["POST"])
def upload_key(exam_id: int):
    raw_text = _uploaded_text()
    records = _key_service().ingest_key(exam_id, raw_text)
    return jsonify([record.to_dict() for record in records]), 201


@exam_bp.route("/exams/<int:exam_id>/verify-keys", methods=["PUT"])
def verify_keys(exam_id: int):
    payload = request.get_json(silent=True)
    if payload is None:
        raise InvalidVerificationPayload("Verification data must be a JSON list")
    _key_service().verify_payload(exam_id, payload)
    return jsonify({"message": MSG_KEYS_VERIFIED}), 200


@exam_bp.route("/exams/<int:exam_id>/verified-keys", methods=["GET"])
def get_verified_keys(exam_id: int):
    keys = _key_service().list_verified_keys(exam_id)
    return jsonify([key.to_dict() for key in keys]), 200


@exam_bp.route("/exams/<int:exam_id>/check-answers", methods=["POST"])
def check_answers(exam_id: int):
    raw_text = _uploaded_text()
    report = _correction_service().check_answers(exam_id, raw_text)
    return jsonify(report.to_dict()), 200
