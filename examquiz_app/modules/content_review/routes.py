from flask import jsonify, request

from examquiz_app.core.error_handlers import success_response
from examquiz_app.utils.request_utils import load_or_400

from . import content_review_api_bp
from .schemas import QuestionStatusSchema
from .services import AutoRejectService, ReviewService


@content_review_api_bp.route('/status', methods=['PUT'])
def update_question_status():
    """Move a question between new, approved and rejected."""
    payload = load_or_400(QuestionStatusSchema(), request.get_json(silent=True))
    question = ReviewService.update_status(
        payload['uid'], payload['question_id'], payload['status'], payload.get('comment')
    )
    return jsonify(success_response(question=question))


@content_review_api_bp.route('/auto-reject', methods=['POST'])
def auto_reject():
    """Reject approved choice questions whose answer stands out by length."""
    rejected_count = AutoRejectService.run()
    return jsonify(success_response(
        message=f"Auto-rejected {rejected_count} questions",
        rejected_count=rejected_count,
    ))
