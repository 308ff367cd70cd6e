from flask import jsonify, request

from examquiz_app.core.error_handlers import success_response
from examquiz_app.utils.request_utils import load_or_400

from . import quiz_api_bp
from .schemas import RandomQuestionSchema, SubmitAnswerSchema
from .services import QuestionDeliveryService, SubmissionService


@quiz_api_bp.route('/submit', methods=['POST'])
def submit_answer():
    """Record an answer and report correctness and mastery."""
    payload = load_or_400(SubmitAnswerSchema(), request.get_json(silent=True))

    submission = SubmissionService.submit_answer(
        payload['uid'], payload['question_id'], payload['answer']
    )
    return jsonify(success_response(result=submission.to_dict()))


@quiz_api_bp.route('/random', methods=['GET'])
def random_question():
    """Serve one random question with shuffled options."""
    params = load_or_400(RandomQuestionSchema(), request.args.to_dict())

    question = QuestionDeliveryService.get_random_question(
        params['subject_name'],
        params['paper_name'],
        params['uid'],
        question_id=params.get('question_id'),
    )
    return jsonify(question)
