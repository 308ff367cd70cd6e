from .question_service import QuestionDeliveryService
from .submission_service import SubmissionService

__all__ = ['QuestionDeliveryService', 'SubmissionService']
