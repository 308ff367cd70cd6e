from .auto_reject_service import AutoRejectService
from .review_service import ReviewService

__all__ = ['AutoRejectService', 'ReviewService']
