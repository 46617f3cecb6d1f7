from account_tracker.models.client import Client
from account_tracker.models.survey import SurveyResponse
from account_tracker.models.dataset import Dataset

__all__ = [
    "Client",
    "SurveyResponse",
    "Dataset",
]
