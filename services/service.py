from config import get_settings
from services.extraction_service import ExtractionService
from services.generate_question_service import GenerateQuestionService

EXTRACTION_SERVICE = None
GENERATE_QUESTION_SERVICE = None


def get_extraction_service():
    global EXTRACTION_SERVICE
    if not EXTRACTION_SERVICE:
        EXTRACTION_SERVICE = ExtractionService(get_settings())
    return EXTRACTION_SERVICE


def get_generate_question_service():
    global GENERATE_QUESTION_SERVICE
    if not GENERATE_QUESTION_SERVICE:
        GENERATE_QUESTION_SERVICE = GenerateQuestionService(get_settings())
    return GENERATE_QUESTION_SERVICE
