from barangay_case.mediation.strategy import MediationStrategy, strategize
from barangay_case.mediation.questions import QuestionSet, generate_questions

__all__ = ['MediationStrategy', 'strategize', 'QuestionSet', 'generate_questions']
