"""Response messages returned in the status envelope of every endpoint."""

QUIZ_CREATED_MESSAGE: str = "Quiz created successfully"
QUIZ_RETRIEVED_MESSAGE: str = "Quiz retrieved successfully"
QUIZZES_RETRIEVED_MESSAGE: str = "Quizzes retrieved successfully"
ANSWER_SUBMITTED_MESSAGE: str = "Answer submitted successfully"
RESULTS_RETRIEVED_MESSAGE: str = "Results retrieved successfully"

VALIDATION_FAILED_MESSAGE: str = "Validation failed"
QUIZ_NOT_FOUND_MESSAGE: str = "Quiz not found"
QUESTION_NOT_FOUND_MESSAGE: str = "Question not found"
INTERNAL_ERROR_MESSAGE: str = "Internal server error"
