"""Static metadata describing the quiz API."""

APP_NAME = "Quiz API"
APP_VERSION = "1.0.0"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Create multiple-choice quizzes, fetch them with the correct answers hidden, "
    "submit answers per question and read the aggregated score of every user."
)
