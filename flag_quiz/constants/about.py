"""Static metadata describing FlagQuiz."""

APP_NAME = "FlagQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "FlagQuiz is a small flag-guessing game built with Qt and FastAPI. "
    "Every country in the dataset is asked exactly once; pick the right name "
    "among countries from the same continent."
)

HELP_TEXT = (
    "A flag and its continent are shown. Choose the country it belongs to.\n\n"
    "Correct answers add one point. After answering, press Next to continue. "
    "When every country has been asked, the final score is shown together "
    "with a per-continent breakdown (or your best score, depending on the "
    "presentation mode chosen in Settings)."
)
