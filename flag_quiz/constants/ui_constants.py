"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "FlagQuiz"
WINDOW_MIN_WIDTH: int = 720
WINDOW_MIN_HEIGHT: int = 640

FLAG_DISPLAY_WIDTH: int = 480
FLAG_DISPLAY_HEIGHT: int = 300
OPTION_GRID_COLUMNS: int = 2
FLASH_DURATION_MS: int = 400
FLAG_CACHE_LIMIT: int = 24

TOOLBAR_RESTART: str = "Restart"
TOOLBAR_SETTINGS: str = "Settings"
TOOLBAR_ABOUT: str = "About FlagQuiz"
TOOLBAR_HELP: str = "Help"

NEXT_BUTTON_TEXT: str = "Next Flag"
PLAY_AGAIN_BUTTON_TEXT: str = "Play Again"
SCORE_TEMPLATE: str = "Score: {score}"
PROGRESS_TEMPLATE: str = "{asked}/{total}"
FLAG_LOADING_TEXT: str = "Loading flag…"
FLAG_UNAVAILABLE_TEXT: str = "Flag image unavailable"

FEEDBACK_CORRECT: str = "Correct!"
FEEDBACK_WRONG_TEMPLATE: str = "Wrong! It was {name}."

GAME_OVER_TITLE: str = "Game Over"
BEST_SCORE_TEMPLATE: str = "Best score: {high_score}"
NEW_BEST_TEMPLATE: str = "New best score: {high_score}!"
BREAKDOWN_ROW_TEMPLATE: str = "{continent}: {percentage}% ({correct}/{total})"

CONFIRM_RESTART_TITLE: str = "Restart game"
CONFIRM_RESTART_MESSAGE: str = "A game is in progress. Start over from the beginning?"
