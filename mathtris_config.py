
COLS, ROWS = 10, 20

CONFIG = {
    "CELL_SIZE": 40,
    "TICK_MS": 16,
    "FPS": 60,
    "INITIAL_DROP_MS": 800,
    "BASE_DROP_MS": 1000,
    "DROP_STEP_MS": 80,
    "MIN_DROP_MS": 50,
    "CORRECT_FEEDBACK_MS": 1000,
    "WRONG_FEEDBACK_MS": 1500,
    "QUIZ_BASE_SECONDS": 10,
    "QUIZ_MIN_SECONDS": 7,
    "STREAK_BONUS": 100,
    "STREAK_MILESTONE": 5,
    "MAX_LEVEL": 10,
    "SEED": None,
}


def merged_config(overrides=None) -> dict:
    """Copy of CONFIG with overrides applied; unknown keys are rejected."""
    cfg = dict(CONFIG)
    for key, value in (overrides or {}).items():
        if key not in CONFIG:
            raise KeyError(f"unknown config key: {key}")
        cfg[key] = value
    return cfg
