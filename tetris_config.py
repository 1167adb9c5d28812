import os

CONFIG = {
    "FONT_NAME": "dejavusansmono,couriernew,monospace",
    "FONT_SIZE": 22,
    "MARGIN": 16,
    "TICK_HZ": 240,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}


def apply_env_overrides(config=CONFIG, environ=None):
    """Override config entries from TETRIS_<KEY> environment variables."""
    if environ is None:
        environ = os.environ
    for key, default in list(config.items()):
        name = f"TETRIS_{key}"
        raw = environ.get(name)
        if raw is None:
            continue
        if isinstance(default, str):
            config[key] = raw
            continue
        try:
            config[key] = int(raw)
        except ValueError as e:
            raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    return config
