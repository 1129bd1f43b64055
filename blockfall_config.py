
CONFIG = {
    "CELL_SIZE": 20,
    "TICK_MS": 500,
    "AUTO_RESET": False,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
