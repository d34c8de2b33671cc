import logging, sys

def level_from_name(level: str) -> int:
    lvl = getattr(logging, level.upper(), logging.INFO)
    return lvl if isinstance(lvl, int) else logging.INFO

def setup_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    fmt = logging.Formatter('%(asctime)s %(levelname)s %(name)s - %(message)s')
    handler.setFormatter(fmt)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level_from_name(level))
