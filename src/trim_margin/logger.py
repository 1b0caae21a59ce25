import logging

# Console logging for the trim-margin command, the library itself doesn't log
logger = logging.getLogger("trim_margin")
logger.setLevel(logging.DEBUG)

handler = logging.StreamHandler()
handler.setLevel(logging.INFO)
handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", datefmt="%H:%M:%S"))
logger.addHandler(handler)


def set_verbose(verbose: bool) -> None:
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)
