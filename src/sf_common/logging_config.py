import logging

LOG_FORMAT = "%(asctime)s,%(msecs)03d %(levelname)-8s [%(filename)s:%(lineno)d] %(name)s - %(message)s"


def setup_logging(level: str = "INFO", verbose: bool = False) -> None:
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        level=logging.DEBUG if verbose else level.upper(),
    )
