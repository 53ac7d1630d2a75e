import logging

from .func import *
from .regex import match_bracket


def log_error(*messages):
    """
    Logs an error that is recoverable, like an invalid declaration in a style sheet
    """
    logging.error(" ".join(map(str, messages)))
