import logging
import os
import sys
from collections.abc import Callable
from functools import wraps
from typing import Any

separator = "".center(60, "-")

def log_test_name(test_name : str) -> None:
    logging.info(separator)
    logging.info(test_name)
    logging.info(separator)

def log_input_expected_result(input : Any, expected : Any, result : Any) -> None:
    logging.info(f"{str(input)}:  expected: {str(expected)}  result: {str(result)}")

def log_input_expected_error(input : Any, expected_error : type[Exception], result : Exception) -> None:
    logging.info(f"{str(input)}:  expected: {expected_error.__name__}  result: {type(result).__name__}: {str(result)}")

def is_debugger_attached() -> bool:
    return sys.gettrace() is not None

def skip_if_debugger_attached(test_name : str) -> bool:
    """
    Tests that exercise error paths are noisy under a debugger that breaks on exceptions
    """
    if is_debugger_attached():
        logging.info(f"Skipping {test_name} because a debugger is attached")
        return True
    return False

def skip_if_debugger_attached_decorator(func : Callable) -> Callable:
    @wraps(func)
    def wrapper(*args, **kwargs):
        if skip_if_debugger_attached(func.__name__):
            return None
        return func(*args, **kwargs)
    return wrapper

def create_logfile(results_path : str, log_name : str, log_level = logging.DEBUG) -> logging.FileHandler:
    """
    Send log output to a file in the results directory
    """
    os.makedirs(results_path, exist_ok=True)
    file_handler = logging.FileHandler(os.path.join(results_path, log_name), encoding='utf-8', mode='w')
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logging.getLogger('').addHandler(file_handler)
    return file_handler
