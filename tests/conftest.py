import pytest

from pysauce.errors import global_error_handler


@pytest.fixture(autouse=True)
def reset_error_handler():
    """Keep global error handler settings and callbacks isolated per test."""
    saved = (
        list(global_error_handler.handlers),
        global_error_handler.log_to_console,
        global_error_handler.log_to_file,
        global_error_handler.log_file,
    )
    yield global_error_handler
    handlers, log_to_console, log_to_file, log_file = saved
    global_error_handler.handlers[:] = handlers
    global_error_handler.configure(
        log_to_console=log_to_console, log_to_file=log_to_file, log_file=log_file
    )
