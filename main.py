"""
Design System - entry point.
Opens the Button Library gallery window.
"""
from design_system.config import APP_NAME, APP_VERSION, get_logger
from design_system.button_library import launch_button_library

log = get_logger("main")


if __name__ == "__main__":
    log.info(f"Starting {APP_NAME} {APP_VERSION}")
    launch_button_library()
