# logger_setup.py

import logging
import os
import json

from constants import LOGGER_NAME


def _attach_handlers(logger: logging.Logger, handlers):
    """Swap out whatever handlers the logger had for the given ones."""
    for old in list(logger.handlers):
        old.close()
        logger.removeHandler(old)
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(config_path='config.json', runs_dir='runs'):
    """
    Configures the "heart_particles" logger for one animation run.

    Every run writes to runs/<run_id>/animation.log and echoes to the console.
    Only the application logger is touched; records do not reach the root
    logger, so pygame and Numba keep their own output to themselves.

    Data Contract:
    - Inputs:
        - config_path (str): config.json holding 'run_id' and a 'logging'
          section with 'level' and 'format'. A missing key raises KeyError.
        - runs_dir (str): Where per-run directories are created.
    - Outputs: The configured logger.
    - Side Effects: Creates the run directory. Calling again replaces the
      previous handlers instead of stacking new ones.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)
    run_id = config['run_id']
    level = config['logging']['level']
    formatter = logging.Formatter(config['logging']['format'])

    log_dir = os.path.join(runs_dir, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'animation.log')

    handlers = [logging.FileHandler(log_file), logging.StreamHandler()]
    for handler in handlers:
        handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    _attach_handlers(logger, handlers)

    logger.info(f"Run {run_id} logging at {logging.getLevelName(logger.level)} to {log_file}")
    return logger
