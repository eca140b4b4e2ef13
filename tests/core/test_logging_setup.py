import logging

from compose_manager.core.utils import logger, setup_compose_manager_logging


def test_setup_installs_single_handler_without_propagation():
    setup_compose_manager_logging(logging.DEBUG)
    setup_compose_manager_logging(logging.DEBUG)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_log_format(capsys):
    setup_compose_manager_logging(logging.INFO)

    logger.warning("Command failed with exit code 1: docker-compose ps")

    assert capsys.readouterr().out == "[Compose Manager] [WARNING] Command failed with exit code 1: docker-compose ps\n"
